"""Fixed design parameters.

The identicon layout is not configurable at runtime: a 16 byte digest feeds a
5x5 grid built from 3 source columns per row, drawn as 50 pixel squares on a
250x250 canvas and written as PNG.
"""

DIGEST_SIZE = 16
GRID_SIZE = 5
SOURCE_COLUMNS = 3
CELL_COUNT = GRID_SIZE * GRID_SIZE
CELL_SIZE = 50
CANVAS_SIZE = GRID_SIZE * CELL_SIZE

BACKGROUND = (255, 255, 255)
IMAGE_MODE = "RGB"
IMAGE_FORMAT = "PNG"
IMAGE_EXTENSION = "png"
