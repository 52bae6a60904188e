import sys

from identicon.cli import main

sys.exit(main())
