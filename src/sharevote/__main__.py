import sys

from sharevote.cli import main

sys.exit(main())
