import sys

from metcast.cli import main

sys.exit(main())
