import sys

from hillclimb.cli import main

sys.exit(main())
