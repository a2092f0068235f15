import sys

from gridpath.cli import main

sys.exit(main())
