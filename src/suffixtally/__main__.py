import sys

from suffixtally.cli import main

sys.exit(main())
