import sys

from rectlayout.cli import main

sys.exit(main())
