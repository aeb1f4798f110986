import sys

from farehop.presentation.cli import main

sys.exit(main())
