import sys

from leavecalc.cli import main

sys.exit(main())
