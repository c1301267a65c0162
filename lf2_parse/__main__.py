import sys

from lf2_parse.cli import main

sys.exit(main())
