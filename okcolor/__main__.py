import sys

from okcolor.cli import main

sys.exit(main())
