import sys

from testgate.cli import main

sys.exit(main())
