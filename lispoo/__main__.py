import sys

from lispoo.cli import main

sys.exit(main())
