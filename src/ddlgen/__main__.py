import sys

from ddlgen.cli import main

sys.exit(main())
