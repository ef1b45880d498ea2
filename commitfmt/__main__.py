import sys

from commitfmt.cli.main import main

sys.exit(main())
