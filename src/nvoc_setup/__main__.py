import sys

from nvoc_setup.cli import main

sys.exit(main())
