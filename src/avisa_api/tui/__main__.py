import sys

from avisa_api.tui import main

sys.exit(main())
