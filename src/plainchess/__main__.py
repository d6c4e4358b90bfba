import sys

from plainchess.app import main

sys.exit(main())
