import sys

from chessrules.app import main

sys.exit(main())
