import sys

from microlist.run import main

sys.exit(main())
