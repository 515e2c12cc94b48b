import sys

from lispy.repl import main

sys.exit(main())
