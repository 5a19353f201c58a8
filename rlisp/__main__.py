import sys

from rlisp.repl import main

sys.exit(main())
