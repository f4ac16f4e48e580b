# __main__.py
import sys

from pathtrace.main import main

sys.exit(main())
