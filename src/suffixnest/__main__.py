import sys

from suffixnest.cli import main

sys.exit(main())
