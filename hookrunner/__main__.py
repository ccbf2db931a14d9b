import sys

from hookrunner.cli import main

sys.exit(main())
