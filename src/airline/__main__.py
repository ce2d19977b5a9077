import sys

from airline.app import main

sys.exit(main())
