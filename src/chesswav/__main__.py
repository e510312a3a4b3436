import sys

from chesswav.app import main

sys.exit(main())
