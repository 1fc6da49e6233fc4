import sys

from svgweb.cli import main

sys.exit(main())
