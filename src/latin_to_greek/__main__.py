import sys

from latin_to_greek.cli import main

sys.exit(main())
