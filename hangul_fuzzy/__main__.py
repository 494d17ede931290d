import sys

from hangul_fuzzy.cli import main

sys.exit(main())
