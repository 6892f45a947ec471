import sys

from bmglyph.cli import main


sys.exit(main())
