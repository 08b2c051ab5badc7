import sys

from src.vortex.cli import main

sys.exit(main())
