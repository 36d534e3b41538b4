import sys

from src.shell.cli import main

sys.exit(main())
