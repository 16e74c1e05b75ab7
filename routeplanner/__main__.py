"""Allow ``python -m routeplanner``."""

from routeplanner.cli import main

main()
