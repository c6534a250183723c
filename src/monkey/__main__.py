"""Allow ``python -m monkey``."""

from monkey.cli import main

main()
