"""Allow ``python -m syscallguard``."""

from syscallguard.cli import main

main()
