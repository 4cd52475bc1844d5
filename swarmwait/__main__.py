"""Allow ``python -m swarmwait``."""

from swarmwait.cli import main

main()
