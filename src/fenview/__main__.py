"""Allow ``python -m fenview``."""

from fenview.app import main

main()
