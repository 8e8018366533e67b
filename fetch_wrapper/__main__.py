"""Allow ``python -m fetch_wrapper``."""

from fetch_wrapper.cli import main

main()
