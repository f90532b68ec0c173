"""
Entry point for running gutensearch as a module: python -m gutensearch
"""

from gutensearch.cli.commands import main

if __name__ == "__main__":
    raise SystemExit(main())
