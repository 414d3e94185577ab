"""
Entry point for running buildmatrix CLI as a module.

Usage: python -m buildmatrix.cli [command] [options]
"""

from .parser import main

if __name__ == "__main__":
    main()
