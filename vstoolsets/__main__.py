"""
Entry point for running vstoolsets CLI as a module.

Usage: python -m vstoolsets [command] [options]
"""

from vstoolsets.cli.parser import main

if __name__ == "__main__":
    main()
