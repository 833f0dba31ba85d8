"""
sixfa: Compound TOTP Command Line

Entry point for running sixfa from a source checkout.
"""

import sys

from sixfa.main import main

if __name__ == "__main__":
    sys.exit(main())
