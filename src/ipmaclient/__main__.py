"""
Main entry point for the IPMA client.
"""

import sys
from ipmaclient.cli import main

if __name__ == "__main__":
    sys.exit(main())
