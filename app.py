#!/usr/bin/env python3
"""
RDS Database Bootstrap

Runs the bootstrap from a source checkout without installing the package.

Usage:
    python app.py            # Connect once and report
    python app.py --check    # Connect and run a version query
"""

import os
import sys

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "src"))

from rds_bootstrap.main import main


if __name__ == "__main__":
    sys.exit(main())
