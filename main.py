#!/usr/bin/env python3
"""
Cloud Function deployment options checker.

Validates regions and runtime options, attaches them to a trigger family and
prints the resulting deploy trigger as JSON, e.g.:

    python3 main.py --trigger pubsub --resource jobs --region europe-west2 --memory 1GB

This script supports running directly from a source checkout. For regular use,
prefer installing the project and using the ``function-options`` console script.
"""

import os
import sys

# Add src/ to path to import modules directly
REPO_ROOT = os.path.dirname(os.path.abspath(__file__))
SRC_PATH = os.path.join(REPO_ROOT, "src")
if SRC_PATH not in sys.path:
    sys.path.insert(0, SRC_PATH)

from cli import main

if __name__ == "__main__":
    sys.exit(main())
