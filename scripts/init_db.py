#!/usr/bin/env python3
"""
Standalone database initialization script
Can be run from the host machine or inside a container
"""

import sys
import os

# Ensure we're using the right Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from scripts.init_databases import main

if __name__ == "__main__":
    print("\n" + "=" * 60)
    print("ChefExpress Database Initialization (Standalone)")
    print("=" * 60 + "\n")

    exit_code = main()

    if exit_code == 0:
        print("\nSUCCESS! Schema created and catalog seeded.\n")
    else:
        print("\nFAILED! Check the errors above.\n")

    sys.exit(exit_code)
