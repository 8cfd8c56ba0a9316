"""
Main entry point for the Policy Platform.

Runs the command-line interface from a source checkout without installing
the package.
"""

import sys
from pathlib import Path

# Add src to path
sys.path.append(str(Path(__file__).parent / "src"))

from policy_engine.cli import main

if __name__ == "__main__":
    main()
