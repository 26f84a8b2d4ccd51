#!/usr/bin/env python3
"""
Stage, commit and push the current working copy in one command.

    ./git-checkpoint.py                 # commits as "checkpoint"
    ./git-checkpoint.py "fix typo"      # commits as "fix typo"
"""

import sys
from pathlib import Path

# Allow running from a checkout without installing
sys.path.insert(0, str(Path(__file__).parent))

from gitcheckpoint.cli import main


if __name__ == '__main__':
    sys.exit(main())
