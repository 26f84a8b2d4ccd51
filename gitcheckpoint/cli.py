#!/usr/bin/env python3
"""
Command-line entry point for git-checkpoint.

Usage: git-checkpoint [message]

Stages everything, commits with the message ("checkpoint" if omitted) and
pushes. There are no options: the first argument is always the message, even
when it starts with a dash.
"""

import sys
from typing import List, Optional

from .runner import CheckpointRunner


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = sys.argv[1:] if argv is None else argv
    message = args[0] if args else None

    # The working directory is left to git, which reports it if it is gone
    runner = CheckpointRunner()
    return runner.run(message)


if __name__ == '__main__':
    sys.exit(main())
