#!/usr/bin/env python3
"""
Git checkpoint command.
Stages, commits and pushes the working copy in a single step.
"""

from .config import CheckpointConfig
from .git_ops import GitClient
from .runner import CheckpointRunner, DEFAULT_MESSAGE, resolve_message
from .logger import logger

__version__ = "1.0.0"
__all__ = [
    "CheckpointConfig", "GitClient", "CheckpointRunner",
    "DEFAULT_MESSAGE", "resolve_message", "logger"
]
