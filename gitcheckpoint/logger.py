#!/usr/bin/env python3
"""Logging configuration for git-checkpoint."""

import logging
import os
import sys
from pathlib import Path
from typing import Optional
from logging.handlers import RotatingFileHandler


LOG_DIR = Path.home() / '.config' / 'git-checkpoint' / 'logs'


class CheckpointLogger:
    """Manages logging for the checkpoint command."""

    _instance: Optional['CheckpointLogger'] = None
    _logger: logging.Logger

    def __new__(cls):
        """Ensure singleton pattern."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._setup_logger()
        return cls._instance

    def _setup_logger(self):
        """Set up the logger with appropriate handlers."""
        self._logger = logging.getLogger('git_checkpoint')
        self._logger.setLevel(logging.INFO)
        self._logger.propagate = False

        # Remove existing handlers to avoid duplicates
        self._logger.handlers.clear()

        # Git owns the terminal; only problems reach stderr
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        self._logger.addHandler(console_handler)

        if self._is_debug_mode():
            LOG_DIR.mkdir(parents=True, exist_ok=True)

            # 10MB per file, keep 3 backups
            file_handler = RotatingFileHandler(
                LOG_DIR / 'checkpoint.log',
                maxBytes=10 * 1024 * 1024,
                backupCount=3,
                encoding='utf-8'
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            ))
            self._logger.addHandler(file_handler)

            console_handler.setLevel(logging.DEBUG)
            self._logger.setLevel(logging.DEBUG)

    def _is_debug_mode(self) -> bool:
        """Check if debug mode is enabled."""
        return os.environ.get('GIT_CHECKPOINT_DEBUG', '').lower() in ('1', 'true', 'yes')

    def debug(self, message: str):
        self._logger.debug(message)

    def info(self, message: str):
        self._logger.info(message)

    def error(self, message: str):
        self._logger.error(message)


# Global logger instance
logger = CheckpointLogger()
