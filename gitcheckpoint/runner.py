#!/usr/bin/env python3
"""Stage, commit and push the working copy in one go."""

from pathlib import Path
from typing import List, Optional, Tuple

from .config import CheckpointConfig
from .git_ops import GitClient
from .logger import logger


DEFAULT_MESSAGE = "checkpoint"


def resolve_message(message: Optional[str] = None) -> str:
    """Return the commit message to use.

    Only a missing or empty message falls back to the default; anything else,
    whitespace included, is used exactly as given.
    """
    if message is None or message == "":
        return DEFAULT_MESSAGE
    return message


class CheckpointRunner:
    """Runs ``git add .``, ``git commit -m <message>`` and ``git push`` in order."""

    def __init__(self, project_path: Optional[Path] = None,
                 config: Optional[CheckpointConfig] = None,
                 git: Optional[GitClient] = None):
        self.project_path = Path(project_path) if project_path is not None else None
        self.config = config if config is not None else CheckpointConfig()
        if git is None:
            git = GitClient(self.project_path, self.config.git_executable)
        self.git = git
        self.steps: List[Tuple[str, int]] = []

    def run(self, message: Optional[str] = None) -> int:
        """Create and push a checkpoint commit.

        Returns the exit status of the last git command executed. Every step
        runs even when an earlier one failed, unless fail_fast is configured.
        """
        message = resolve_message(message)
        self.steps = []

        operations = [
            ('stage', self.git.stage_all),
            ('commit', lambda: self.git.commit(message)),
            ('push', self.git.push),
        ]

        returncode = 0
        for name, operation in operations:
            returncode = operation().returncode
            self.steps.append((name, returncode))

            if returncode != 0:
                logger.debug(f"step '{name}' exited with status {returncode}")
                if self.config.fail_fast:
                    logger.debug("fail_fast is set, skipping remaining steps")
                    break

        logger.info(f"Checkpoint '{message}' finished with status {returncode}")
        return returncode
