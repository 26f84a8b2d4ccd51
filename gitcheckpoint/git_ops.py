#!/usr/bin/env python3
"""Git operations used by the checkpoint runner."""

import subprocess
from pathlib import Path
from typing import List, Optional

from .logger import logger


# Exit status a shell reports when the program cannot be run
COMMAND_NOT_FOUND = 127


class GitClient:
    """Runs git commands against a single working copy.

    Output is not captured: git writes straight to the caller's terminal and
    its exit status is handed back unchanged.
    """

    def __init__(self, project_path: Optional[Path] = None, git_executable: str = 'git'):
        # None runs git in the inherited working directory
        self.project_path = Path(project_path) if project_path is not None else None
        self.git_executable = git_executable

    def _run_git(self, args: List[str]) -> subprocess.CompletedProcess:
        """Run a git command and return its completed process."""
        cmd = [self.git_executable] + args
        logger.debug(f"Running {cmd} in {self.project_path or 'current directory'}")
        cwd = str(self.project_path) if self.project_path is not None else None

        try:
            return subprocess.run(cmd, cwd=cwd)
        except OSError as e:
            logger.error(f"{self.git_executable}: {e}")
            return subprocess.CompletedProcess(cmd, COMMAND_NOT_FOUND, '', str(e))

    def stage_all(self) -> subprocess.CompletedProcess:
        """Stage new, modified and deleted paths under the project directory."""
        return self._run_git(['add', '.'])

    def commit(self, message: str) -> subprocess.CompletedProcess:
        """Commit the staged changes with the given message."""
        return self._run_git(['commit', '-m', message])

    def push(self) -> subprocess.CompletedProcess:
        """Push to the configured upstream of the current branch."""
        return self._run_git(['push'])
