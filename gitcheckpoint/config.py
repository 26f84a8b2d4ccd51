#!/usr/bin/env python3
"""Configuration management for git-checkpoint."""

import json
import os
from pathlib import Path
from typing import Dict, Optional

from .logger import logger


TRUE_VALUES = ('1', 'true', 'yes')
FALSE_VALUES = ('0', 'false', 'no')


class CheckpointConfig:
    """Loads optional settings from a config.json file and the environment."""

    def __init__(self, config_path: Optional[Path] = None):
        if config_path is None:
            env_path = os.environ.get('GIT_CHECKPOINT_CONFIG')
            if env_path:
                config_path = Path(env_path)
            else:
                config_path = Path.home() / ".config" / "git-checkpoint" / "config.json"

        self.config_path = Path(config_path)
        self._config = self._apply_env_overrides(self._load_config())

    def _load_config(self) -> Dict:
        """Load configuration from config file."""
        if not self.config_path.exists():
            return self._default_config()

        try:
            with open(self.config_path, 'r') as f:
                config = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            logger.debug(f"Ignoring unreadable config {self.config_path}: {e}")
            return self._default_config()

        if not isinstance(config, dict):
            logger.debug(f"Ignoring config {self.config_path}: top level is not an object")
            return self._default_config()
        return self._validate_config(config)

    def _default_config(self) -> Dict:
        """Return default configuration."""
        return {
            'fail_fast': False,
            'git_executable': 'git'
        }

    def _validate_config(self, config: Dict) -> Dict:
        """Validate and sanitize configuration values."""
        defaults = self._default_config()
        validated = {}

        # Only real booleans; "false" as a string would otherwise be truthy
        fail_fast = config.get('fail_fast', defaults['fail_fast'])
        if isinstance(fail_fast, bool):
            validated['fail_fast'] = fail_fast
        else:
            validated['fail_fast'] = defaults['fail_fast']

        executable = config.get('git_executable', defaults['git_executable'])
        if isinstance(executable, str) and executable.strip():
            validated['git_executable'] = executable.strip()
        else:
            validated['git_executable'] = defaults['git_executable']

        return validated

    def _apply_env_overrides(self, config: Dict) -> Dict:
        """Let GIT_CHECKPOINT_FAIL_FAST override the file setting."""
        value = os.environ.get('GIT_CHECKPOINT_FAIL_FAST', '').strip().lower()
        if value in TRUE_VALUES:
            config['fail_fast'] = True
        elif value in FALSE_VALUES:
            config['fail_fast'] = False
        elif value:
            logger.debug(f"Ignoring GIT_CHECKPOINT_FAIL_FAST={value!r}")
        return config

    @property
    def fail_fast(self) -> bool:
        """Stop at the first failing git step instead of running all three."""
        return self._config.get('fail_fast', False)

    @property
    def git_executable(self) -> str:
        """Get the git program to invoke."""
        return self._config.get('git_executable', 'git')
