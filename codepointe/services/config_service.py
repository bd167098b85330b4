"""Configuration management service"""

import logging
import os
from pathlib import Path
from typing import Optional

import yaml

from ..api.exceptions import ConfigError
from ..constants import PROJECT_CONFIG_FILE, ENV_CLI, ENV_DEBOUNCE
from ..models.config import CodePointeConfig


class ConfigService:
    """Service for managing project configuration"""

    def __init__(self, project_root: Path):
        """Initialize config service

        Args:
            project_root: Project root directory
        """
        self.project_root = Path(project_root)
        self.config_path = self.project_root / PROJECT_CONFIG_FILE
        self._config: Optional[CodePointeConfig] = None
        self.logger = logging.getLogger("ConfigService")

    @property
    def config(self) -> CodePointeConfig:
        """Get current configuration (lazy load)"""
        if self._config is None:
            self.load_config()
        return self._config

    def load_config(self) -> CodePointeConfig:
        """Load configuration from file

        A missing file yields the defaults. Environment overrides are
        applied last.

        Returns:
            Loaded configuration

        Raises:
            ConfigError: The file is not valid YAML or holds invalid values
        """
        data = {}

        if self.config_path.exists():
            with open(self.config_path, 'r') as f:
                content = f.read()

            # Simple environment variable expansion
            content = os.path.expandvars(content)

            try:
                data = yaml.safe_load(content) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {self.config_path}: {e}")

            if not isinstance(data, dict):
                raise ConfigError(f"{self.config_path} must contain a mapping")

        if os.environ.get(ENV_CLI):
            data['cli'] = os.environ[ENV_CLI]
        if os.environ.get(ENV_DEBOUNCE):
            data['debounce_delay'] = os.environ[ENV_DEBOUNCE]

        try:
            self._config = CodePointeConfig.from_dict(data)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid configuration in {self.config_path}: {e}")

        return self._config

    def save_config(self, config: Optional[CodePointeConfig] = None) -> Path:
        """Save configuration to file

        Args:
            config: Configuration to save (uses current if not provided)

        Returns:
            Path of the written file
        """
        if config:
            self._config = config

        data = self.config.to_dict()

        with open(self.config_path, 'w') as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)

        self.logger.info(f"Configuration saved to {self.config_path}")
        return self.config_path
