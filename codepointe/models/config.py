"""Configuration data models"""

import logging
from dataclasses import dataclass, fields
from typing import Dict, Any

from ..constants import (
    DEFAULT_CLI,
    DEFAULT_ZIP_COMMAND,
    DEFAULT_DEBOUNCE_DELAY,
    HOOKS_FILE,
    DEFAULT_SOURCE_DIR,
    DEFAULT_STATIC_RESOURCES_DIR,
    DEFAULT_RESOURCE_BUNDLES_DIR,
    DEFAULT_CONVERT_DIR,
)

logger = logging.getLogger(__name__)


@dataclass
class CodePointeConfig:
    """Per-project settings"""

    cli: str = DEFAULT_CLI
    zip_command: str = DEFAULT_ZIP_COMMAND
    debounce_delay: float = DEFAULT_DEBOUNCE_DELAY
    source_dir: str = DEFAULT_SOURCE_DIR
    static_resources_dir: str = DEFAULT_STATIC_RESOURCES_DIR
    resource_bundles_dir: str = DEFAULT_RESOURCE_BUNDLES_DIR
    convert_dir: str = DEFAULT_CONVERT_DIR
    hooks_file: str = HOOKS_FILE

    def __post_init__(self):
        """Validate configuration"""
        try:
            self.debounce_delay = float(self.debounce_delay)
        except (TypeError, ValueError):
            raise ValueError(f"debounce_delay must be a number, got {self.debounce_delay!r}")

        if self.debounce_delay < 0:
            raise ValueError("debounce_delay must not be negative")

        for f in fields(self):
            if f.type is str and not getattr(self, f.name):
                raise ValueError(f"{f.name} must not be empty")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CodePointeConfig':
        """Create from dictionary, ignoring unknown keys"""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {', '.join(unknown)}")

        return cls(**{k: v for k, v in data.items() if k in known})
