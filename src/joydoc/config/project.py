"""Project Configuration for JoyDoc validation

Manages .joydoc/config.json settings that toggle advisory warnings.
"""

import json
import logging
from pathlib import Path

from joydoc.core.context import ValidationContext


logger = logging.getLogger(__name__)


class ProjectConfig:
    """Manages project configuration for JoyDoc validation"""

    DEFAULT_CONFIG = {
        "check_references": True,
        "warn_unknown_types": True,
        "warn_undocumented_values": False,
        "warn_schema_root": True,
    }

    def __init__(self, base_dir: Path | None = None):
        self.base_dir = Path(base_dir) if base_dir else Path.cwd()
        self.joydoc_dir = self.base_dir / ".joydoc"
        self.config_file = self.joydoc_dir / "config.json"

    def exists(self) -> bool:
        """Check if config file exists"""
        return self.config_file.exists()

    def load(self) -> dict:
        """Load config, returning defaults if not exists"""
        if not self.config_file.exists():
            return self.DEFAULT_CONFIG.copy()

        with open(self.config_file) as f:
            try:
                config = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid config file {self.config_file}: {e}") from e

        if not isinstance(config, dict):
            raise ValueError(f"Config file {self.config_file} must contain a JSON object")

        # Merge with defaults for missing keys
        merged = self.DEFAULT_CONFIG.copy()
        merged.update(config)
        logger.debug("Loaded config from %s", self.config_file)
        return merged

    def save(self, config: dict) -> None:
        """Save config to file"""
        self.joydoc_dir.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, 'w') as f:
            json.dump(config, f, indent=2, ensure_ascii=False)

    def init(self, **overrides: bool) -> dict:
        """Initialize project config"""
        unknown = set(overrides) - set(self.DEFAULT_CONFIG)
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")

        config = {**self.DEFAULT_CONFIG, **overrides}
        self.save(config)
        return config

    def to_context(self) -> ValidationContext:
        """Build the ValidationContext described by this config"""
        config = self.load()
        return ValidationContext(
            check_references=bool(config["check_references"]),
            warn_unknown_types=bool(config["warn_unknown_types"]),
            warn_undocumented_values=bool(config["warn_undocumented_values"]),
            warn_schema_root=bool(config["warn_schema_root"]),
        )
