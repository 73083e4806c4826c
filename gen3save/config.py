"""
Centralized Configuration for the Gen 3 save decoder.

This module provides a single source of truth for the settings of the
tooling around the decoder (knowledge base location, export format) and
the small per-user settings file that remembers the last opened save.

Usage:
    from gen3save.config import config, Gen3SaveConfig, UserSettings

    # Use default config
    db_path = config.database.db_path

    # Remember the last save
    settings = UserSettings.load()
    settings.last_save_path = "firered.sav"
    settings.save()
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = Path.home() / ".gen3save" / "settings.json"


@dataclass
class DatabaseConfig:
    """Knowledge base location."""

    db_path: str = "data/knowledge_base.db"


@dataclass
class ExportConfig:
    """Which optional lines the battle-simulator export includes."""

    include_level: bool = True
    include_nature: bool = True
    include_ability: bool = True
    include_evs: bool = True
    use_nicknames: bool = True


@dataclass
class Gen3SaveConfig:
    """
    Master configuration class.

    Example:
        config = Gen3SaveConfig()
        print(config.database.db_path)  # data/knowledge_base.db
        print(config.export.include_evs)  # True
    """

    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    export: ExportConfig = field(default_factory=ExportConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary for serialization."""
        return {
            "database": self.database.__dict__,
            "export": self.export.__dict__,
        }

    def save(self, path: str | Path) -> None:
        """Save configuration to JSON file."""
        path = Path(path)
        with open(path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, path: str | Path) -> Gen3SaveConfig:
        """Load configuration from JSON file."""
        path = Path(path)
        with open(path) as f:
            data = json.load(f)

        return cls(
            database=DatabaseConfig(**data.get("database", {})),
            export=ExportConfig(**data.get("export", {})),
        )


@dataclass
class UserSettings:
    """Per-user settings persisted between runs."""

    last_save_path: Optional[str] = None

    @classmethod
    def load(cls, path: str | Path = DEFAULT_SETTINGS_PATH) -> UserSettings:
        """Load settings, falling back to defaults if the file is missing or unreadable."""
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return cls()
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable settings file {path}: {e}")
            return cls()
        if not isinstance(data, dict):
            logger.warning(f"Ignoring settings file {path}: expected a JSON object")
            return cls()
        last_save_path = data.get("last_save_path")
        if last_save_path is not None and not isinstance(last_save_path, str):
            logger.warning(f"Ignoring settings file {path}: last_save_path is not a string")
            return cls()
        return cls(last_save_path=last_save_path)

    def save(self, path: str | Path = DEFAULT_SETTINGS_PATH) -> None:
        """Save settings, creating the parent directory if needed."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(asdict(self), f, indent=2)


# Global default configuration instance
config = Gen3SaveConfig()
