"""Configuration Management Package"""

import json
import sys
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Optional

from commitfmt import WRAP_WIDTH


@dataclass
class Config:
    """User configuration with sensible defaults."""
    wrap_width: int = WRAP_WIDTH
    trailer_prefixes: list[str] = field(default_factory=list)  # Extra footer lines to treat like Signed-off-by
    in_place: bool = False  # Rewrite FILE arguments instead of printing

    def to_dict(self) -> dict:
        return {k: v for k, v in asdict(self).items() if v is not None}

    def validate(self) -> list[str]:
        """Validate config values and return list of warnings.

        Invalid values are replaced with defaults silently after warning.
        """
        warnings = []
        defaults = Config()

        if not isinstance(self.wrap_width, int) or isinstance(self.wrap_width, bool) or self.wrap_width <= 0:
            warnings.append(f"Invalid wrap_width '{self.wrap_width}', using {defaults.wrap_width}")
            self.wrap_width = defaults.wrap_width

        if not isinstance(self.trailer_prefixes, list) or not all(isinstance(p, str) for p in self.trailer_prefixes):
            warnings.append(f"Invalid trailer_prefixes '{self.trailer_prefixes}', using []")
            self.trailer_prefixes = defaults.trailer_prefixes

        if not isinstance(self.in_place, bool):
            warnings.append(f"Invalid in_place '{self.in_place}', using {str(defaults.in_place).lower()}")
            self.in_place = defaults.in_place

        return warnings

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        config = cls(**filtered)
        # Validate and print warnings to stderr
        for warning in config.validate():
            print(f"Config warning: {warning}", file=sys.stderr)
        return config


class ConfigManager:
    """Manages loading and saving configuration.

    Lookup order: .commitfmtrc in the current directory, then in the home
    directory, then defaults.
    """

    CONFIG_FILENAME = ".commitfmtrc"

    def __init__(self):
        self._config: Optional[Config] = None
        self._config_path: Optional[Path] = None

    def load(self) -> Config:
        if self._config is not None:
            return self._config

        for path in (Path.cwd() / self.CONFIG_FILENAME, Path.home() / self.CONFIG_FILENAME):
            if path.exists():
                self._config = self._load_from_file(path)
                self._config_path = path
                return self._config

        self._config = Config()
        return self._config

    def _load_from_file(self, path: Path) -> Config:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            print(f"Warning: Could not load {path}: {e}", file=sys.stderr)
            return Config()
        if not isinstance(data, dict):
            print(f"Warning: Could not load {path}: expected a JSON object", file=sys.stderr)
            return Config()
        return Config.from_dict(data)

    def save(self, config: Config, global_config: bool = True) -> Path:
        path = Path.home() / self.CONFIG_FILENAME if global_config else Path.cwd() / self.CONFIG_FILENAME
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(config.to_dict(), f, indent=2)
        return path

    def get_config_path(self) -> Optional[Path]:
        return self._config_path


_manager = ConfigManager()


def load_config() -> Config:
    return _manager.load()


def save_config(config: Config, global_config: bool = True) -> Path:
    return _manager.save(config, global_config)


def get_config_path() -> Optional[Path]:
    return _manager.get_config_path()


__all__ = [
    "Config",
    "ConfigManager",
    "load_config",
    "save_config",
    "get_config_path",
]
