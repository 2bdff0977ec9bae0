"""
Configuration loader with validation and defaults.
"""
import copy
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from .io_utils import load_yaml
from .types import Player

logger = logging.getLogger(__name__)

# Default location for the application-wide settings
DEFAULT_CONFIG_PATH = Path("config/default_config.yaml")


class Config:
    """
    Configuration container with defaults for game, rendering and logging.
    """

    DEFAULTS = {
        "game": {
            "starting_player": "one",
            "one_indexed_input": True,  # Console coordinates start at 1
        },

        # Image rendering (BoardVisualizer)
        "render": {
            "cell_size_px": 120,
            "margin_px": 20,
            "line_thickness": 4,
            "mark_thickness": 8,
        },

        "logging": {
            "level": "WARNING",
        },
    }

    def __init__(self, config_path: Optional[Path] = None):
        """
        Load configuration from file or use defaults.

        Args:
            config_path: Path to config YAML (None = use defaults)
        """
        self.data = copy.deepcopy(self.DEFAULTS)

        if config_path and Path(config_path).exists():
            try:
                user_config = load_yaml(Path(config_path))
                self._merge_config(user_config)
                logger.info(f"Configuration loaded from {config_path}")
            except Exception as e:
                logger.warning(f"Failed to load config: {e}, using defaults")
        else:
            logger.info("Using default configuration")

    def _merge_config(self, user_config: Dict[str, Any]) -> None:
        """Merge user config with defaults."""
        for section, values in user_config.items():
            if section in self.data and isinstance(values, dict):
                self.data[section].update(values)
            else:
                self.data[section] = values

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """Get config value."""
        return (self.data.get(section) or {}).get(key, default)

    def get_section(self, section: str) -> Dict[str, Any]:
        """Get entire config section."""
        return self.data.get(section) or {}

    def starting_player(self) -> Player:
        """
        Player who moves first.

        Falls back to Player.ONE when the configured name is not a player.
        """
        name = self.get("game", "starting_player", "one")
        try:
            return Player.from_name(name)
        except ValueError:
            logger.warning(f"Invalid starting_player {name!r}, using player one")
            return Player.ONE

    def log_level(self) -> int:
        """
        Configured logging level as a number.

        Level names are case-insensitive; unknown names fall back to WARNING.
        """
        level = self.get("logging", "level", "WARNING")
        if isinstance(level, int) and not isinstance(level, bool):
            return level

        resolved = logging.getLevelName(str(level).strip().upper())
        if isinstance(resolved, int):
            return resolved
        logger.warning(f"Unknown logging level {level!r}, using WARNING")
        return logging.WARNING
