"""
Configuration - TJBot hardware and logging settings.

Loaded from YAML or JSON (chosen by file suffix). Any section or key missing
from the file keeps its default, so a file only needs what it changes:

    shine:
      neopixel:
        gpio_pin: 21
        grb_format: true
"""

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

logger = logging.getLogger(__name__)

LOG_LEVELS = ("error", "warn", "info", "verbose", "debug", "silly")


@dataclass
class LogConfig:
    """Logging configuration."""
    level: str = "info"  # error | warn | info | verbose | debug | silly


@dataclass
class NeopixelConfig:
    """Addressable NeoPixel LED."""
    gpio_pin: int = 18
    grb_format: bool = False  # most WS2812 strips expect GRB
    num_pixels: int = 1


@dataclass
class CommonAnodeConfig:
    """Common-anode RGB LED, one PWM pin per channel."""
    red_pin: int = 19
    green_pin: int = 13
    blue_pin: int = 12
    frequency: int = 800  # Hz


@dataclass
class DotStarConfig:
    """DotStar LED (clock + data)."""
    clock_pin: int = 6
    data_pin: int = 5
    num_pixels: int = 1
    brightness: float = 0.12


@dataclass
class ShineConfig:
    """LED configuration for the shine capability."""
    neopixel: NeopixelConfig = field(default_factory=NeopixelConfig)
    common_anode: CommonAnodeConfig = field(default_factory=CommonAnodeConfig)
    dotstar: DotStarConfig = field(default_factory=DotStarConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ShineConfig":
        return cls(
            neopixel=NeopixelConfig(**data.get("neopixel", {})),
            common_anode=CommonAnodeConfig(**data.get("common_anode", {})),
            dotstar=DotStarConfig(**data.get("dotstar", {})),
        )


@dataclass
class TJBotConfig:
    """Complete TJBot configuration."""
    log: LogConfig = field(default_factory=LogConfig)
    shine: ShineConfig = field(default_factory=ShineConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "TJBotConfig":
        """Create from dictionary, filling gaps with defaults."""
        data = data or {}
        return cls(
            log=LogConfig(**data.get("log", {})),
            shine=ShineConfig.from_dict(data.get("shine", {})),
        )

    def validate(self) -> Tuple[bool, Optional[str]]:
        """Validate configuration values are sensible."""
        if self.log.level.lower() not in LOG_LEVELS:
            return False, f"log.level must be one of {', '.join(LOG_LEVELS)}"

        neo = self.shine.neopixel
        if neo.gpio_pin < 0:
            return False, "shine.neopixel.gpio_pin must be >= 0"
        if neo.num_pixels < 1:
            return False, "shine.neopixel.num_pixels must be >= 1"

        anode = self.shine.common_anode
        pins = (anode.red_pin, anode.green_pin, anode.blue_pin)
        if any(p < 0 for p in pins):
            return False, "shine.common_anode pins must be >= 0"
        if len(set(pins)) != 3:
            return False, "shine.common_anode pins must be distinct"
        if anode.frequency <= 0:
            return False, "shine.common_anode.frequency must be positive"

        dots = self.shine.dotstar
        if dots.clock_pin == dots.data_pin:
            return False, "shine.dotstar clock_pin and data_pin must differ"
        if dots.num_pixels < 1:
            return False, "shine.dotstar.num_pixels must be >= 1"
        if not (0 <= dots.brightness <= 1):
            return False, "shine.dotstar.brightness must be 0-1"

        return True, None


class ConfigManager:
    """Manages configuration loading and saving."""

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """
        Initialize config manager.

        Args:
            config_path: Path to config file (default: tjbot.yaml in current dir)
        """
        if config_path is None:
            config_path = Path("tjbot.yaml")
        self.config_path = Path(config_path)
        self._config: Optional[TJBotConfig] = None

    def _is_yaml(self) -> bool:
        return self.config_path.suffix in (".yaml", ".yml")

    def load(self, force_reload: bool = False) -> TJBotConfig:
        """Load configuration from file or return defaults."""
        if self._config is not None and not force_reload:
            return self._config

        if not self.config_path.exists():
            self._config = TJBotConfig()
            return self._config

        try:
            with open(self.config_path, "r") as f:
                data = yaml.safe_load(f) if self._is_yaml() else json.load(f)
            self._config = TJBotConfig.from_dict(data)
            valid, error = self._config.validate()
        except (OSError, ValueError, TypeError, AttributeError, yaml.YAMLError) as e:
            logger.warning("Error loading config %s, using defaults: %s", self.config_path, e)
            self._config = TJBotConfig()
            return self._config

        if not valid:
            logger.warning("Invalid config %s, using defaults: %s", self.config_path, error)
            self._config = TJBotConfig()

        return self._config

    def save(self, config: Optional[TJBotConfig] = None) -> bool:
        """
        Save configuration to file.

        Returns:
            True if saved successfully
        """
        if config is None:
            config = self._config or self.load()

        valid, error = config.validate()
        if not valid:
            logger.warning("Cannot save invalid config: %s", error)
            return False

        data = config.to_dict()
        try:
            with open(self.config_path, "w") as f:
                if self._is_yaml():
                    yaml.dump(data, f, default_flow_style=False, sort_keys=False)
                else:
                    json.dump(data, f, indent=2)
        except OSError as e:
            logger.error("Error saving config %s: %s", self.config_path, e)
            return False

        self._config = config
        return True

    def reload(self) -> TJBotConfig:
        """Force reload configuration from file."""
        self._config = None
        return self.load()


_config_manager: Optional[ConfigManager] = None


def get_config_manager(config_path: Optional[Union[str, Path]] = None) -> ConfigManager:
    """Get global config manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager(config_path)
    return _config_manager
