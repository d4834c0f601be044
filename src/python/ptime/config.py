"""
Configuration settings for ptime.

Settings are grouped into dataclass sections with built-in defaults. With no
configuration file, only the defaults apply. A YAML file passed with
``--config`` may override any section:

    scan:
      extensions: [jpg, jpeg, tif, tiff]
    histogram:
      default_width: 60
    logging:
      level: INFO

Example:
    >>> config = Config()
    >>> config.histogram.max_width
    200
    >>> config = Config.load_from_file("ptime.yaml")
"""

import logging
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Tuple, Union

import yaml

logger = logging.getLogger(__name__)

BLOCK_CHAR = "█"


@dataclass
class ScanConfig:
    """Directory scanning settings.

    Attributes:
        extensions: Accepted image file extensions, lowercase, no leading dot
    """
    extensions: Tuple[str, ...] = ("jpg", "jpeg")

    def __post_init__(self):
        self.extensions = tuple(ext.lower().lstrip(".") for ext in self.extensions)


@dataclass
class HistogramConfig:
    """Histogram rendering settings.

    Attributes:
        default_width: Bar width used when --width is not given
        max_width: Widths above this are clamped silently
        bar_char: Glyph repeated to draw each bar
    """
    default_width: int = 50
    max_width: int = 200
    bar_char: str = BLOCK_CHAR

    def __post_init__(self):
        if self.max_width < 1:
            raise ValueError(f"histogram.max_width must be at least 1, got {self.max_width}")
        if not 1 <= self.default_width <= self.max_width:
            raise ValueError(
                f"histogram.default_width must be between 1 and {self.max_width}, "
                f"got {self.default_width}"
            )
        if len(self.bar_char) != 1:
            raise ValueError(f"histogram.bar_char must be a single character, got {self.bar_char!r}")

    def clamp_width(self, width: int) -> int:
        """Clamp a requested bar width to max_width."""
        return min(width, self.max_width)


@dataclass
class LoggingConfig:
    """Logging settings.

    Attributes:
        level: Root logging level (DEBUG, INFO, WARNING, ERROR)
    """
    level: str = "WARNING"


@dataclass
class Config:
    """Main configuration class for ptime.

    Attributes:
        scan: Directory scanning settings
        histogram: Histogram rendering settings
        logging: Logging settings
    """
    scan: ScanConfig = field(default_factory=ScanConfig)
    histogram: HistogramConfig = field(default_factory=HistogramConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create a Config from a dictionary, keeping defaults for missing keys.

        Args:
            data: Dictionary with optional ``scan``, ``histogram`` and ``logging`` sections

        Returns:
            Config instance

        Raises:
            ValueError: If the dictionary has unknown sections or keys
        """
        sections = {f.name: f.default_factory for f in fields(cls)}
        unknown = set(data) - set(sections)
        if unknown:
            raise ValueError(f"Unknown config section(s): {', '.join(sorted(unknown))}")

        kwargs = {}
        for name, section_cls in sections.items():
            values = data.get(name) or {}
            if not isinstance(values, dict):
                raise ValueError(f"Config section '{name}' must be a mapping")
            allowed = {f.name for f in fields(section_cls)}
            bad_keys = set(values) - allowed
            if bad_keys:
                raise ValueError(
                    f"Unknown key(s) in config section '{name}': {', '.join(sorted(bad_keys))}"
                )
            kwargs[name] = section_cls(**values)
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary."""
        return asdict(self)

    @classmethod
    def load_from_file(cls, path: Union[str, Path]) -> "Config":
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML file

        Returns:
            Config instance with the file's overrides applied
        """
        logger.info("Loading config from %s", path)
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping")
        return cls.from_dict(data)
