"""
Configuration parser for Calgrid.

Handles TOML file parsing. Every setting has a default, so Config() with
no file is a complete configuration.
"""

import tomllib
import os
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional

from .debug import debug_print

DATE_FORMATTERS = ("strftime", "localized")


@dataclass
class DateFormatsConfig:
    """strftime-style format specs passed to the date formatter."""
    week_day: str = "%A"
    day: str = "%d %b"
    month: str = "%B"


@dataclass
class DayViewConfig:
    """Visible hours and slot size of the day/week time grid."""
    start: str = "00:00"
    end: str = "23:00"
    split: int = 30  # minutes per slot


@dataclass
class LocalizationConfig:
    """Configuration for localized day and month names."""
    # Default to English abbreviated day names
    day_names: list[str] = None  # Mon Tue Wed Thu Fri Sat Sun
    # Default to English full month names
    month_names: list[str] = None  # January February ... December
    first_day_of_week: int = 6  # 0=Monday, 6=Sunday

    def __post_init__(self):
        if self.day_names is None:
            self.day_names = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
        if self.month_names is None:
            self.month_names = [
                "January", "February", "March", "April", "May", "June",
                "July", "August", "September", "October", "November", "December"
            ]
        if isinstance(self.first_day_of_week, bool) or not isinstance(self.first_day_of_week, int):
            raise ValueError(f"first_day_of_week must be an integer, got {self.first_day_of_week!r}")
        if not 0 <= self.first_day_of_week <= 6:
            raise ValueError(f"first_day_of_week must be 0-6, got {self.first_day_of_week}")

    def get_day_name(self, weekday: int) -> str:
        """Get localized day name for weekday (0=Monday, 6=Sunday)."""
        return self.day_names[weekday] if 0 <= weekday < len(self.day_names) else ""

    def get_month_name(self, month: int) -> str:
        """Get localized month name (1=January, 12=December)."""
        return self.month_names[month - 1] if 1 <= month <= len(self.month_names) else ""


@dataclass
class Config:
    """Main configuration container for Calgrid."""

    date_formatter: str = "strftime"
    display_all_month_events: bool = False
    timezone: Optional[str] = None
    date_formats: DateFormatsConfig = field(default_factory=DateFormatsConfig)
    day_view: DayViewConfig = field(default_factory=DayViewConfig)
    localization: LocalizationConfig = field(default_factory=LocalizationConfig)

    def __post_init__(self):
        if self.date_formatter not in DATE_FORMATTERS:
            raise ValueError(
                f"Unknown date formatter {self.date_formatter!r}, "
                f"expected one of {', '.join(DATE_FORMATTERS)}"
            )

    @classmethod
    def get_default_config_path(cls) -> Path:
        """Get the default configuration file path."""
        xdg_config = os.environ.get('XDG_CONFIG_HOME', os.path.expanduser('~/.config'))
        return Path(xdg_config) / 'calgrid' / 'calgrid.toml'

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> 'Config':
        """Load configuration from TOML file."""
        if config_path is None:
            config_path = cls.get_default_config_path()

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, 'rb') as f:
            data = tomllib.load(f)
        debug_print("CONFIG", f"TOML data keys: {list(data.keys())}")

        # Parse General section
        general = data.get('General', {})

        # Parse DateFormats section
        formats_data = data.get('DateFormats', {})
        date_formats = DateFormatsConfig(
            week_day=formats_data.get('week_day', DateFormatsConfig.week_day),
            day=formats_data.get('day', DateFormatsConfig.day),
            month=formats_data.get('month', DateFormatsConfig.month),
        )

        # Parse DayView section
        day_view_data = data.get('DayView', {})
        day_view = DayViewConfig(
            start=day_view_data.get('start', DayViewConfig.start),
            end=day_view_data.get('end', DayViewConfig.end),
            split=day_view_data.get('split', DayViewConfig.split),
        )

        # Parse Localization section
        localization_data = data.get('Localization', {})
        day_names_str = localization_data.get('day_names', '')
        month_names_str = localization_data.get('month_names', '')

        # Parse space-separated day names (if provided)
        day_names = day_names_str.split() if day_names_str else None
        # Parse space-separated month names (if provided)
        month_names = month_names_str.split() if month_names_str else None

        localization = LocalizationConfig(
            day_names=day_names,
            month_names=month_names,
            first_day_of_week=localization_data.get(
                'first_day_of_week', LocalizationConfig.first_day_of_week
            ),
        )

        config = cls(
            date_formatter=general.get('date_formatter', 'strftime'),
            display_all_month_events=general.get('display_all_month_events', False),
            timezone=general.get('timezone'),
            date_formats=date_formats,
            day_view=day_view,
            localization=localization,
        )
        debug_print("CONFIG", f"Loaded {config_path}: formatter={config.date_formatter}, "
                              f"timezone={config.timezone}")
        return config
