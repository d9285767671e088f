"""
Date label formatting.

Two back-ends: plain strftime, which follows the process locale, and
"localized", which takes day and month names from LocalizationConfig.
"""

from datetime import date
from typing import Callable, Optional

from .config import DATE_FORMATTERS, LocalizationConfig

FormatFunc = Callable[[date, str], str]


class DateFormatter:
    """Callable formatter: formatter(date, spec) -> str."""

    def __init__(self, kind: str = "strftime", localization: Optional[LocalizationConfig] = None):
        if kind not in DATE_FORMATTERS:
            raise ValueError(f"Unknown date formatter {kind!r}")
        self.kind = kind
        self.localization = localization or LocalizationConfig()

    def __call__(self, value: date, spec: str) -> str:
        return self.format(value, spec)

    def format(self, value: date, spec: str) -> str:
        if self.kind == "localized":
            spec = self._substitute_names(value, spec)
        return value.strftime(spec)

    def _substitute_names(self, value: date, spec: str) -> str:
        """Replace name directives with configured names, escaped for strftime."""
        day_name = self.localization.get_day_name(value.weekday()).replace('%', '%%')
        month_name = self.localization.get_month_name(value.month).replace('%', '%%')
        out = []
        i = 0
        while i < len(spec):
            if spec[i] == '%' and i + 1 < len(spec):
                directive = spec[i + 1]
                if directive in 'aA':
                    out.append(day_name)
                elif directive in 'bB':
                    out.append(month_name)
                else:
                    out.append(spec[i:i + 2])
                i += 2
            else:
                out.append(spec[i])
                i += 1
        return ''.join(out)
