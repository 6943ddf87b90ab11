"""Domain enumerations for the Schedule Timeline application."""

from enum import Enum


class TimelineViewMode(str, Enum):
    """Timeline view mode enumeration (axis granularity and label format)"""

    DAY = "day"
    HOUR = "hour"

    @classmethod
    def values(cls) -> list[str]:
        """Get all valid values"""
        return [mode.value for mode in cls]

    @classmethod
    def is_supported(cls, mode: str | None) -> bool:
        """Check whether a raw mode string names a supported view mode"""
        return mode in cls.values()
