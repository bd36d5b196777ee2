"""Day-of-week enumeration and classification."""

from .days import Day, DayType, get_day_type, parse_day

__all__ = ["Day", "DayType", "get_day_type", "parse_day"]
