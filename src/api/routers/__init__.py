from . import calendars, grading_periods

__all__ = ["calendars", "grading_periods"]
