class ChineseCalendarError(Exception):
    """Base error."""

class UnknownEra(ChineseCalendarError, LookupError):
    """Raised when an era or monarch name is not registered."""

class DuplicateEra(ChineseCalendarError):
    """Raised at build time when two registry entries claim the same name."""

class YearOutOfRange(ChineseCalendarError, LookupError):
    """Raised when a year lies outside its table or on a placeholder entry."""

class UnknownMonth(ChineseCalendarError, LookupError):
    """Raised when a month name does not occur in the resolved year."""

class InvalidDayName(ChineseCalendarError, ValueError):
    """Raised when a day token is neither an ordinal day name nor a sexagenary label."""

class MalformedDateString(ChineseCalendarError, ValueError):
    """Raised when a date string does not follow the date grammar."""

class InvalidLabel(ChineseCalendarError, ValueError):
    """Raised when a string is not one of the 60 sexagenary labels."""

class DateOutOfEra(ChineseCalendarError, ValueError):
    """Raised when a resolved date falls outside every span of its era."""

class TableCorruption(ChineseCalendarError, RuntimeError):
    """Raised when literal table data violates the month-length invariant."""
