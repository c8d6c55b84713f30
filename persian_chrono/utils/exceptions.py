class CalendarError(Exception):
    """Base exception class for calendar conversion errors"""
    def __init__(self, message: str = None):
        self.message = message
        super().__init__(self.message)

class OutOfRangeError(CalendarError):
    """Raised when a date falls outside the supported conversion span"""
    def __init__(self, message: str = None, value: tuple = None):
        self.value = value
        super().__init__(message)

class InvalidDateError(CalendarError):
    """Raised when year/month/day do not name a real calendar day"""
    def __init__(self, message: str = None, value: tuple = None):
        self.value = value
        super().__init__(message)

class ConfigError(CalendarError):
    """Raised when there's an error in configuration"""
    pass
