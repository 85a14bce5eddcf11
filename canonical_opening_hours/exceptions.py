class COHError(Exception):
    """Base class for COH errors."""
    pass


class ValidationError(COHError, ValueError):
    """
    Raised by the validators when a part of a rule can't be
    written as a valid opening_hours field.
    """
    pass


class EventResolutionError(COHError):
    """
    Raised when an event (sunrise, sunset, dawn or dusk) can't be
    placed at a time of the day.
    """
    pass
