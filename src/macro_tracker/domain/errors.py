"""Domain error types."""


class MacroTrackerError(Exception):
    """Base class for expected application errors."""


class ProfileValidationError(MacroTrackerError):
    """Raised when body stats cannot produce meaningful targets."""


class LogDateMismatchError(MacroTrackerError):
    """Raised when an entry is added to a log for a different date."""


class FoodAnalysisError(MacroTrackerError):
    """Raised when a photo could not be turned into a food estimate."""


class InvalidImageError(MacroTrackerError):
    """Raised when an uploaded image payload cannot be decoded."""


class InvalidTransitionError(MacroTrackerError):
    """Raised when a navigation event is not valid for the current view."""
