# campus_nav/errors.py


class NavigationError(Exception):
    """Base class for errors raised at the navigation boundary."""


class InvalidQueryError(NavigationError, ValueError):
    """A query coordinate is missing, non-numeric or non-finite."""

    def __init__(self, field: str, value: object, reason: str = "must be a finite number"):
        self.field, self.value, self.reason = field, value, reason
        super().__init__(f"{field}={value!r} {reason}")


class SceneManifestError(NavigationError):
    """A scene manifest could not be read or failed validation."""
