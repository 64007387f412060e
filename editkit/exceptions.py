"""Project-wide exception types."""

class EditkitError(Exception):
    """Base exception for all editkit errors."""


class EmptyCandidateSet(EditkitError):
    """Raised when a selection is attempted against zero candidates."""


class ConfigError(EditkitError):
    """Raised when configuration is missing or malformed."""


class ConfigValidationError(ConfigError):
    """Raised when validation fails for supplied configuration."""


class SchemaError(EditkitError):
    """Raised when a state file does not have the expected shape."""


class ExternalToolError(EditkitError):
    """Raised when an external executable is missing or cannot be started."""


class ProcessTimeoutError(ExternalToolError):
    """Raised when an external executable exceeds its time budget."""


class DirectoryNotFoundError(EditkitError):
    """Raised when a required directory does not exist."""
