class RlfmError(Exception):
    """Base class for every error raised by rlfm."""


class ConfigError(RlfmError, ValueError):
    """Raised when build options are out of range or unknown."""


class EmptyInputError(RlfmError, ValueError):
    """Raised when an empty input is built under the reject policy."""
