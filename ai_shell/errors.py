class AiShellError(Exception):
    """Base class for errors raised by AI Shell."""


class ConfigurationError(AiShellError):
    """Raised when the runtime configuration is missing or unusable."""
