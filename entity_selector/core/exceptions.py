"""
Base exception hierarchy for entity selector operations.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""


class SelectorError(Exception):
    """Base exception for entity selector operations."""

    def __init__(self, message: str, code: str = None, details: dict = None):
        """
        Initialize exception.

        Args:
            message: Human-readable error message
            code: Optional error code for programmatic handling
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


class SelectorSyntaxError(SelectorError):
    """Raised when a selector string does not have the @symbol[args] shape."""

    def __init__(self, message: str, selector: str = None, details: dict = None):
        """
        Initialize syntax error.

        Args:
            message: Error message
            selector: Optional offending selector string
            details: Optional additional details
        """
        super().__init__(message, code="SYNTAX_ERROR", details=details)
        self.selector = selector


class ArgumentError(SelectorError):
    """Raised when a single selector argument cannot be interpreted."""

    def __init__(self, message: str, argument: str = None, details: dict = None):
        """
        Initialize argument error.

        Args:
            message: Error message
            argument: Optional raw argument text
            details: Optional additional details
        """
        super().__init__(message, code="ARGUMENT_ERROR", details=details)
        self.argument = argument


class ResolutionError(SelectorError):
    """Raised when a host lookup (scoreboard, executor, pool) fails."""

    def __init__(self, message: str, target: str = None, details: dict = None):
        """
        Initialize resolution error.

        Args:
            message: Error message
            target: Optional name of the object that could not be resolved
            details: Optional additional details
        """
        super().__init__(message, code="RESOLUTION_ERROR", details=details)
        self.target = target


class ConfigurationError(SelectorError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, config_key: str = None, details: dict = None):
        """
        Initialize configuration error.

        Args:
            message: Error message
            config_key: Optional configuration key that is invalid
            details: Optional additional details
        """
        super().__init__(message, code="CONFIGURATION_ERROR", details=details)
        self.config_key = config_key
