"""Domain exceptions.

Exception hierarchy:
- FleetConfigError: Base domain exception for invalid fleet declarations.
  All domain-level validation errors inherit from this.
  - InvalidAddressError: A node address is not an IPv4 or IPv6 literal.
- ReconfigurationError: Raised when a live ensemble reconfiguration fails.
  Not a configuration error: the declarations were valid, talking to the
  ensemble was not.
"""


class FleetConfigError(Exception):
    """Raised when a fleet declaration is invalid.

    This is the base exception for all domain-level validation errors.
    It is raised by domain entities (e.g., Acl, EnsembleConfig) and use cases
    (e.g., EnsembleConfigParser) when a declaration cannot be accepted.
    """

    pass


class InvalidAddressError(FleetConfigError):
    """Raised when a node address is neither an IPv4 nor an IPv6 literal.

    Attributes:
        address: The rejected address text.
    """

    def __init__(self, address: str) -> None:
        super().__init__(f"invalid IP address: {address!r}")
        self.address = address


class ReconfigurationError(Exception):
    """Raised when reconfiguring a running ensemble fails.

    Wraps any I/O, protocol or interruption error raised while talking to the
    ensemble admin interface. Never retried by the orchestrator; the next
    topology update naturally retries.

    Attributes:
        message: Human-readable error description.
        joining: Joining server descriptors that were requested.
        leaving: Leaving server descriptors that were requested.
        original_error: The underlying exception that caused the failure (optional).
    """

    def __init__(
        self,
        message: str,
        joining: str = "",
        leaving: str = "",
        original_error: Exception | None = None,
    ) -> None:
        """Initialize ReconfigurationError.

        Args:
            message: Human-readable error description.
            joining: Comma-joined joining server descriptors.
            leaving: Comma-joined leaving server descriptors.
            original_error: The underlying exception that caused the failure.
        """
        super().__init__(message)
        self.message = message
        self.joining = joining
        self.leaving = leaving
        self.original_error = original_error
