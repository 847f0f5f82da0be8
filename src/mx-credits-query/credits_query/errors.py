class InvalidArgumentError(ValueError):
    """Raised when a component is built with a missing or empty dependency."""


class TransportError(RuntimeError):
    """Raised when a VM query could not be executed against the proxy."""


class ContractPausedCheckError(TransportError):
    """Transport failure during the paused check; the contract must be treated as paused."""

    paused = True


class ValueOutOfRangeError(ValueError):
    """Raised when a returned integer does not fit in an unsigned 64-bit value."""
