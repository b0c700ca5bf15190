"""Exception types for the Monty Hall simulator."""


class MontyHallError(Exception):
    """Base class for all simulator errors."""


class InvalidArgumentError(MontyHallError, ValueError):
    """Raised when a caller passes a bad argument (e.g. a non-positive trial count)."""


class ContractViolationError(MontyHallError, RuntimeError):
    """Raised when an internal invariant is broken.

    These indicate a programming error rather than bad input and are never
    recovered from: the run halts instead of producing a corrupted statistic.
    """
