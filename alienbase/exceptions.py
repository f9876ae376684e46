"""Exception types raised by the simulation base layer."""


class BugReportException(RuntimeError):
    """An internal invariant was violated; the situation indicates a bug."""


class SpecificCudaException(RuntimeError):
    """A failure reported by the GPU backend."""


class SystemRequirementNotMetException(RuntimeError):
    """The host system does not meet a requirement of the simulation."""


class ParseErrorException(RuntimeError):
    """Input data could not be parsed."""


def check(expression) -> None:
    """Raise BugReportException if ``expression`` is falsy."""
    if not expression:
        raise BugReportException("check failed")