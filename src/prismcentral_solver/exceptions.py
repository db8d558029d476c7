"""Solver exceptions."""


class SolverError(Exception):
    """Base exception for challenge solving failures.

    Carries a human-readable message and, where one exists, the
    underlying exception that caused the failure.
    """

    def __init__(self, message: str, cause: BaseException | None = None):
        self.message = message
        self.cause = cause
        super().__init__(message if cause is None else f"{message}: {cause}")


class ConfigDecodeError(SolverError):
    """The per-issuer solver configuration could not be decoded."""

    pass


class RequestBuildError(SolverError):
    """The trigger payload could not be serialized."""

    pass


class TransportError(SolverError):
    """The webhook endpoint could not be reached."""

    pass


class UnexpectedStatusError(SolverError):
    """The webhook endpoint answered with a status other than 200."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"received non-OK response code: {status_code}")


class SettingsError(Exception):
    """Process settings are missing or invalid at startup."""

    pass
