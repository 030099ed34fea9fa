"""Errors raised by the client."""


class KumaError(Exception):
    """An operation against the server failed."""


class NotFoundError(KumaError, LookupError):
    """A requested object does not exist."""

    def __init__(self, subject: str = "") -> None:
        self.subject = subject
        super().__init__(f"{subject}: not found" if subject else "not found")