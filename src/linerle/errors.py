from __future__ import annotations


class LineRLEError(Exception):
    """Base class for fatal encoder errors."""


class AccessError(LineRLEError):
    """
    A path failed the accessibility pre-check (missing, unreadable or unwritable).

    Fatal: the invocation stops and no summary is printed.
    """

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Opening file: {path}. {reason}")
