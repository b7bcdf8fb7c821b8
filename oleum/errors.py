from __future__ import annotations


class OleumError(Exception):
    """Base class for every error a screen is expected to catch and display."""

    def __init__(self, message: str = "An error occurred") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class NotFound(OleumError):
    pass


class Conflict(OleumError):
    pass


class TransportFailure(OleumError):
    """The backend could not be reached or rejected the request."""


class ValidationFailure(OleumError, ValueError):
    """Local validation failed; no backend call was made."""
