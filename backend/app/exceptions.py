"""
QnA Backend — Custom Exception Hierarchy
==========================================

What:  Application-specific exceptions for the storage and service layers.
How:   Each exception carries a message and an optional context dict.
       Storage-access objects raise the storage kinds; services re-type them
       into the service kinds; global handlers in main.py turn those into
       JSON responses.

Exception Hierarchy:
    QnAError (base)
    ├── StorageError              generic persistence failure
    │   └── InvalidIdentifierError  malformed or dangling UUID
    ├── BadRequestError           → 400 Bad Request
    └── InternalError             → 500 Internal Server Error

Layer boundaries:
    Storage  → InvalidIdentifierError | StorageError
    Service  → BadRequestError        | InternalError
    HTTP     → 400                    | 500
"""

from typing import Any, Dict, Optional


DEFAULT_INTERNAL_ERROR_MESSAGE = "Something went wrong! Please try again."


class QnAError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  Error description
        context:  Additional debug info (logged, never returned to the client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


# ══════════════════════════════════════════════════════════════════════════
# Storage layer
# ══════════════════════════════════════════════════════════════════════════


class StorageError(QnAError):
    """
    Raised when a database operation fails for any unclassified reason.

    What:    Connectivity loss, constraint violations other than the
             answer → question reference, serialization errors.
    Security:
        The message is generic. The original exception is chained
        (`raise ... from exc`) and its type recorded in `context` for logs.
    """

    def __init__(
        self,
        message: str = "A database error occurred.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class InvalidIdentifierError(StorageError):
    """
    Raised when an identifier is not a well-formed UUID, or when an answer
    references a question that does not exist.

    The message is safe to show to the client.
    """

    def __init__(
        self,
        message: str = "Invalid uuid",
        identifier: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if identifier is not None:
            ctx["identifier"] = identifier
        super().__init__(message=message, context=ctx)
        self.identifier = identifier


# ══════════════════════════════════════════════════════════════════════════
# Service layer
# ══════════════════════════════════════════════════════════════════════════


class BadRequestError(QnAError):
    """
    The caller supplied input the storage layer rejected.

    HTTP:    400 Bad Request, with the message in the body.
    """

    def __init__(
        self,
        message: str = "Bad request",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class InternalError(QnAError):
    """
    Any other failure. HTTP 500 with a generic message.
    """

    def __init__(
        self,
        message: str = DEFAULT_INTERNAL_ERROR_MESSAGE,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
