"""
Supermatech Backend: Custom Exception Hierarchy
=================================================

What:  Application-specific exceptions, each mapped to one HTTP status by the
       global handlers registered in main.py.
How:   Every exception carries a user-facing message and a context dict.
       The context is logged server-side; only selected keys reach the client.

Exception Hierarchy:
    SupermatechError (base)
    ├── InvalidRequestError  → 400 Bad Request (identifier inconsistency)
    ├── NotFoundError        → 404 Not Found
    └── DatabaseError        → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class SupermatechError(Exception):
    """
    Base exception for all Supermatech application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged, not returned verbatim)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class InvalidRequestError(SupermatechError):
    """
    Raised when a client-supplied identifier is inconsistent with the request.

    What:    The body id is present on create, missing on update, differs from
             the path id, or names an entity that does not exist.
    HTTP:    400 Bad Request, plus X-<app>-error / X-<app>-params headers.

    Error keys:
        idexists    A new entity cannot already have an id
        idnull      Update body carries no id
        idinvalid   Body id differs from the path id
        idnotfound  No stored entity has that id

    Example response:
        {
            "error": "idnull",
            "message": "Invalid id",
            "details": {"entity_name": "orderLine", "error_key": "idnull"}
        }
    """

    def __init__(
        self,
        message: str,
        entity_name: str,
        error_key: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = dict(context or {})
        ctx["entity_name"] = entity_name
        ctx["error_key"] = error_key
        super().__init__(message=message, context=ctx)
        self.entity_name = entity_name
        self.error_key = error_key


class NotFoundError(SupermatechError):
    """
    Raised when a requested resource does not exist.

    When:    GET /api/order-lines/{id} for an unknown id, or a partial update
             whose target disappeared between validation and mutation.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = dict(context or {})
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(SupermatechError):
    """
    Raised when a storage operation fails unexpectedly.

    HTTP:    500 Internal Server Error. The response message is always generic;
             driver errors and statement details stay in the server log.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
