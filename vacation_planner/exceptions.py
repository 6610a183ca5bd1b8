"""
Custom exception hierarchy for consistent error responses.

Usage:
    from vacation_planner.exceptions import NotFoundError, RuleViolationError

    raise NotFoundError("Nurse", nurse_id)
    raise RuleViolationError(result.errors)

These exceptions are caught by the handler registered in main.py and
converted to consistent JSON error responses with the shape:
    {"error": "<message>", "detail": "<optional extra info>"}

Rule violations add an "errors" mapping of violation tag to message.
"""

from fastapi import HTTPException, status


class AppError(HTTPException):
    """Base application error with a default status code."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, detail: str | None = None):
        super().__init__(
            status_code=self.__class__.status_code,
            detail=message,
        )
        self.extra_detail = detail

    def to_content(self) -> dict:
        """Build the JSON body returned to the client."""
        content = {"error": self.detail}
        if self.extra_detail:
            content["detail"] = self.extra_detail
        return content


class NotFoundError(AppError):
    """Resource not found (404)."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, resource: str, resource_id: int | str | None = None):
        if resource_id is not None:
            message = f"{resource} not found (id={resource_id})"
        else:
            message = f"{resource} not found"
        super().__init__(message)


class RuleViolationError(AppError):
    """A vacation request broke one or more scheduling rules (422)."""

    status_code = 422

    def __init__(self, errors: dict[str, str]):
        super().__init__("Vacation request is not allowed")
        self.errors = dict(errors)

    def to_content(self) -> dict:
        content = super().to_content()
        content["errors"] = self.errors
        return content
