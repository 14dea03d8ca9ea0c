from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional

@dataclass(frozen=True)
class ApiErrorDetails:
    status: Optional[int] = None
    code: Optional[str] = None
    message: Optional[str] = None
    detail: Any = None
    url: Optional[str] = None
    method: Optional[str] = None

class ApiError(RuntimeError):
    def __init__(self, msg: str, *, details: Optional[ApiErrorDetails] = None) -> None:
        super().__init__(msg)
        self.details = details or ApiErrorDetails()

class BadRequestError(ApiError):
    pass

class UnauthorizedError(ApiError):
    pass

class NotFoundError(ApiError):
    pass

class ConflictError(ApiError):
    pass

class UnexpectedResponseCodeError(ApiError):
    pass

class InvalidInputError(ApiError):
    """A supplied value violates a documented constraint."""

    def __init__(self, argument: str, value: Any, info: str) -> None:
        super().__init__(f"Invalid input provided for argument [{argument}]: [{value!r}] ({info})")
        self.argument = argument
        self.value = value
        self.info = info

class MissingInputError(ApiError):
    """A required field was empty or absent."""

    def __init__(self, argument: str) -> None:
        super().__init__(f"Missing input for argument [{argument}]")
        self.argument = argument

def map_http_error(
    *,
    status: int,
    code: str | None,
) -> type[ApiError]:
    if status == 404 or (code and "itemNotFound" in code):
        return NotFoundError
    if status == 409 or (code and "conflict" in code.lower()):
        return ConflictError
    if status == 401:
        return UnauthorizedError
    if status == 400:
        return BadRequestError
    return UnexpectedResponseCodeError
