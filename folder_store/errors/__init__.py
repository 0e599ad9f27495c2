"""Error handling module for the Folder Store."""

from .problem_details import (
    ProblemDetail,
    ProblemDetailException,
    InvalidArgumentError,
    PageTokenDecodeError,
    PaginationError,
    FolderNotFoundError,
    create_problem_response
)
from .handlers import register_exception_handlers

__all__ = [
    "ProblemDetail",
    "ProblemDetailException",
    "InvalidArgumentError",
    "PageTokenDecodeError",
    "PaginationError",
    "FolderNotFoundError",
    "create_problem_response",
    "register_exception_handlers"
]
