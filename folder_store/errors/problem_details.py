"""Problem Details (RFC 9457) implementation for the Folder Store."""

from typing import Optional, Any
from uuid import UUID

from pydantic import BaseModel, Field
from fastapi import Request
from fastapi.responses import JSONResponse


class ProblemDetail(BaseModel):
    """Problem Details as defined in RFC 9457."""

    type: str = Field(default="about:blank", description="A URI reference that identifies the problem type")
    title: str = Field(description="A short, human-readable summary of the problem type")
    status: int = Field(description="The HTTP status code")
    detail: Optional[str] = Field(default=None, description="A human-readable explanation specific to this occurrence")
    instance: Optional[str] = Field(default=None, description="A URI reference that identifies the specific occurrence")

    # Allow additional properties for extensions
    model_config = {"extra": "allow"}


class ProblemDetailException(Exception):
    """Base exception for every error kind raised by the folder store."""

    def __init__(
        self,
        status: int,
        title: str,
        detail: Optional[str] = None,
        type_uri: str = "about:blank",
        instance: Optional[str] = None,
        **extensions: Any
    ):
        self.status = status
        self.title = title
        self.detail = detail
        self.type_uri = type_uri
        self.instance = instance
        self.extensions = extensions
        super().__init__(detail or title)

    def to_problem_detail(self, request: Optional[Request] = None) -> ProblemDetail:
        """Convert to ProblemDetail model."""
        instance = self.instance
        if instance is None and request:
            instance = str(request.url.path)

        problem = ProblemDetail(
            type=self.type_uri,
            title=self.title,
            status=self.status,
            detail=self.detail,
            instance=instance
        )

        for key, value in self.extensions.items():
            setattr(problem, key, value)

        return problem

    def to_response(self, request: Optional[Request] = None) -> JSONResponse:
        """Convert to JSONResponse with Problem Details format."""
        problem = self.to_problem_detail(request)
        return JSONResponse(
            status_code=self.status,
            content=problem.model_dump(mode="json", exclude_none=True),
            headers={"Content-Type": "application/problem+json"}
        )


class InvalidArgumentError(ProblemDetailException):
    """400 raised when a required input is missing or out of range."""

    def __init__(self, detail: str, **extensions: Any):
        super().__init__(
            status=400,
            title="Invalid Argument",
            detail=detail,
            **extensions
        )


class PageTokenDecodeError(ProblemDetailException):
    """400 raised when a page token is not a validly encoded offset."""

    def __init__(self, detail: str, **extensions: Any):
        super().__init__(
            status=400,
            title="Invalid Page Token",
            detail=detail,
            **extensions
        )


class PaginationError(ProblemDetailException):
    """400 raised by the folder fetch when paginating its result fails.

    The underlying :class:`PageTokenDecodeError` is kept as ``__cause__``.
    """

    def __init__(self, detail: str, **extensions: Any):
        super().__init__(
            status=400,
            title="Pagination Error",
            detail=detail,
            **extensions
        )


class FolderNotFoundError(ProblemDetailException):
    """404 raised when an organization has no matching folders.

    The (empty) response produced by the fetch is attached as ``response`` so
    callers can treat "no folders" as non-fatal.
    """

    def __init__(self, org_id: UUID, response: Any = None, **extensions: Any):
        self.org_id = org_id
        self.response = response
        super().__init__(
            status=404,
            title="Not Found",
            detail=f"No folders found for organization ID {org_id}",
            org_id=str(org_id),
            **extensions
        )


def create_problem_response(
    status: int,
    title: str,
    detail: Optional[str] = None,
    type_uri: str = "about:blank",
    instance: Optional[str] = None,
    request: Optional[Request] = None,
    **extensions: Any
) -> JSONResponse:
    """Create a Problem Details response."""
    if instance is None and request:
        instance = str(request.url.path)

    problem = ProblemDetail(
        type=type_uri,
        title=title,
        status=status,
        detail=detail,
        instance=instance
    )

    for key, value in extensions.items():
        setattr(problem, key, value)

    return JSONResponse(
        status_code=status,
        content=problem.model_dump(mode="json", exclude_none=True),
        headers={"Content-Type": "application/problem+json"}
    )
