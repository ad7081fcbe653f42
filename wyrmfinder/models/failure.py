"""
Failure classification.

Errors in Wyrmfinder fall into two groups:

- Catalog failures: the card dataset cannot back a usable index
  (missing or duplicated identifiers, wrong top-level shape). These are
  fatal at startup and must never be silently dropped.
- Input failures: a caller manipulated a query with an unknown facet.

Filtering and sorting never raise for missing card fields; absent data
reads as "absent".
"""

from enum import Enum

from pydantic import BaseModel, Field


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Input validation failures
    INVALID_INPUT = "invalid_input"

    # Dataset failures
    INVALID_CATALOG = "invalid_catalog"
    DUPLICATE_ID = "duplicate_id"


class FailureDetail(BaseModel):
    """Detailed information about a failure."""

    kind: FailureKind = Field(
        ...,
        description="Classification of the failure",
    )
    message: str = Field(
        ...,
        description="User-appropriate explanation of what went wrong",
    )
    detail: str | None = Field(
        default=None,
        description="Additional technical detail (optional)",
    )
    suggestion: str | None = Field(
        default=None,
        description="Suggested action for the user",
    )


class KnownError(Exception):
    """
    Base class for exceptions that represent known, explainable failures.

    Subclass this for errors where the system knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        super().__init__(message)

    def to_detail(self) -> FailureDetail:
        """Convert to a FailureDetail for the presentation layer."""
        return FailureDetail(
            kind=self.kind,
            message=self.message,
            detail=self.detail,
            suggestion=self.suggestion,
        )


class CatalogError(KnownError):
    """
    Raised when the card dataset cannot be turned into a catalog.

    This is a startup failure. A catalog with unusable identifiers would
    produce cards that silently vanish from search results.
    """

    def __init__(
        self,
        message: str,
        detail: str | None = None,
        kind: FailureKind = FailureKind.INVALID_CATALOG,
    ):
        super().__init__(
            kind=kind,
            message=message,
            detail=detail,
            suggestion="Fix the card dataset and restart.",
        )
