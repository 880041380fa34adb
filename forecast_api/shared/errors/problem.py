"""
Problem response model and its HTTP rendering.

Every error reply uses the same body shape: type, title, status, detail,
instance, followed by flat extension members (errorCode, traceId, ...).
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from fastapi.responses import JSONResponse

PROBLEM_JSON_MEDIA_TYPE = "application/problem+json"

TYPE_BAD_REQUEST = "https://tools.ietf.org/html/rfc9110#section-15.5.1"
TYPE_NOT_FOUND = "https://tools.ietf.org/html/rfc9110#section-15.5.5"
TYPE_INTERNAL_SERVER_ERROR = "https://tools.ietf.org/html/rfc9110#section-15.6.1"


@dataclass(frozen=True)
class ProblemResponse:
    """A structured error body.

    Attributes:
        type: URI of the relevant HTTP status section.
        title: Short summary of the problem class.
        status: HTTP status code.
        detail: Explanation specific to this occurrence.
        instance: Request path that produced the problem.
        extensions: Additional members, emitted in insertion order.
    """

    type: str
    title: str
    status: int
    detail: str
    instance: str
    extensions: Mapping[str, Any] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def to_dict(self) -> dict[str, Any]:
        """Return the wire body with a fixed member order."""
        body: dict[str, Any] = {
            "type": self.type,
            "title": self.title,
            "status": self.status,
            "detail": self.detail,
            "instance": self.instance,
        }
        body.update(self.extensions)
        return body


class ProblemJSONResponse(JSONResponse):
    """JSONResponse carrying a ProblemResponse."""

    media_type = PROBLEM_JSON_MEDIA_TYPE

    def __init__(self, problem: ProblemResponse, **kwargs: Any) -> None:
        super().__init__(
            content=problem.to_dict(), status_code=problem.status, **kwargs
        )
