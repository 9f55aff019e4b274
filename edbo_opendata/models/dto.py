"""Query DTOs for the EDBO registry endpoints.

Pydantic models that define the query-string contract of the registry.
Guidelines:
- Keep field names aligned with the registry's query keys (`ut`, `lc`, `id`, `exp`).
- Always request the JSON export (`exp=json`).
"""

from __future__ import annotations

from pydantic import Field

from .base import BaseSchema


class _ExportQuery(BaseSchema):
    def to_params(self) -> dict[str, str]:
        """Serialize the query into HTTP params, excluding None values."""
        data = self.model_dump(exclude_none=True)
        return {k: str(v) for k, v in data.items()}


class CategorySearchQuery(_ExportQuery):
    """Query params for the list endpoints (`/api/universities`, `/api/institutions`).

    Examples:
        >>> CategorySearchQuery(ut=1, lc=80).to_params()
        {'ut': '1', 'lc': '80', 'exp': 'json'}
    """

    ut: int = Field(..., description="Category code.", examples=[1, 3])
    lc: int = Field(..., description="Region code.", examples=[80, 46])
    exp: str = Field(default="json", description="Export format requested from the registry.")


class RecordQuery(_ExportQuery):
    """Query params for the detail endpoints (`/api/university`, `/api/school`).

    Examples:
        >>> RecordQuery(id=79).to_params()
        {'id': '79', 'exp': 'json'}
    """

    id: int = Field(..., ge=1, description="Registry identifier.")
    exp: str = Field(default="json", description="Export format requested from the registry.")
