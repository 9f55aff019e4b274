"""Search parameters accepted by every client operation."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import ConfigDict, Field, ValidationError, ValidationInfo, field_validator

from edbo_opendata.errors import EdboRequestError
from edbo_opendata.models.base import BaseSchema
from edbo_opendata.models.enums import InstitutionCategory, Region, UniversityCategory

_CODE_FIELDS = {
    "region": Region,
    "university_category": UniversityCategory,
    "institution_category": InstitutionCategory,
}


class SearchParams(BaseSchema):
    """Immutable set of optional search parameters.

    Each operation checks the fields it needs and ignores the rest. The
    ``with_*`` builders validate the new value, return a new instance and
    leave the receiver untouched. A value of the wrong type raises
    `EdboRequestError`.

    Examples:
        >>> params = SearchParams().with_region(Region.KYIV_CITY).with_university_category(
        ...     UniversityCategory.HIGHER_EDUCATION_INSTITUTIONS
        ... )
        >>> params.region
        <Region.KYIV_CITY: 80>
    """

    model_config = ConfigDict(frozen=True)

    id: Optional[int] = Field(default=None, description="Registry identifier for detail lookups.")
    region: Optional[Region] = None
    university_category: Optional[UniversityCategory] = None
    institution_category: Optional[InstitutionCategory] = None

    @field_validator("region", "university_category", "institution_category", mode="before")
    @classmethod
    def _reject_other_code_lists(cls, value: Any, info: ValidationInfo) -> Any:
        # Raw integer codes are looked up; members of another code list are not.
        expected = _CODE_FIELDS[info.field_name]
        if isinstance(value, Enum) and not isinstance(value, expected):
            raise ValueError(f"expected {expected.__name__}, got {type(value).__name__}.{value.name}")
        return value

    def _with(self, field: str, value: Any) -> SearchParams:
        try:
            return type(self).model_validate({**self.model_dump(), field: value})
        except ValidationError as e:
            reason = e.errors()[0]["msg"]
            raise EdboRequestError(f"invalid {field} {value!r}: {reason}") from e

    def with_id(self, id: int) -> SearchParams:
        return self._with("id", id)

    def with_region(self, region: Region) -> SearchParams:
        return self._with("region", region)

    def with_university_category(self, university_category: UniversityCategory) -> SearchParams:
        return self._with("university_category", university_category)

    def with_institution_category(self, institution_category: InstitutionCategory) -> SearchParams:
        return self._with("institution_category", institution_category)
