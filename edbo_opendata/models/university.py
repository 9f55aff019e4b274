"""Higher, vocational and scientific institution records.

`UniversityBrief` is one row of `/api/universities`; `University` is the
detailed record of `/api/university`, including branches, faculties, licensed
specialities and educator counts. The registry sends scalars as strings.
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import Field, field_validator

from .base import BaseSchema


class UniversityBranch(BaseSchema):
    """Separate structural unit (branch) of a university."""

    university_name: str = Field(..., description="Full name of the branch.")
    university_id: str = Field(..., description="Registry identifier of the branch.", examples=["2612"])
    region_name: str = Field(..., description="Region where the branch is located.")
    katottgcodeu: str = Field(..., description="KATOTTG code of the branch settlement.")
    katottg_name: str = Field(..., description="Settlement name resolved from the KATOTTG code.")


class SpecialityLicense(BaseSchema):
    """Licensed volume for one speciality and qualification level."""

    qualification_group_name: str = Field(..., description="Qualification level, e.g. bachelor or master.")
    speciality_code: str = Field(..., examples=["121"])
    speciality_name: str
    specialization_name: str
    all_count: str = Field(..., description="Total licensed volume.")
    all_term_count: str
    full_time_count: str
    part_time_count: str
    evening_count: str
    certificate: str = Field(..., description="Accreditation certificate reference.")
    certificate_expired: Optional[str] = Field(default=None, description="Accreditation expiry date, if any.")
    license_description: str


class ProfessionLicense(BaseSchema):
    """Licensed volume for vocational professions."""

    professions: str
    license_count: str
    accreditation: str
    accreditation_expired: str


class Educator(BaseSchema):
    """Student counts per speciality and form of study."""

    qualification_group_name: str
    speciality_code: str
    speciality_name: str
    specialization_name: str
    full_time_count: str
    part_time_count: str
    external_count: str
    evening_count: str
    distance_count: str


class _UniversityFields(BaseSchema):
    university_name: str = Field(..., description="Full official name.")
    university_id: str = Field(..., description="Registry identifier, used as `id` in detail lookups.", examples=["79"])
    university_parent_id: Optional[str] = Field(default=None, description="Identifier of the parent institution for branches.")
    university_short_name: str
    university_name_en: str
    is_from_crimea: str = Field(..., description="Relocated from Crimea flag as sent by the registry.")
    registration_year: str
    university_type_name: str
    university_financing_type_name: str
    university_governance_type_name: str
    post_index_u: str
    katottgcodeu: str
    katottg_name_u: str
    region_name_u: str
    university_address_u: str
    university_phone: str
    university_email: str
    university_site: str
    university_director_post: str
    university_director_fio: str
    close_date: Optional[str] = Field(default=None, description="Closure date; absent for operating institutions.")

    @property
    def is_closed(self) -> bool:
        return bool(self.close_date)


class UniversityBrief(_UniversityFields):
    """Row returned by the universities search endpoint."""

    primitki: str = Field(..., description="Free-form registry notes (\"примітки\").")


class University(_UniversityFields):
    """Detailed university record returned by the university endpoint."""

    branches: List[UniversityBranch] = Field(default_factory=list)
    facultets: List[str] = Field(default_factory=list, description="Faculty names.")
    speciality_licenses: List[SpecialityLicense] = Field(default_factory=list)
    profession_licenses: List[ProfessionLicense] = Field(default_factory=list)
    educators: List[Educator] = Field(default_factory=list)

    @field_validator(
        "branches",
        "facultets",
        "speciality_licenses",
        "profession_licenses",
        "educators",
        mode="before",
    )
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        # The registry sends null instead of [] for institutions without entries
        return [] if value is None else value

    @property
    def branch_ids(self) -> List[str]:
        return [b.university_id for b in self.branches]
