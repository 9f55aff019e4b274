"""EDBO registry models.

Re-exports code lists (`Region`, `UniversityCategory`, `InstitutionCategory`),
record models (`UniversityBrief`, `University`, `Institution`, ...) and query
DTOs consumed by the clients.
"""

from edbo_opendata.models.dto import CategorySearchQuery, RecordQuery
from edbo_opendata.models.enums import InstitutionCategory, Region, UniversityCategory
from edbo_opendata.models.institution import Institution
from edbo_opendata.models.university import (
    Educator,
    ProfessionLicense,
    SpecialityLicense,
    University,
    UniversityBranch,
    UniversityBrief,
)

__all__ = [
    # Code lists
    "Region",
    "UniversityCategory",
    "InstitutionCategory",
    # Records
    "UniversityBrief",
    "University",
    "UniversityBranch",
    "SpecialityLicense",
    "ProfessionLicense",
    "Educator",
    "Institution",
    # DTO models
    "CategorySearchQuery",
    "RecordQuery",
]
