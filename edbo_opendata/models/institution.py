"""General secondary education institution (school) record.

Returned both as rows of `/api/institutions` and as the detail payload of
`/api/school`.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from .base import BaseSchema


class Institution(BaseSchema):
    institution_name: str = Field(..., description="Full official name.")
    institution_id: str = Field(..., description="Registry identifier, used as `id` in school lookups.")
    is_checked: str
    short_name: str
    state_name: str = Field(..., description="Operating state, e.g. active or in liquidation.")
    institution_type_name: str
    university_financing_type_name: str = Field(..., description="Form of ownership.")
    koatuu_id: str = Field(..., description="KOATUU code of the settlement.")
    region_name: str
    koatuu_name: str
    address: str
    parent_institution_id: Optional[str] = None
    governance_name: str
    phone: str
    fax: str
    email: str
    website: str
    boss: str = Field(..., description="Head of the institution.")
    support_name: str
    is_village: str
    is_mountain: str
    is_internat: str
    approved_count: Optional[str] = Field(default=None, description="Approved number of pupils.")
