"""Pydantic base schema for EDBO registry models.

Provides a common `BaseSchema` that sets the extra-field policy for all
records and query DTOs under `edbo_opendata.models`.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Shared base for all Pydantic models in edbo_opendata.

    - Ignores fields the registry adds that the models do not declare
    - Enables populate_by_name so fields can be set by name or alias
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
    )
