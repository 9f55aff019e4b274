"""edbo-opendata.

Typed client for the public EDBO Opendata registry (Єдина державна електронна
база з питань освіти), Ukraine's state education database.

Overview
--------

The registry exposes four read-only JSON lookups, all wrapped here in a
blocking form and an asyncio form:

- ``search_universities``: universities of one category in one region.
- ``search_university``: the detailed record of one university.
- ``search_institutions``: general secondary institutions in one region.
- ``search_school``: the record of one school.

Build a ``SearchParams`` with the ``with_*`` helpers and pass it either to an
``EdboClient`` / ``AsyncEdboClient`` or to the module-level helpers, which
open a client configured from ``EDBO_*`` environment variables.

Failures raise subclasses of ``EdboError`` (see ``edbo_opendata.errors``).
"""

from edbo_opendata._version import __version__
from edbo_opendata.client import (
    AsyncEdboClient,
    EdboClient,
    search_institutions,
    search_institutions_async,
    search_school,
    search_school_async,
    search_universities,
    search_universities_async,
    search_university,
    search_university_async,
)
from edbo_opendata.core.config import EdboClientConfig
from edbo_opendata.errors import (
    EdboApiError,
    EdboError,
    EdboNetworkError,
    EdboParsingError,
    EdboRequestError,
)
from edbo_opendata.models import (
    Educator,
    Institution,
    InstitutionCategory,
    ProfessionLicense,
    Region,
    SpecialityLicense,
    University,
    UniversityBranch,
    UniversityBrief,
    UniversityCategory,
)
from edbo_opendata.search import SearchParams

__all__ = [
    "__version__",
    # Clients
    "EdboClient",
    "AsyncEdboClient",
    "EdboClientConfig",
    "search_universities",
    "search_universities_async",
    "search_university",
    "search_university_async",
    "search_institutions",
    "search_institutions_async",
    "search_school",
    "search_school_async",
    # Parameters
    "SearchParams",
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
    # Errors
    "EdboError",
    "EdboApiError",
    "EdboNetworkError",
    "EdboParsingError",
    "EdboRequestError",
]
