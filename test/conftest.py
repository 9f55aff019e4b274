from __future__ import annotations

from typing import Any, Dict, Iterable

import httpx
import pytest


@pytest.fixture(autouse=True)
def _global_offline_http_guard(monkeypatch: pytest.MonkeyPatch):
    allowed_prefixes: Iterable[str] = (
        "http://mock",
        "https://mock",
        "http://localhost",
        "http://127.0.0.1",
    )

    orig_sync = httpx._client.Client.request
    orig_async = httpx._client.AsyncClient.request

    def _is_allowed(url_str: str) -> bool:
        return any(url_str.startswith(p) for p in allowed_prefixes)

    def offline_sync(self, method, url, *args, **kwargs):
        url_str = str(url)
        if _is_allowed(url_str):
            return orig_sync(self, method, url, *args, **kwargs)
        raise RuntimeError(f"External HTTP blocked by global offline guard: {url_str}")

    async def offline_async(self, method, url, *args, **kwargs):
        url_str = str(url)
        if _is_allowed(url_str):
            return await orig_async(self, method, url, *args, **kwargs)
        raise RuntimeError(f"External HTTP blocked by global offline guard (async): {url_str}")

    monkeypatch.setattr(httpx._client.Client, "request", offline_sync, raising=True)
    monkeypatch.setattr(httpx._client.AsyncClient, "request", offline_async, raising=True)


# =====================================================================
# Registry payloads, shaped like real registry.edbo.gov.ua responses
# =====================================================================


@pytest.fixture
def university_brief_payload() -> Dict[str, Any]:
    return {
        "university_name": "Київський національний університет імені Тараса Шевченка",
        "university_id": "174",
        "university_parent_id": None,
        "university_short_name": "КНУ імені Тараса Шевченка",
        "university_name_en": "Taras Shevchenko National University of Kyiv",
        "is_from_crimea": "ні",
        "registration_year": "1834",
        "university_type_name": "Університет",
        "university_financing_type_name": "Державна",
        "university_governance_type_name": "Міністерство освіти і науки України",
        "post_index_u": "01601",
        "katottgcodeu": "UA80000000000093317",
        "katottg_name_u": "м. Київ",
        "region_name_u": "м. Київ",
        "university_address_u": "вул. Володимирська, 60",
        "university_phone": "(044) 239-33-33",
        "university_email": "office.chief@univ.kiev.ua",
        "university_site": "http://www.univ.kiev.ua",
        "university_director_post": "Ректор",
        "university_director_fio": "Бугров Володимир Анатолійович",
        "close_date": None,
        "primitki": "",
    }


@pytest.fixture
def university_payload(university_brief_payload: Dict[str, Any]) -> Dict[str, Any]:
    data = {k: v for k, v in university_brief_payload.items() if k != "primitki"}
    data.update(
        {
            "branches": [
                {
                    "university_name": "Фаховий коледж зв'язку",
                    "university_id": "2612",
                    "region_name": "м. Київ",
                    "katottgcodeu": "UA80000000000093317",
                    "katottg_name": "м. Київ",
                }
            ],
            "facultets": ["Факультет комп'ютерних наук та кібернетики", "Юридичний факультет"],
            "speciality_licenses": [
                {
                    "qualification_group_name": "Бакалавр",
                    "speciality_code": "121",
                    "speciality_name": "Інженерія програмного забезпечення",
                    "specialization_name": "",
                    "all_count": "300",
                    "all_term_count": "",
                    "full_time_count": "250",
                    "part_time_count": "50",
                    "evening_count": "0",
                    "certificate": "УД 11006541",
                    "certificate_expired": None,
                    "license_description": "",
                }
            ],
            "profession_licenses": [],
            "educators": [
                {
                    "qualification_group_name": "Бакалавр",
                    "speciality_code": "121",
                    "speciality_name": "Інженерія програмного забезпечення",
                    "specialization_name": "",
                    "full_time_count": "812",
                    "part_time_count": "0",
                    "external_count": "0",
                    "evening_count": "0",
                    "distance_count": "0",
                }
            ],
        }
    )
    return data


@pytest.fixture
def institution_payload() -> Dict[str, Any]:
    return {
        "institution_name": "Ліцей № 142 Оболонського району міста Києва",
        "institution_id": "137211",
        "is_checked": "1",
        "short_name": "Ліцей № 142",
        "state_name": "працює",
        "institution_type_name": "ліцей",
        "university_financing_type_name": "Комунальна",
        "koatuu_id": "8036600000",
        "region_name": "м. Київ",
        "koatuu_name": "Оболонський район",
        "address": "вул. Маршальська, 6",
        "parent_institution_id": None,
        "governance_name": "Оболонська районна в місті Києві державна адміністрація",
        "phone": "(044) 418-12-34",
        "fax": "",
        "email": "school142@ukr.net",
        "website": "",
        "boss": "Іваненко Олена Петрівна",
        "support_name": "",
        "is_village": "0",
        "is_mountain": "0",
        "is_internat": "0",
        "approved_count": "1200",
    }
