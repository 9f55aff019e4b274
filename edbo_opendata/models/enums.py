"""Registry code lists used as query parameters.

The numeric value of each member is the code the registry expects in the
``lc`` (region) and ``ut`` (category) query keys. ``str(member)`` renders
that code, and ``member.label`` gives the official Ukrainian name.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict


class _RegistryCode(int, Enum):
    def __str__(self) -> str:
        return str(self.value)

    @property
    def label(self) -> str:
        return _LABELS[type(self)][self]


class Region(_RegistryCode):
    """Region (oblast or city with special status) of Ukraine."""

    REPUBLIC_OF_CRIMEA = 1
    VINNYTSIA_OBLAST = 5
    VOLYN_OBLAST = 7
    DNIPROPETROVSK_OBLAST = 12
    DONETSK_OBLAST = 14
    ZHYTOMYR_OBLAST = 18
    ZAKARPATTIA_OBLAST = 21
    ZAPORIZHZHIA_OBLAST = 23
    IVANO_FRANKIVSK_OBLAST = 26
    KYIV_OBLAST = 32
    KIROVOHRAD_OBLAST = 35
    LUHANSK_OBLAST = 44
    LVIV_OBLAST = 46
    MYKOLAIV_OBLAST = 48
    ODESA_OBLAST = 51
    POLTAVA_OBLAST = 53
    RIVNE_OBLAST = 56
    SUMY_OBLAST = 59
    TERNOPIL_OBLAST = 61
    KHARKIV_OBLAST = 63
    KHERSON_OBLAST = 65
    KHMELNYTSKYI_OBLAST = 68
    CHERKASY_OBLAST = 71
    CHERNIVTSI_OBLAST = 73
    CHERNIHIV_OBLAST = 74
    KYIV_CITY = 80
    SEVASTOPOL_CITY = 85


class UniversityCategory(_RegistryCode):
    """Category filter for `/api/universities`."""

    HIGHER_EDUCATION_INSTITUTIONS = 1
    VOCATIONAL_EDUCATION_INSTITUTIONS = 2
    SCIENTIFIC_INSTITUTES = 8
    SPECIALIZED_PRE_HIGHER_EDUCATION_INSTITUTIONS = 9
    POSTGRADUATE_EDUCATION_INSTITUTIONS = 10


class InstitutionCategory(_RegistryCode):
    """Category filter for `/api/institutions`."""

    GENERAL_SECONDARY_EDUCATION_INSTITUTIONS = 3


_LABELS: Dict[type, Dict[_RegistryCode, str]] = {
    Region: {
        Region.REPUBLIC_OF_CRIMEA: "Автономна Республіка Крим",
        Region.VINNYTSIA_OBLAST: "Вінницька область",
        Region.VOLYN_OBLAST: "Волинська область",
        Region.DNIPROPETROVSK_OBLAST: "Дніпропетровська область",
        Region.DONETSK_OBLAST: "Донецька область",
        Region.ZHYTOMYR_OBLAST: "Житомирська область",
        Region.ZAKARPATTIA_OBLAST: "Закарпатська область",
        Region.ZAPORIZHZHIA_OBLAST: "Запорізька область",
        Region.IVANO_FRANKIVSK_OBLAST: "Івано-Франківська область",
        Region.KYIV_OBLAST: "Київська область",
        Region.KIROVOHRAD_OBLAST: "Кіровоградська область",
        Region.LUHANSK_OBLAST: "Луганська область",
        Region.LVIV_OBLAST: "Львівська область",
        Region.MYKOLAIV_OBLAST: "Миколаївська область",
        Region.ODESA_OBLAST: "Одеська область",
        Region.POLTAVA_OBLAST: "Полтавська область",
        Region.RIVNE_OBLAST: "Рівненська область",
        Region.SUMY_OBLAST: "Сумська область",
        Region.TERNOPIL_OBLAST: "Тернопільська область",
        Region.KHARKIV_OBLAST: "Харківська область",
        Region.KHERSON_OBLAST: "Херсонська область",
        Region.KHMELNYTSKYI_OBLAST: "Хмельницька область",
        Region.CHERKASY_OBLAST: "Черкаська область",
        Region.CHERNIVTSI_OBLAST: "Чернівецька область",
        Region.CHERNIHIV_OBLAST: "Чернігівська область",
        Region.KYIV_CITY: "м. Київ",
        Region.SEVASTOPOL_CITY: "м. Севастополь",
    },
    UniversityCategory: {
        UniversityCategory.HIGHER_EDUCATION_INSTITUTIONS: "Заклади вищої освіти",
        UniversityCategory.VOCATIONAL_EDUCATION_INSTITUTIONS: "Заклади професійної (професійно-технічної) освіти",
        UniversityCategory.SCIENTIFIC_INSTITUTES: "Наукові інститути (установи)",
        UniversityCategory.SPECIALIZED_PRE_HIGHER_EDUCATION_INSTITUTIONS: "Заклади фахової передвищої освіти",
        UniversityCategory.POSTGRADUATE_EDUCATION_INSTITUTIONS: "Заклади післядипломної освіти",
    },
    InstitutionCategory: {
        InstitutionCategory.GENERAL_SECONDARY_EDUCATION_INSTITUTIONS: "Заклади загальної середньої освіти",
    },
}
