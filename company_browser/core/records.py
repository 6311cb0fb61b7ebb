from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

DEFAULT_STATUS = "Active"


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        value = str(value)
    return value if value else None


def _optional_number(value: Any) -> Optional[float]:
    # bool is an int subclass, but True is not a funding amount
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    # json.load accepts a bare NaN, which would break numeric ordering
    if isinstance(value, float) and math.isnan(value):
        return None
    return value


def _optional_int(value: Any) -> Optional[int]:
    number = _optional_number(value)
    if number is None:
        return None
    return int(number)


def _tech_tuple(value: Any) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,) if value else ()
    if isinstance(value, (list, tuple)):
        return tuple(str(t) for t in value if t is not None)
    return ()


@dataclass(frozen=True)
class CompanyRecord:
    """
    One company in the dataset.

    Fields:

    - name: Company name. The only field that is always present.
    - category / stage / country / location: Optional labels used by the filters.
    - funding: Total funding in $M. Missing is treated as 0 when sorting.
    - founded: Year founded. Missing is treated as 0 when sorting.
    - employees: Head count, display only.
    - tech: Ordered technology tags, searched by the free-text filter.
    - status: Operating status, defaults to "Active".
    - last_round_year: Year of the last funding round (bubble chart x-axis).
    """

    name: str
    category: Optional[str] = None
    stage: Optional[str] = None
    country: Optional[str] = None
    location: Optional[str] = None
    funding: Optional[float] = None
    founded: Optional[int] = None
    employees: Optional[int] = None
    tech: Tuple[str, ...] = ()
    status: str = DEFAULT_STATUS
    last_round_year: Optional[int] = None

    @property
    def funding_or_zero(self) -> float:
        return self.funding if self.funding is not None else 0

    @property
    def founded_or_zero(self) -> int:
        return self.founded if self.founded is not None else 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Optional[CompanyRecord]:
        """
        Build a record from a raw JSON object (camelCase keys).

        Returns None when the object has no usable name; callers skip those.
        """
        name = data.get("name")
        if not isinstance(name, str) or not name:
            logger.warning("Skipping company record without a name", extra={"record": dict(data)})
            return None

        return cls(
            name=name,
            category=_optional_str(data.get("category")),
            stage=_optional_str(data.get("stage")),
            country=_optional_str(data.get("country")),
            location=_optional_str(data.get("location")),
            funding=_optional_number(data.get("funding")),
            founded=_optional_int(data.get("founded")),
            employees=_optional_int(data.get("employees")),
            tech=_tech_tuple(data.get("tech")),
            status=_optional_str(data.get("status")) or DEFAULT_STATUS,
            last_round_year=_optional_int(data.get("lastRoundYear")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "category": self.category,
            "stage": self.stage,
            "country": self.country,
            "location": self.location,
            "funding": self.funding,
            "founded": self.founded,
            "employees": self.employees,
            "tech": list(self.tech),
            "status": self.status,
            "lastRoundYear": self.last_round_year,
        }
