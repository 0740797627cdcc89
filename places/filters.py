"""
목록 검색/필터.

카테고리 사이는 AND, 태그 안에서는 OR. 입력 순서를 그대로 유지한다.
"""
from dataclasses import dataclass

from .constants import ALL


def field_value(place, field):
    if isinstance(place, dict):
        return place.get(field)
    return getattr(place, field, None)


def primary_address(place):
    addresses = field_value(place, "addresses") or []
    if addresses:
        return addresses[0].get("address") or ""
    return ""


@dataclass(frozen=True)
class FilterCriteria:
    query: str = ""
    tags: tuple = ()
    coffee_by: str = ALL
    category: str = ALL

    @classmethod
    def from_params(cls, params):
        tags = []
        raw_tags = params.getlist("tags") if hasattr(params, "getlist") else [params.get("tags") or ""]
        for raw in raw_tags:
            tags.extend(t.strip() for t in raw.split(",") if t.strip())

        return cls(
            query=params.get("q") or "",
            tags=tuple(tags),
            coffee_by=params.get("coffee_by") or ALL,
            category=params.get("category") or ALL,
        )

    @property
    def is_active(self):
        return (
            bool(self.query.strip())
            or bool(self.tags)
            or self.coffee_by != ALL
            or self.category != ALL
        )


def filter_places(places, criteria):
    filtered = list(places)

    if criteria.query.strip():
        q = criteria.query.lower()
        filtered = [
            p for p in filtered
            if q in (field_value(p, "name") or "").lower() or q in primary_address(p).lower()
        ]

    if criteria.tags:
        selected = set(criteria.tags)
        filtered = [p for p in filtered if selected.intersection(field_value(p, "tags") or [])]

    if criteria.coffee_by != ALL:
        filtered = [p for p in filtered if field_value(p, "coffee_by") == criteria.coffee_by]

    if criteria.category != ALL:
        filtered = [p for p in filtered if field_value(p, "category") == criteria.category]

    return filtered
