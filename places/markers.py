from dataclasses import dataclass
from typing import Any, Optional

from .constants import CITY_CENTERS, DEFAULT_ZOOM, FOCUSED_ZOOM
from .filters import field_value


@dataclass(frozen=True)
class Marker:
    id: str
    place: Any
    address_index: int
    address: str
    latitude: float
    longitude: float


def marker_id(place_id, address_index):
    return f"{place_id}-{address_index}"


def project_markers(places):
    """주소 하나당 마커 하나"""
    markers = []
    for place in places:
        place_id = field_value(place, "id")
        for index, entry in enumerate(field_value(place, "addresses") or []):
            markers.append(Marker(
                id=marker_id(place_id, index),
                place=place,
                address_index=index,
                address=entry["address"],
                latitude=entry["latitude"],
                longitude=entry["longitude"],
            ))
    return markers


class PinState:
    """한 번에 하나의 마커만 고정(pinned)된다. hover 는 고정이 없을 때만 보인다."""

    def __init__(self, pinned_id: Optional[str] = None):
        self.pinned_id = pinned_id
        self.hovered_id: Optional[str] = None

    @property
    def active_id(self) -> Optional[str]:
        return self.pinned_id if self.pinned_id is not None else self.hovered_id

    def click_marker(self, marker_id: str) -> None:
        self.pinned_id = None if self.pinned_id == marker_id else marker_id

    def click_map(self) -> None:
        self.pinned_id = None

    def close(self) -> None:
        self.pinned_id = None

    def hover(self, marker_id: str) -> None:
        self.hovered_id = marker_id

    def hover_end(self) -> None:
        self.hovered_id = None

    def is_open(self, marker_id: str) -> bool:
        return self.active_id == marker_id


def map_view(places, focus=None, city="melbourne"):
    """
    지도 초기 상태.

    focus 로 지정된 장소가 목록에 있으면 대표 주소를 중심으로 확대하고
    해당 마커를 고정 상태로 연다.
    """
    places = list(places)
    focused = None
    if focus:
        focused = next((p for p in places if str(field_value(p, "id")) == str(focus)), None)

    pin = PinState()
    if focused is not None and field_value(focused, "addresses"):
        first = field_value(focused, "addresses")[0]
        center = {"lat": first["latitude"], "lng": first["longitude"]}
        zoom = FOCUSED_ZOOM
        pin.click_marker(marker_id(field_value(focused, "id"), 0))
    else:
        center = dict(CITY_CENTERS.get(city, CITY_CENTERS["melbourne"]))
        zoom = DEFAULT_ZOOM

    return {
        "center": center,
        "zoom": zoom,
        "markers": project_markers(places),
        "pinned_id": pin.pinned_id,
    }
