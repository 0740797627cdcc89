"""
주소/태그 입력 파싱.

요청 단위 검증은 serializers.PlaceInputSerializer, 관리자 화면은 admin.PlaceAdminForm 이
이 함수들을 공유한다. 예외 대신 (값, 에러코드) 튜플을 돌려준다.
"""
import json
import math

from .errors import NAME_ADDRESS_REQUIRED


def _is_coordinate(value):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def _is_address_entry(entry):
    if not isinstance(entry, dict):
        return False
    address = entry.get("address")
    if not isinstance(address, str) or not address.strip():
        return False
    return _is_coordinate(entry.get("latitude")) and _is_coordinate(entry.get("longitude"))


def parse_addresses(raw):
    if isinstance(raw, (str, bytes)):
        try:
            raw = json.loads(raw)
        except ValueError:
            return None, NAME_ADDRESS_REQUIRED

    if not isinstance(raw, list) or not raw:
        return None, NAME_ADDRESS_REQUIRED

    if not all(_is_address_entry(entry) for entry in raw):
        return None, NAME_ADDRESS_REQUIRED

    return raw, None


def is_tag_input(raw):
    """쉼표 구분 문자열 또는 문자열 리스트만 태그로 받는다."""
    if isinstance(raw, str):
        return True
    return isinstance(raw, (list, tuple)) and all(isinstance(t, str) for t in raw)


def parse_tags(raw):
    if not raw:
        return []
    pieces = raw.split(",") if isinstance(raw, str) else raw

    tags = []
    for piece in pieces:
        tag = piece.strip()
        if tag and tag not in tags:
            tags.append(tag)
    return tags


def optional_text(value):
    if value is None:
        return None
    value = str(value).strip()
    return value or None
