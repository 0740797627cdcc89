import logging

import requests
from django.conf import settings

logger = logging.getLogger(__name__)

GOOGLE_GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"


def geocode_address(query):
    """
    Google Geocoding 으로 주소 후보를 찾는다 (호주 한정).

    Raises:
        requests.RequestException: 네트워크/HTTP 오류, 또는 API 가 오류 상태를 돌려줄 때
    """
    params = {
        "address": query,
        "components": "country:AU",
        "region": "au",
        "key": settings.GOOGLE_MAPS_API_KEY,
    }
    r = requests.get(GOOGLE_GEOCODE_URL, params=params, timeout=settings.GOOGLE_GEOCODE_TIMEOUT)
    r.raise_for_status()
    data = r.json()

    status = data.get("status")
    if status not in ("OK", "ZERO_RESULTS"):
        logger.error("geocode failed: status=%s, query=%r", status, query)
        raise requests.RequestException(data.get("error_message") or status)

    items = []
    for result in data.get("results", []):
        location = result.get("geometry", {}).get("location", {})
        lat, lng = location.get("lat"), location.get("lng")
        if lat is None or lng is None:
            logger.warning("geocode result without coordinates skipped: %r", result.get("formatted_address"))
            continue
        items.append({
            "address": result.get("formatted_address") or query,
            "latitude": float(lat),
            "longitude": float(lng),
        })
    return items
