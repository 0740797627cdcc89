import logging

from django.conf import settings
from django.core.cache import cache
from django.core.exceptions import ValidationError
from django.db import DatabaseError
from django.utils import timezone

from .errors import DUPLICATE_SUBMISSION, PLACE_NOT_FOUND
from .models import Place
from .serializers import normalize_place_input
from .storage import upload_image

logger = logging.getLogger(__name__)

PUBLIC_PLACES_CACHE_KEY = "places:public"
IDEMPOTENCY_CACHE_PREFIX = "places:idempotency:"
IDEMPOTENCY_PENDING = "pending"
EDITABLE_FIELDS = (
    "name", "city", "addresses", "category", "coffee_by", "tags",
    "note_en", "note_ko", "instagram_url", "reels_url", "tiktok_url",
)


def invalidate_place_views():
    cache.delete(PUBLIC_PLACES_CACHE_KEY)


def get_places(public_only=False):
    if not public_only:
        return list(Place.objects.all())

    places = cache.get(PUBLIC_PLACES_CACHE_KEY)
    if places is None:
        places = list(Place.objects.filter(is_public=True))
        cache.set(PUBLIC_PLACES_CACHE_KEY, places, settings.PLACES_CACHE_TIMEOUT)
    return places


def get_place(place_id):
    try:
        return Place.objects.get(pk=place_id)
    except (Place.DoesNotExist, ValidationError, ValueError):
        return None


def _has_file(image):
    return image is not None and getattr(image, "size", 0) > 0


def _claim_idempotency_key(cache_key):
    """
    같은 키로 먼저 들어온 등록이 있는지 확인하고 없으면 키를 점유한다.

    Returns:
        (기존 id, 에러코드). 둘 다 None 이면 새로 등록한다.
    """
    if cache.add(cache_key, IDEMPOTENCY_PENDING, settings.IDEMPOTENCY_TTL):
        return None, None

    existing_id = cache.get(cache_key)
    if existing_id == IDEMPOTENCY_PENDING:
        return None, DUPLICATE_SUBMISSION
    if existing_id and Place.objects.filter(pk=existing_id).exists():
        return existing_id, None

    # 만료됐거나 이미 삭제된 장소를 가리키는 키
    cache.set(cache_key, IDEMPOTENCY_PENDING, settings.IDEMPOTENCY_TTL)
    return None, None


def create_place(data, image=None, idempotency_key=None):
    """
    관리자 등록.

    Returns:
        {"id": "<uuid>"} 또는 {"error": "<code or store message>"}
    """
    if not idempotency_key:
        return _insert_place(data, image)

    cache_key = f"{IDEMPOTENCY_CACHE_PREFIX}{idempotency_key}"
    existing_id, error = _claim_idempotency_key(cache_key)
    if existing_id:
        logger.info("duplicate submission ignored: key=%s, id=%s", idempotency_key, existing_id)
        return {"id": existing_id}
    if error:
        logger.warning("submission in progress: key=%s", idempotency_key)
        return {"error": error}

    result = _insert_place(data, image)
    if "id" in result:
        cache.set(cache_key, result["id"], settings.IDEMPOTENCY_TTL)
    else:
        cache.delete(cache_key)
    return result


def _insert_place(data, image):
    payload, error = normalize_place_input(data)
    if error:
        return {"error": error}

    payload["image_url"] = None
    if _has_file(image):
        image_url, error = upload_image(image)
        if error:
            return {"error": error}
        payload["image_url"] = image_url

    payload["is_public"] = True

    try:
        place = Place.objects.create(**payload)
    except DatabaseError as e:
        logger.error("place insert failed: %s", e)
        return {"error": str(e)}

    place_id = str(place.id)
    invalidate_place_views()
    logger.info("place created: id=%s, name=%s", place_id, place.name)
    return {"id": place_id}


def _merged_input(place, data):
    merged = {field: getattr(place, field) for field in EDITABLE_FIELDS}
    if "addresses" not in data and "address" in data:
        merged.pop("addresses")
    for key in data:
        if key == "tags" and hasattr(data, "getlist") and len(data.getlist(key)) > 1:
            merged[key] = data.getlist(key)
        else:
            merged[key] = data.get(key)
    return merged


def update_place(place_id, data, image=None, partial=False):
    """
    관리자 수정. partial=True 면 보내지 않은 필드는 기존 값을 유지한다.

    이미지는 새 파일이 있을 때만 교체한다. 기존 이미지를 지우지 않는다.
    """
    if not partial:
        payload, error = normalize_place_input(data)
        if error:
            return {"error": error}

    place = get_place(place_id)
    if place is None:
        return {"error": PLACE_NOT_FOUND}

    if partial:
        payload, error = normalize_place_input(_merged_input(place, data))
        if error:
            return {"error": error}

    if _has_file(image):
        image_url, error = upload_image(image)
        if error:
            return {"error": error}
        payload["image_url"] = image_url

    try:
        updated = Place.objects.filter(pk=place.pk).update(**payload, updated_at=timezone.now())
    except DatabaseError as e:
        logger.error("place update failed: id=%s, %s", place_id, e)
        return {"error": str(e)}

    if not updated:
        return {"error": PLACE_NOT_FOUND}

    invalidate_place_views()
    logger.info("place updated: id=%s", place_id)
    return {}


def delete_place(place_id):
    place = get_place(place_id)
    if place is None:
        return {"error": PLACE_NOT_FOUND}

    try:
        place.delete()
    except DatabaseError as e:
        logger.error("place delete failed: id=%s, %s", place_id, e)
        return {"error": str(e)}

    invalidate_place_views()
    logger.info("place deleted: id=%s", place_id)
    return {}
