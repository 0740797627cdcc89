import json
from datetime import timedelta
from unittest import mock

import pytest
from django.core.cache import cache
from django.core.files.uploadedfile import SimpleUploadedFile
from django.db import DatabaseError
from django.utils import timezone

from places import services
from places.errors import DUPLICATE_SUBMISSION, IMAGE_UPLOAD_FAILED, NAME_ADDRESS_REQUIRED, PLACE_NOT_FOUND
from places.models import Place

pytestmark = pytest.mark.django_db

MAIN_ST = {"address": "123 Main St", "latitude": -37.8, "longitude": 144.9}


def _form(**overrides):
    data = {"name": "Test Cafe", "addresses": json.dumps([MAIN_ST])}
    data.update(overrides)
    return data


def _image():
    return SimpleUploadedFile("photo.jpg", b"bytes", content_type="image/jpeg")


def test_create_place_stores_public_record_without_image():
    with mock.patch("places.services.upload_image") as upload:
        result = services.create_place(_form())

    upload.assert_not_called()
    place = Place.objects.get(pk=result["id"])
    assert place.addresses == [MAIN_ST]
    assert place.is_public is True
    assert place.image_url is None


def test_create_place_ignores_is_public_from_form():
    result = services.create_place(_form(is_public="false"))

    assert Place.objects.get(pk=result["id"]).is_public is True


def test_invalid_input_fails_before_any_io():
    with mock.patch("places.services.upload_image") as upload:
        result = services.create_place(_form(addresses="[]"), image=_image())

    assert result == {"error": NAME_ADDRESS_REQUIRED}
    upload.assert_not_called()
    assert Place.objects.count() == 0


def test_create_place_uploads_image_first():
    with mock.patch("places.services.upload_image", return_value=("https://cdn/x.jpg", None)):
        result = services.create_place(_form(), image=_image())

    assert Place.objects.get(pk=result["id"]).image_url == "https://cdn/x.jpg"


def test_upload_failure_aborts_insert():
    with mock.patch("places.services.upload_image", return_value=(None, IMAGE_UPLOAD_FAILED)):
        result = services.create_place(_form(), image=_image())

    assert result == {"error": IMAGE_UPLOAD_FAILED}
    assert Place.objects.count() == 0


def test_empty_file_is_treated_as_no_image():
    empty = SimpleUploadedFile("photo.jpg", b"", content_type="image/jpeg")

    with mock.patch("places.services.upload_image") as upload:
        result = services.create_place(_form(), image=empty)

    upload.assert_not_called()
    assert "id" in result


def test_store_error_message_passes_through():
    with mock.patch.object(Place.objects, "create", side_effect=DatabaseError("disk full")):
        result = services.create_place(_form())

    assert result == {"error": "disk full"}


def test_idempotency_key_prevents_duplicate_insert():
    first = services.create_place(_form(), idempotency_key="abc")
    second = services.create_place(_form(), idempotency_key="abc")

    assert first == second
    assert Place.objects.count() == 1


def test_idempotency_key_of_deleted_place_creates_again():
    first = services.create_place(_form(), idempotency_key="abc")
    services.delete_place(first["id"])

    second = services.create_place(_form(), idempotency_key="abc")

    assert second["id"] != first["id"]
    assert Place.objects.filter(pk=second["id"]).exists()


def test_idempotency_key_in_flight_is_rejected():
    cache.set(f"{services.IDEMPOTENCY_CACHE_PREFIX}abc", services.IDEMPOTENCY_PENDING)

    result = services.create_place(_form(), idempotency_key="abc")

    assert result == {"error": DUPLICATE_SUBMISSION}
    assert Place.objects.count() == 0


def test_failed_submission_releases_idempotency_key():
    services.create_place(_form(name=""), idempotency_key="abc")

    result = services.create_place(_form(), idempotency_key="abc")

    assert "id" in result
    assert Place.objects.count() == 1


def test_update_keeps_image_when_no_new_file(place_factory):
    place = place_factory("Old", image_url="https://cdn/old.jpg")

    result = services.update_place(place.id, _form(name="New", tags="Cakes"))

    place.refresh_from_db()
    assert result == {}
    assert place.name == "New"
    assert place.tags == ["Cakes"]
    assert place.image_url == "https://cdn/old.jpg"


def test_update_replaces_image_with_new_file(place_factory):
    place = place_factory("Old", image_url="https://cdn/old.jpg")

    with mock.patch("places.services.upload_image", return_value=("https://cdn/new.jpg", None)):
        services.update_place(place.id, _form(), image=_image())

    place.refresh_from_db()
    assert place.image_url == "https://cdn/new.jpg"


def test_update_bumps_updated_at(place_factory):
    place = place_factory("Old")
    Place.objects.filter(pk=place.pk).update(updated_at=timezone.now() - timedelta(days=1))

    services.update_place(place.id, _form())

    place.refresh_from_db()
    assert place.updated_at > timezone.now() - timedelta(minutes=1)


def test_partial_update_keeps_unsent_fields(place_factory):
    place = place_factory("Lune", coffee_by="Market Lane", tags=["Pastries"], note_en="Croissants")

    result = services.update_place(place.id, {"note_ko": "크루아상"}, partial=True)

    place.refresh_from_db()
    assert result == {}
    assert place.name == "Lune"
    assert place.coffee_by == "Market Lane"
    assert place.tags == ["Pastries"]
    assert place.note_ko == "크루아상"


def test_partial_update_can_unpublish(place_factory):
    place = place_factory("Lune")

    services.update_place(place.id, {"is_public": "false"}, partial=True)

    place.refresh_from_db()
    assert place.is_public is False


def test_update_missing_place():
    result = services.update_place("7a8b0a56-8f0f-4f55-9b55-0a0d5c3c1b11", _form())

    assert result == {"error": PLACE_NOT_FOUND}


def test_update_validation_error(place_factory):
    place = place_factory("Lune")

    result = services.update_place(place.id, _form(name=""))

    assert result == {"error": NAME_ADDRESS_REQUIRED}


def test_delete_place(place_factory):
    place = place_factory("Lune")

    assert services.delete_place(place.id) == {}
    assert not Place.objects.filter(pk=place.pk).exists()
    assert services.delete_place(place.id) == {"error": PLACE_NOT_FOUND}


def test_get_place_returns_none_for_missing_or_malformed_id():
    assert services.get_place("not-a-uuid") is None
    assert services.get_place("7a8b0a56-8f0f-4f55-9b55-0a0d5c3c1b11") is None


def test_get_places_admin_is_newest_first(place_factory):
    older = place_factory("Older")
    Place.objects.filter(pk=older.pk).update(created_at=timezone.now() - timedelta(days=1))
    newer = place_factory("Newer")

    assert [p.pk for p in services.get_places()] == [newer.pk, older.pk]


def test_public_list_excludes_private_and_is_revalidated(place_factory):
    place_factory("Hidden", is_public=False)
    place_factory("Shown")

    assert [p.name for p in services.get_places(public_only=True)] == ["Shown"]

    services.create_place(_form(name="Fresh"))

    assert {p.name for p in services.get_places(public_only=True)} == {"Shown", "Fresh"}
