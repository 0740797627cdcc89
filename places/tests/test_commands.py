import json
from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from places.models import Place

pytestmark = pytest.mark.django_db


def _write(tmp_path, data):
    path = tmp_path / "places.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_load_places_saves_valid_items_and_skips_invalid(tmp_path):
    path = _write(tmp_path, [
        {
            "name": "Lune",
            "addresses": [{"address": "119 Rose St Fitzroy", "latitude": -37.79, "longitude": 144.98}],
            "tags": ["Pastries"],
            "coffee_by": "Market Lane",
            "image_url": "https://cdn/lune.jpg",
        },
        {"name": "No Address", "addresses": []},
        {"name": "Bad City", "city": "perth", "addresses": [{"address": "1 St", "latitude": 0, "longitude": 0}]},
        "not an object",
    ])
    out = StringIO()

    call_command("load_places", path, stdout=out)

    place = Place.objects.get()
    assert place.name == "Lune"
    assert place.is_public is True
    assert place.image_url == "https://cdn/lune.jpg"
    assert "1개의 장소를 저장했습니다. (스킵된 건수: 3)" in out.getvalue()


def test_load_places_private_flag(tmp_path):
    path = _write(tmp_path, [
        {"name": "Lune", "address": "119 Rose St Fitzroy", "latitude": -37.79, "longitude": 144.98},
    ])

    call_command("load_places", path, "--private", stdout=StringIO())

    place = Place.objects.get()
    assert place.is_public is False
    assert place.addresses == [{"address": "119 Rose St Fitzroy", "latitude": -37.79, "longitude": 144.98}]


def test_load_places_rejects_non_array(tmp_path):
    path = _write(tmp_path, {"name": "Lune"})

    with pytest.raises(CommandError):
        call_command("load_places", path, stdout=StringIO())


def test_load_places_missing_file(tmp_path):
    with pytest.raises(CommandError):
        call_command("load_places", str(tmp_path / "missing.json"), stdout=StringIO())
