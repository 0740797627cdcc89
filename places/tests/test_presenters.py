from places.presenters import google_maps_url, google_search_url, localized_note
from places.tests.factories import make_place


def test_korean_falls_back_to_english_note():
    place = make_place(note_en="X", note_ko=None)

    assert localized_note(place, "ko") == "X"


def test_korean_note_preferred_for_korean():
    place = make_place(note_en="X", note_ko="엑스")

    assert localized_note(place, "ko") == "엑스"
    assert localized_note(place, "ko-kr") == "엑스"
    assert localized_note(place, "en") == "X"


def test_no_notes_renders_nothing():
    place = make_place(note_en=None, note_ko=None)

    assert localized_note(place, "ko") is None
    assert localized_note(place, "en") is None


def test_english_ignores_korean_note():
    place = make_place(note_en=None, note_ko="엑스")

    assert localized_note(place, "en") is None


def test_google_links_are_encoded():
    assert google_search_url("Test Cafe", "123 Main St") == "https://www.google.com/search?q=Test%20Cafe%20123%20Main%20St"
    assert google_maps_url("A&B", "1/2 St") == "https://www.google.com/maps/search/?api=1&query=A%26B%201%2F2%20St"
