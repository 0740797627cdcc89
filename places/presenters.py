from urllib.parse import quote

from .filters import field_value


def localized_note(place, locale):
    """ko 는 note_ko -> note_en 순으로, 그 외 언어는 note_en 만 사용"""
    note_en = field_value(place, "note_en") or None
    if (locale or "").split("-")[0].lower() == "ko":
        return field_value(place, "note_ko") or note_en
    return note_en


def google_search_url(name, address):
    return f"https://www.google.com/search?q={quote(f'{name} {address}', safe='')}"


def google_maps_url(name, address):
    return f"https://www.google.com/maps/search/?api=1&query={quote(f'{name} {address}', safe='')}"
