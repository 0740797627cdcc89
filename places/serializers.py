import logging

from django.utils.translation import get_language
from django.utils.translation import gettext_lazy as _
from rest_framework import serializers
from rest_framework.settings import api_settings
from rest_framework.utils import html

from .errors import (
    INVALID_CATEGORY,
    INVALID_CITY,
    INVALID_INPUT,
    INVALID_TAGS,
    INVALID_URL,
    NAME_ADDRESS_REQUIRED,
)
from .models import Place
from .presenters import google_maps_url, google_search_url, localized_note
from .validators import is_tag_input, optional_text, parse_addresses, parse_tags

logger = logging.getLogger(__name__)

OPTIONAL_FIELDS = ("instagram_url", "reels_url", "tiktok_url", "coffee_by", "note_en", "note_ko")
LEGACY_ADDRESS_FIELDS = ("address", "latitude", "longitude")

# 앞에 있는 필드의 에러가 우선
FIELD_ERROR_CODES = (
    ("name", NAME_ADDRESS_REQUIRED),
    ("addresses", NAME_ADDRESS_REQUIRED),
    ("address", NAME_ADDRESS_REQUIRED),
    ("latitude", NAME_ADDRESS_REQUIRED),
    ("longitude", NAME_ADDRESS_REQUIRED),
    ("category", INVALID_CATEGORY),
    ("city", INVALID_CITY),
    ("instagram_url", INVALID_URL),
    ("reels_url", INVALID_URL),
    ("tiktok_url", INVALID_URL),
    ("tags", INVALID_TAGS),
)


class AddressListField(serializers.Field):
    """JSON 문자열(multipart) 또는 리스트(JSON 본문)로 받는 주소 목록"""

    default_error_messages = {
        "invalid": _("Enter at least one address with a latitude and longitude."),
    }

    def to_internal_value(self, data):
        addresses, error = parse_addresses(data)
        if error:
            self.fail("invalid")
        return addresses

    def to_representation(self, value):
        return value


class TagListField(serializers.Field):
    default_error_messages = {
        "invalid": _("Tags must be a comma separated string or a list of strings."),
    }

    def get_value(self, dictionary):
        # 폼은 tags=a&tags=b 처럼 여러 번 보낼 수 있다
        if html.is_html_input(dictionary):
            values = dictionary.getlist(self.field_name)
            if len(values) > 1:
                return values
        return super().get_value(dictionary)

    def to_internal_value(self, data):
        if not is_tag_input(data):
            self.fail("invalid")
        return parse_tags(data)

    def to_representation(self, value):
        return value


class PlaceInputSerializer(serializers.ModelSerializer):
    """관리자 등록/수정 입력 검증. 저장은 services 가 한다."""

    addresses = AddressListField(required=False)
    tags = TagListField(required=False, allow_null=True)
    category = serializers.ChoiceField(choices=Place.Category.choices, required=False, allow_blank=True)
    city = serializers.ChoiceField(choices=Place.City.choices, required=False, allow_blank=True)
    is_public = serializers.BooleanField(required=False)

    # 단일 주소 폼 호환
    address = serializers.CharField(required=False, allow_blank=True)
    latitude = serializers.FloatField(required=False, allow_null=True)
    longitude = serializers.FloatField(required=False, allow_null=True)

    class Meta:
        model = Place
        fields = [
            "name",
            "city",
            "addresses",
            "category",
            "coffee_by",
            "tags",
            "note_en",
            "note_ko",
            "instagram_url",
            "reels_url",
            "tiktok_url",
            "is_public",
            "address",
            "latitude",
            "longitude",
        ]

    def validate(self, attrs):
        legacy = {field: attrs.pop(field, None) for field in LEGACY_ADDRESS_FIELDS}
        if "addresses" not in attrs:
            addresses, error = parse_addresses([{
                "address": legacy["address"] or "",
                "latitude": legacy["latitude"],
                "longitude": legacy["longitude"],
            }])
            if error:
                raise serializers.ValidationError({"addresses": AddressListField.default_error_messages["invalid"]})
            attrs["addresses"] = addresses

        attrs["category"] = attrs.get("category") or Place.Category.CAFE
        attrs["city"] = attrs.get("city") or Place.City.MELBOURNE
        attrs["tags"] = attrs.get("tags") or []
        for field in OPTIONAL_FIELDS:
            attrs[field] = optional_text(attrs.get(field))

        # 폼에서 빠진 체크박스가 False 로 읽히지 않도록 보낸 경우에만 반영
        if "is_public" not in self.initial_data:
            attrs.pop("is_public", None)
        return attrs


def input_error_code(errors):
    for field, code in FIELD_ERROR_CODES:
        if field in errors:
            return code
    if api_settings.NON_FIELD_ERRORS_KEY in errors:
        return NAME_ADDRESS_REQUIRED
    return INVALID_INPUT


def normalize_place_input(data):
    """
    폼/JSON 입력을 저장 가능한 payload 로 변환한다.

    Returns:
        (payload, None) 또는 (None, 에러코드). 이미지 처리는 여기서 하지 않는다.
    """
    serializer = PlaceInputSerializer(data=data)
    if not serializer.is_valid():
        error = input_error_code(serializer.errors)
        logger.warning("place input rejected: %s (%s)", error, dict(serializer.errors))
        return None, error
    return dict(serializer.validated_data), None


class PlaceCardSerializer(serializers.ModelSerializer):
    primary_address = serializers.CharField(read_only=True)

    class Meta:
        model = Place
        fields = ["id", "name", "category", "primary_address", "image_url", "tags"]


class PlaceDetailSerializer(serializers.ModelSerializer):
    primary_address = serializers.CharField(read_only=True)
    addresses = serializers.SerializerMethodField()
    note = serializers.SerializerMethodField()
    plus_locations = serializers.SerializerMethodField()
    google_search_url = serializers.SerializerMethodField()
    google_maps_url = serializers.SerializerMethodField()

    class Meta:
        model = Place
        fields = [
            "id",
            "name",
            "city",
            "category",
            "primary_address",
            "addresses",
            "plus_locations",
            "coffee_by",
            "tags",
            "note",
            "image_url",
            "instagram_url",
            "reels_url",
            "tiktok_url",
            "google_search_url",
            "google_maps_url",
        ]

    def get_addresses(self, obj):
        return [
            {**entry, "google_maps_url": google_maps_url(obj.name, entry["address"])}
            for entry in obj.addresses
        ]

    def get_note(self, obj):
        locale = self.context.get("locale") or get_language()
        return localized_note(obj, locale)

    def get_plus_locations(self, obj):
        return max(len(obj.addresses) - 1, 0)

    def get_google_search_url(self, obj):
        return google_search_url(obj.name, obj.primary_address)

    def get_google_maps_url(self, obj):
        return google_maps_url(obj.name, obj.primary_address)


class MarkerSerializer(serializers.Serializer):
    id = serializers.CharField()
    place_id = serializers.SerializerMethodField()
    name = serializers.SerializerMethodField()
    address_index = serializers.IntegerField()
    address = serializers.CharField()
    latitude = serializers.FloatField()
    longitude = serializers.FloatField()

    def get_place_id(self, obj):
        return str(obj.place.id)

    def get_name(self, obj):
        return obj.place.name


class AdminPlaceSerializer(serializers.ModelSerializer):
    primary_address = serializers.CharField(read_only=True)

    class Meta:
        model = Place
        fields = [
            "id",
            "name",
            "city",
            "category",
            "primary_address",
            "addresses",
            "coffee_by",
            "tags",
            "note_en",
            "note_ko",
            "image_url",
            "instagram_url",
            "reels_url",
            "tiktok_url",
            "is_public",
            "created_at",
            "updated_at",
        ]
