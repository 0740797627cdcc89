import logging

import requests
from django.utils.translation import get_language
from django.utils.translation import gettext as _
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.response import Response

from . import services
from .constants import CITY_LABELS, COFFEE_ROASTERS, SUGGESTED_TAGS
from .errors import error_message, error_status
from .filters import FilterCriteria, filter_places
from .geocoding import geocode_address
from .markers import map_view
from .models import Place
from .permissions import IsLocalAdminHost
from .serializers import (
    AdminPlaceSerializer,
    MarkerSerializer,
    PlaceCardSerializer,
    PlaceDetailSerializer,
)

logger = logging.getLogger(__name__)


def api_response(status_str, message, code, data):
    return Response(
        {
            "status": status_str,
            "message": message,
            "code": code,
            "data": data,
        },
        status=code,
    )


def error_response(error):
    return api_response(
        "error",
        error_message(error),
        error_status(error),
        {"error": error},
    )


class PlaceViewSet(viewsets.ViewSet):
    """공개 목록/상세/지도. is_public 장소만 노출한다."""

    def _locale(self, request):
        return request.query_params.get("locale") or get_language()

    def list(self, request):
        criteria = FilterCriteria.from_params(request.query_params)
        places = filter_places(services.get_places(public_only=True), criteria)

        serializer = PlaceCardSerializer(places, many=True)
        return api_response(
            "success",
            _("Places retrieved."),
            200,
            {"items": serializer.data, "count": len(places), "filtered": criteria.is_active},
        )

    def retrieve(self, request, pk=None):
        place = services.get_place(pk)
        if place is None or not place.is_public:
            return api_response("error", _("Place not found."), 404, {})

        serializer = PlaceDetailSerializer(place, context={"locale": self._locale(request)})
        return api_response("success", _("Place retrieved."), 200, serializer.data)

    @action(detail=False, methods=["get"], url_path="map", url_name="map")
    def map_markers(self, request):
        criteria = FilterCriteria.from_params(request.query_params)
        places = filter_places(services.get_places(public_only=True), criteria)
        city = request.query_params.get("city") or Place.City.MELBOURNE

        view = map_view(places, focus=request.query_params.get("focus"), city=city)
        return api_response(
            "success",
            _("Map retrieved."),
            200,
            {
                "center": view["center"],
                "zoom": view["zoom"],
                "pinned_id": view["pinned_id"],
                "markers": MarkerSerializer(view["markers"], many=True).data,
                "count": len(view["markers"]),
            },
        )

    @action(detail=False, methods=["get"], url_path="options", url_name="options")
    def filter_options(self, request):
        return api_response(
            "success",
            _("Filter options retrieved."),
            200,
            {
                "tags": SUGGESTED_TAGS,
                "coffee_roasters": COFFEE_ROASTERS,
                "categories": Place.Category.values,
                "cities": [{"value": k, "label": v} for k, v in CITY_LABELS.items()],
            },
        )


class AdminPlaceViewSet(viewsets.ViewSet):
    permission_classes = [IsLocalAdminHost]
    parser_classes = [MultiPartParser, FormParser, JSONParser]

    def list(self, request):
        places = services.get_places()
        serializer = AdminPlaceSerializer(places, many=True)
        return api_response(
            "success",
            _("Places retrieved."),
            200,
            {"items": serializer.data, "count": len(places)},
        )

    def retrieve(self, request, pk=None):
        place = services.get_place(pk)
        if place is None:
            return api_response("error", _("Place not found."), 404, {})
        return api_response("success", _("Place retrieved."), 200, AdminPlaceSerializer(place).data)

    def create(self, request):
        result = services.create_place(
            request.data,
            image=request.FILES.get("image"),
            idempotency_key=request.headers.get("Idempotency-Key"),
        )
        if result.get("error"):
            return error_response(result["error"])

        return api_response("success", _("Place created."), status.HTTP_201_CREATED, {"id": result["id"]})

    def _update(self, request, pk, partial):
        result = services.update_place(pk, request.data, image=request.FILES.get("image"), partial=partial)
        if result.get("error"):
            return error_response(result["error"])

        place = services.get_place(pk)
        return api_response("success", _("Place updated."), 200, AdminPlaceSerializer(place).data)

    def update(self, request, pk=None):
        return self._update(request, pk, partial=False)

    def partial_update(self, request, pk=None):
        return self._update(request, pk, partial=True)

    def destroy(self, request, pk=None):
        result = services.delete_place(pk)
        if result.get("error"):
            return error_response(result["error"])
        return api_response("success", _("Place deleted."), 200, {"id": pk})

    @action(detail=False, methods=["get"], url_path="geocode")
    def geocode(self, request):
        query = (request.query_params.get("query") or "").strip()
        if not query:
            return api_response("error", _("The query parameter is required."), 400, {})

        try:
            items = geocode_address(query)
        except (requests.RequestException, ValueError) as e:
            logger.error("geocode proxy failed: %s", e)
            return api_response("error", _("Geocoding failed."), 502, {"detail": str(e)})

        return api_response("success", _("Geocoding succeeded."), 200, {"items": items, "count": len(items)})
