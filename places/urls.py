from rest_framework.routers import SimpleRouter
from .views import AdminPlaceViewSet, PlaceViewSet

app_name = "places"

router = SimpleRouter(trailing_slash=False)
router.register("admin/places", AdminPlaceViewSet, basename="admin-places")
router.register("places", PlaceViewSet, basename="places")

urlpatterns = router.urls
