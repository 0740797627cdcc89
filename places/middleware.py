import logging

from django.conf import settings
from django.http import Http404
from django.urls import reverse

from .permissions import request_hostname

logger = logging.getLogger(__name__)


class LocalAdminHostMiddleware:
    """Django admin 도 ADMIN_HOSTS 에서만 열린다. 그 외 호스트에는 없는 경로처럼 404."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        if request.path.startswith(reverse("admin:index")):
            hostname = request_hostname(request)
            if hostname not in settings.ADMIN_HOSTS:
                logger.warning("django admin access from non-local host: %s", hostname)
                raise Http404()
        return self.get_response(request)
