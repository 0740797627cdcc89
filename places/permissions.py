import hmac
import logging

from django.conf import settings
from rest_framework.exceptions import NotFound
from rest_framework.permissions import BasePermission

logger = logging.getLogger(__name__)


def request_hostname(request):
    host = request.get_host()
    if host.startswith("["):
        return host[1:].split("]", 1)[0]
    return host.split(":", 1)[0]


class IsLocalAdminHost(BasePermission):
    """
    관리자 API 접근 제한.

    로컬 호스트가 아니거나 ADMIN_API_TOKEN 이 설정됐는데 X-Admin-Token 이 다르면
    존재하지 않는 경로처럼 404 로 응답한다.
    """

    def has_permission(self, request, view):
        hostname = request_hostname(request)
        if hostname not in settings.ADMIN_HOSTS:
            logger.warning("admin access from non-local host: %s", hostname)
            raise NotFound()

        token = settings.ADMIN_API_TOKEN
        if token:
            supplied = request.headers.get("X-Admin-Token", "")
            if not hmac.compare_digest(supplied.encode(), token.encode()):
                logger.warning("admin access with invalid token from %s", hostname)
                raise NotFound()

        return True
