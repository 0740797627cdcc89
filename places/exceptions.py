from django.utils.translation import gettext as _
from rest_framework.views import exception_handler


def api_exception_handler(exc, context):
    """DRF 기본 에러 응답을 {status, message, code, data} 형태로 감싼다."""
    response = exception_handler(exc, context)
    if response is None:
        return None

    detail = response.data
    if isinstance(detail, dict) and set(detail) == {"detail"}:
        message = str(detail["detail"])
        data = {}
    else:
        message = _("Request failed.")
        data = detail

    response.data = {
        "status": "error",
        "message": message,
        "code": response.status_code,
        "data": data,
    }
    return response
