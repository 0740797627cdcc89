from django.utils.translation import gettext_lazy as _

NAME_ADDRESS_REQUIRED = "nameAddressRequired"
INVALID_CATEGORY = "invalidCategory"
INVALID_CITY = "invalidCity"
INVALID_URL = "invalidUrl"
INVALID_TAGS = "invalidTags"
INVALID_INPUT = "invalidInput"
IMAGE_UPLOAD_FAILED = "imageUploadFailed"
PLACE_NOT_FOUND = "placeNotFound"
DUPLICATE_SUBMISSION = "duplicateSubmission"

ERROR_MESSAGES = {
    NAME_ADDRESS_REQUIRED: _("Name and at least one address are required."),
    INVALID_CATEGORY: _("Category must be cafe or restaurant."),
    INVALID_CITY: _("City must be melbourne, sydney or brisbane."),
    INVALID_URL: _("Links must be valid URLs."),
    INVALID_TAGS: _("Tags must be a comma separated string or a list of strings."),
    INVALID_INPUT: _("Invalid input."),
    IMAGE_UPLOAD_FAILED: _("Image upload failed."),
    PLACE_NOT_FOUND: _("Place not found."),
    DUPLICATE_SUBMISSION: _("This submission is already being processed."),
}

# 에러 코드별 HTTP 상태
ERROR_STATUS = {
    NAME_ADDRESS_REQUIRED: 400,
    INVALID_CATEGORY: 400,
    INVALID_CITY: 400,
    INVALID_URL: 400,
    INVALID_TAGS: 400,
    INVALID_INPUT: 400,
    IMAGE_UPLOAD_FAILED: 502,
    PLACE_NOT_FOUND: 404,
    DUPLICATE_SUBMISSION: 409,
}


def error_message(code):
    """Known codes are translated; store errors pass through verbatim."""
    message = ERROR_MESSAGES.get(code)
    return str(message) if message is not None else code


def error_status(code):
    return ERROR_STATUS.get(code, 500)
