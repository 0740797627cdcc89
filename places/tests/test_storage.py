import re
from unittest import mock

from botocore.exceptions import ClientError
from django.core.files.uploadedfile import SimpleUploadedFile

from places.errors import IMAGE_UPLOAD_FAILED
from places.storage import generate_image_name, public_url, upload_image


def test_generate_image_name_format():
    name = generate_image_name("flat white.JPG", now=1700000000)

    assert re.fullmatch(r"1700000000000-[0-9a-z]+\.JPG", name)


def test_generate_image_name_is_unique():
    assert generate_image_name("a.png") != generate_image_name("a.png")


def test_public_url_uses_bucket_or_custom_domain(settings):
    settings.AWS_S3_CUSTOM_DOMAIN = ""
    settings.AWS_STORAGE_BUCKET_NAME = "cafes"
    settings.AWS_S3_REGION_NAME = "ap-southeast-2"
    assert public_url("places/x.jpg") == "https://cafes.s3.ap-southeast-2.amazonaws.com/places/x.jpg"

    settings.AWS_S3_CUSTOM_DOMAIN = "cdn.example.com"
    assert public_url("places/x.jpg") == "https://cdn.example.com/places/x.jpg"


def test_upload_image_puts_object_and_returns_public_url(settings):
    settings.AWS_S3_CUSTOM_DOMAIN = ""
    settings.AWS_STORAGE_BUCKET_NAME = "cafes"
    settings.AWS_LOCATION = "places"
    image = SimpleUploadedFile("lune.jpg", b"jpeg-bytes", content_type="image/jpeg")

    with mock.patch("places.storage.get_s3_client") as get_client:
        url, error = upload_image(image)

    assert error is None
    kwargs = get_client.return_value.put_object.call_args.kwargs
    assert kwargs["Bucket"] == "cafes"
    assert re.fullmatch(r"places/\d+-[0-9a-z]+\.jpg", kwargs["Key"])
    assert kwargs["Body"] == b"jpeg-bytes"
    assert kwargs["ContentType"] == "image/jpeg"
    assert url.endswith(kwargs["Key"])


def test_upload_image_failure_returns_error():
    image = SimpleUploadedFile("lune.jpg", b"jpeg-bytes", content_type="image/jpeg")
    failure = ClientError({"Error": {"Code": "AccessDenied", "Message": "denied"}}, "PutObject")

    with mock.patch("places.storage.get_s3_client") as get_client:
        get_client.return_value.put_object.side_effect = failure
        url, error = upload_image(image)

    assert url is None
    assert error == IMAGE_UPLOAD_FAILED
