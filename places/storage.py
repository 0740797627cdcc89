import logging
import random
import string
import time

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from django.conf import settings

from .errors import IMAGE_UPLOAD_FAILED

logger = logging.getLogger(__name__)

BASE36_ALPHABET = string.digits + string.ascii_lowercase


def _base36_suffix(length=11):
    return "".join(random.choices(BASE36_ALPHABET, k=length))


def generate_image_name(filename, now=None):
    """'{epoch-millis}-{base36}.{ext}' 형식의 저장 파일명"""
    millis = int((time.time() if now is None else now) * 1000)
    ext = filename.rsplit(".", 1)[-1]
    return f"{millis}-{_base36_suffix()}.{ext}"


def _object_key(name):
    location = settings.AWS_LOCATION.strip("/")
    return f"{location}/{name}" if location else name


def public_url(key):
    if settings.AWS_S3_CUSTOM_DOMAIN:
        return f"https://{settings.AWS_S3_CUSTOM_DOMAIN}/{key}"
    return f"https://{settings.AWS_STORAGE_BUCKET_NAME}.s3.{settings.AWS_S3_REGION_NAME}.amazonaws.com/{key}"


def get_s3_client():
    return boto3.client(
        "s3",
        aws_access_key_id=settings.AWS_ACCESS_KEY_ID,
        aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
        region_name=settings.AWS_S3_REGION_NAME,
    )


def upload_image(image_file):
    """
    업로드된 파일을 S3 에 저장한다.

    Returns:
        (public_url, None) 또는 (None, "imageUploadFailed")
    """
    key = _object_key(generate_image_name(image_file.name))
    content_type = getattr(image_file, "content_type", None) or "application/octet-stream"

    try:
        get_s3_client().put_object(
            Bucket=settings.AWS_STORAGE_BUCKET_NAME,
            Key=key,
            Body=image_file.read(),
            ContentType=content_type,
        )
    except (BotoCoreError, ClientError):
        logger.exception("image upload failed: key=%s", key)
        return None, IMAGE_UPLOAD_FAILED

    logger.info("image uploaded: key=%s", key)
    return public_url(key), None
