"""
File uploads for proposals and project records.

Files go through Django's default storage under
``<UPLOAD_DIR>/<timestamp>-<sanitized-filename>`` and are referenced by
their public URL.
"""

import logging
import re

from django.conf import settings
from django.utils import timezone

from ssr_connect.core.exceptions import FileTooLargeError
from ssr_connect.core.exceptions import InvalidFileTypeError
from ssr_connect.core.exceptions import ValidationError

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9.-]")


def sanitize_filename(name: str) -> str:
    """Replace every character outside [A-Za-z0-9.-] with an underscore."""
    return _UNSAFE_CHARS.sub("_", name)


def upload_path(instance, filename: str) -> str:
    timestamp = int(timezone.now().timestamp() * 1000)
    return f"{settings.UPLOAD_DIR}/{timestamp}-{sanitize_filename(filename)}"


def validate_upload(file) -> None:
    """
    Check an uploaded file against the size and type limits.

    Raises:
        ValidationError: no file or an empty one
        FileTooLargeError: larger than UPLOAD_MAX_SIZE
        InvalidFileTypeError: content type not allowed
    """
    if not file or not file.size:
        raise ValidationError("No file provided.")
    if file.size > settings.UPLOAD_MAX_SIZE:
        limit_mb = settings.UPLOAD_MAX_SIZE // (1024 * 1024)
        raise FileTooLargeError(f"File size exceeds the {limit_mb}MB limit.")
    if file.content_type not in settings.UPLOAD_ALLOWED_CONTENT_TYPES:
        logger.info("Rejected upload %s of type %s", file.name, file.content_type)
        raise InvalidFileTypeError(
            "Invalid file type. Supported: PDF, DOC, DOCX, PPT, PPTX, MP4, MOV, AVI, JPG, PNG, GIF."
        )
