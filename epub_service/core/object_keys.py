"""
Object key utilities.

Key derivation for artifacts and status records, and validation of item ids
before they are used as part of a key.

Dependencies: epub_service.core.exceptions
System role: Object key layout
"""

from epub_service.core.exceptions import ValidationError

ARTIFACT_SUFFIX = ".epub"
STATUS_SUFFIX = ".status"
MAX_ID_LENGTH = 255


def artifact_key(version_tag: str, epub_id: str) -> str:
    """Key of the finished artifact: {version}/{id}.epub"""
    return f"{version_tag}/{epub_id}{ARTIFACT_SUFFIX}"


def status_key(version_tag: str, epub_id: str) -> str:
    """Key of the status record: {version}/{id}.status"""
    return f"{version_tag}/{epub_id}{STATUS_SUFFIX}"


def validate_epub_id(epub_id: str) -> None:
    """
    Reject ids that cannot form a safe object key.

    Args:
        epub_id: Work item id from the caller

    Raises:
        ValidationError: If the id is empty, too long, or escapes the namespace
    """
    if not epub_id or len(epub_id) > MAX_ID_LENGTH:
        raise ValidationError("Invalid EPUB id length", field="id")

    # Block path traversal
    if ".." in epub_id or "/" in epub_id or "\\" in epub_id:
        raise ValidationError("Invalid EPUB id: path traversal detected", field="id")
