"""Upload, replace and delete the files attached to an entry."""

from __future__ import annotations

import logging
import re
from typing import Any, Callable

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.files.storage import default_storage
from django.db import transaction
from django.utils import timezone

from . import completion
from .models import ROLE_FILE_TYPES, ROLE_STAGES, AttachmentRole, Entry, FileAttachment

logger = logging.getLogger(__name__)

__all__ = [
    "build_path",
    "copy_role",
    "current",
    "delete_by_role",
    "roles_present",
    "sanitize_filename",
    "signed_url",
    "upload_and_register",
    "validate_upload",
]

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_-]")
_REPEATED_UNDERSCORES = re.compile(r"_{2,}")


def sanitize_filename(name: str) -> str:
    """Reduce an uploaded filename to ASCII letters, digits, ``_`` and ``-``."""

    stem, dot, extension = name.rpartition(".")
    if not dot or not stem:
        stem, extension = name, ""
    stem = _REPEATED_UNDERSCORES.sub("_", _UNSAFE_CHARS.sub("_", stem)).strip("_") or "file"
    extension = _UNSAFE_CHARS.sub("", extension).lower()
    return f"{stem}.{extension}" if extension else stem


def build_path(entry: Entry, file_type: str, name: str, *, now=None) -> str:
    stamp = (now or timezone.now()).strftime("%Y%m%dT%H%M%S%f")
    return f"entries/{entry.pk}/{file_type}/{stamp}-{sanitize_filename(name)}"


def validate_upload(upload, file_type: str) -> None:
    """Raise ``ValidationError`` when the upload is too large or of the wrong type."""

    limits = settings.ENTRY_UPLOAD_LIMITS
    limit = limits.get(file_type, limits["default"])
    if upload.size > limit:
        raise ValidationError(
            "File is too large (limit %(limit)d MB).",
            code="file_too_large",
            params={"limit": limit // (1024 * 1024)},
        )
    allowed = settings.ENTRY_UPLOAD_MIME_TYPES.get(file_type, [])
    content_type = getattr(upload, "content_type", "") or ""
    if content_type not in allowed:
        raise ValidationError(
            "Unsupported file type %(content_type)s.",
            code="unsupported_type",
            params={"content_type": content_type or "unknown"},
        )


def current(entry: Entry, role: str) -> FileAttachment | None:
    return FileAttachment.objects.filter(entry=entry, role=role).first()


def roles_present(entry: Entry) -> set[str]:
    return entry.attachment_roles()


def signed_url(attachment: FileAttachment) -> str:
    """Return a URL for downloading the attachment.

    Object-store backends sign this URL; the filesystem backend serves it from
    ``MEDIA_URL``.
    """

    return default_storage.url(attachment.file_path)


def _remove_blob_if_orphaned(path: str) -> None:
    if not path or FileAttachment.objects.filter(file_path=path).exists():
        return
    try:
        default_storage.delete(path)
    except OSError as exc:
        logger.warning("Could not delete stored file %r: %s", path, exc)


def _discard_after_commit(path: str) -> None:
    transaction.on_commit(lambda: _remove_blob_if_orphaned(path))


def _replace(entry: Entry, role: str, **metadata) -> FileAttachment:
    """Point the (entry, role) row at new file metadata, creating it if needed."""

    attachment = FileAttachment.objects.select_for_update().filter(entry=entry, role=role).first()
    if attachment is None:
        return FileAttachment.objects.create(entry=entry, role=role, **metadata)
    previous_path = attachment.file_path
    for name, value in metadata.items():
        setattr(attachment, name, value)
    attachment.uploaded_at = timezone.now()
    attachment.save()
    if previous_path != attachment.file_path:
        _discard_after_commit(previous_path)
    return attachment


def upload_and_register(entry: Entry, upload, role: str, *, on_recorded: Callable[[], Any] | None = None) -> str:
    """Store ``upload`` for ``role`` and record it, replacing any earlier file.

    ``on_recorded`` runs inside the same transaction once the row is written.
    Returns the storage path. If the row or the callback fails the stored
    file is removed again before the error propagates.
    """

    role = AttachmentRole(role)
    file_type = ROLE_FILE_TYPES[role]
    validate_upload(upload, file_type)

    path = default_storage.save(build_path(entry, file_type, upload.name), upload)
    try:
        with transaction.atomic():
            _replace(
                entry,
                role,
                file_type=file_type,
                file_name=upload.name,
                file_path=path,
                file_size=upload.size,
                mime_type=getattr(upload, "content_type", "") or "",
            )
            completion.refresh_stage_status(entry, ROLE_STAGES[role])
            if on_recorded is not None:
                on_recorded()
    except Exception:
        logger.exception("Recording %s for entry %s failed; removing %r", role, entry.pk, path)
        default_storage.delete(path)
        raise
    logger.info("Stored %s for entry %s at %r", role, entry.pk, path)
    return path


def copy_role(entry: Entry, source_role: str, target_role: str) -> FileAttachment | None:
    """Make ``target_role`` share the file currently held by ``source_role``.

    When the source has no file the target row is dropped.
    """

    source = current(entry, source_role)
    if source is None:
        delete_by_role(entry, target_role)
        return None
    with transaction.atomic():
        attachment = _replace(
            entry,
            target_role,
            file_type=ROLE_FILE_TYPES[str(target_role)],
            file_name=source.file_name,
            file_path=source.file_path,
            file_size=source.file_size,
            mime_type=source.mime_type,
        )
        completion.refresh_stage_status(entry, ROLE_STAGES[str(target_role)])
    return attachment


def delete_by_role(entry: Entry, role: str) -> int:
    """Remove every row for (entry, role); stored files go once nothing references them."""

    with transaction.atomic():
        attachments = list(FileAttachment.objects.select_for_update().filter(entry=entry, role=role))
        for attachment in attachments:
            attachment.delete()
            _discard_after_commit(attachment.file_path)
        if attachments:
            completion.refresh_stage_status(entry, ROLE_STAGES[str(role)])
    if attachments:
        logger.info("Deleted %s for entry %s", role, entry.pk)
    return len(attachments)
