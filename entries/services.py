"""Saving stage forms and files, deadlines and administrator review."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable

from django.core.exceptions import ValidationError
from django.db import DatabaseError, transaction
from django.utils import timezone
from django.utils.dateparse import parse_datetime

from . import attachments, completion, sync
from .forms import STAGE_FORMS
from .models import (
    ROLE_STAGES,
    STAGE_STATUS_FIELDS,
    AttachmentRole,
    BasicInfo,
    Entry,
    Selection,
    Setting,
    Stage,
)

logger = logging.getLogger(__name__)

__all__ = [
    "StageFormController",
    "StageLocked",
    "bulk_update_status",
    "ensure_stage_open",
    "is_stage_open",
    "record_selection",
    "recompute_statuses",
    "remove_attachment",
    "stage_deadline",
    "store_attachment",
]

NOT_ENTERED = "Not entered"

DEADLINE_KEYS = {
    Stage.BASIC: "basic_info_deadline",
    Stage.PRELIMINARY: "preliminary_deadline",
    Stage.PROGRAM: "program_info_deadline",
    Stage.SEMIFINALS: "semifinals_deadline",
    Stage.FINALS: "finals_deadline",
    Stage.APPLICATIONS: "optional_request_deadline",
    Stage.SNS: "sns_deadline",
}


class StageLocked(Exception):
    """Raised when a stage is submitted after its deadline."""

    def __init__(self, stage: str, deadline: datetime):
        super().__init__(f"The {stage} deadline passed at {deadline.isoformat()}.")
        self.stage = stage
        self.deadline = deadline


def stage_deadline(stage: str) -> datetime | None:
    """Return the configured deadline for ``stage``, if any."""

    key = DEADLINE_KEYS[Stage(stage)]
    setting = Setting.objects.filter(key=key).first()
    if setting is None or not setting.value.strip():
        return None
    deadline = parse_datetime(setting.value.strip())
    if deadline is None:
        logger.warning("Ignoring malformed deadline %r for %s", setting.value, key)
        return None
    if timezone.is_naive(deadline):
        deadline = timezone.make_aware(deadline)
    return deadline


def is_stage_open(stage: str, now: datetime | None = None) -> bool:
    deadline = stage_deadline(stage)
    return deadline is None or (now or timezone.now()) <= deadline


def ensure_stage_open(stage: str, now: datetime | None = None) -> None:
    deadline = stage_deadline(stage)
    if deadline is not None and (now or timezone.now()) > deadline:
        logger.info("Refused %s change after the %s deadline", stage, deadline.isoformat())
        raise StageLocked(stage, deadline)


def _ensure_role_editable(entry: Entry, role: str) -> None:
    if role in sync.locked_roles(entry.stage_record(ROLE_STAGES[role])):
        raise ValidationError(
            "The %(label)s follows an earlier stage. Choose a different option before changing it.",
            code="mirrored_role",
            params={"label": AttachmentRole(role).label.lower()},
        )


def store_attachment(entry: Entry, upload, role: str, *, now: datetime | None = None) -> str:
    """Upload a file for ``role`` and re-point every later stage sharing it.

    Raises :class:`StageLocked` after the deadline and ``ValidationError``
    for a rejected upload or a role that mirrors an earlier stage.
    """

    role = AttachmentRole(role)
    ensure_stage_open(ROLE_STAGES[role], now)
    _ensure_role_editable(entry, role)
    return attachments.upload_and_register(
        entry,
        upload,
        role,
        on_recorded=lambda: sync.follow_role(entry, role),
    )


def remove_attachment(entry: Entry, role: str, *, now: datetime | None = None) -> int:
    role = AttachmentRole(role)
    ensure_stage_open(ROLE_STAGES[role], now)
    _ensure_role_editable(entry, role)
    with transaction.atomic():
        deleted = attachments.delete_by_role(entry, role)
        sync.follow_role(entry, role)
    return deleted


def _denormalise_basic(entry: Entry, record: BasicInfo) -> None:
    entry.participant_names = "\n".join(
        [record.representative_name or NOT_ENTERED, record.partner_name or NOT_ENTERED]
    )
    entry.dance_style = record.dance_style
    entry.save(update_fields=["participant_names", "dance_style", "updated_at"])


class StageFormController:
    """Validate and persist one stage form for a user.

    ``save`` returns ``True`` on success. On failure ``errors`` holds the
    field errors and ``message`` a user-facing summary. A save after the
    stage deadline raises :class:`StageLocked` instead.
    """

    invalid_message = "Please check the highlighted fields."
    failure_message = "Your details could not be saved. Please try again."
    missing_entry_message = "Save your basic information first."

    def __init__(
        self,
        stage: str,
        *,
        user,
        entry: Entry | None = None,
        validate_before_save: bool = False,
        now: datetime | None = None,
    ):
        self.stage = Stage(stage)
        self.user = user
        self.entry = entry if entry is not None else Entry.objects.filter(user=user).first()
        self.validate_before_save = validate_before_save
        self.now = now
        self.record = self.entry.stage_record(self.stage) if self.entry else None
        self.completion: completion.Completion | None = None
        self.errors: dict[str, list[str]] = {}
        self.message = ""

    def build_form(self, data=None, *, strict: bool = True):
        return STAGE_FORMS[self.stage](
            data,
            instance=self.record,
            strict=strict,
            attachments=self.entry.attachment_roles() if self.entry else (),
        )

    def save(self, data, *, is_temporary: bool = False) -> bool:
        self.errors = {}
        self.message = ""

        if not is_temporary:
            ensure_stage_open(self.stage, self.now)
        if self.entry is None and self.stage != Stage.BASIC:
            self.message = self.missing_entry_message
            return False

        strict = self.validate_before_save and not is_temporary
        form = self.build_form(data, strict=strict)
        if not form.is_valid():
            self.errors = {field: [str(message) for message in messages] for field, messages in form.errors.items()}
            self.message = self.invalid_message
            return False

        try:
            with transaction.atomic():
                entry = self.entry or Entry.objects.create(user=self.user)
                record = form.save(commit=False)
                record.entry = entry
                record.save()
                if self.stage == Stage.BASIC:
                    _denormalise_basic(entry, record)
                sync.sync_from_source(record)
                result = completion.refresh_stage_status(entry, self.stage)
        except DatabaseError:
            logger.exception("Saving %s for user %s failed", self.stage, self.user.pk)
            self.message = self.failure_message
            return False

        self.entry = entry
        self.record = record
        self.completion = result
        self.message = "Draft saved." if is_temporary else "Saved."
        logger.info("Saved %s for entry %s (%s)", self.stage, entry.pk, result.status)
        return True


def record_selection(
    entry: Entry,
    reviewer,
    *,
    status: str,
    score: int | None = None,
    comments: str = "",
) -> Selection:
    """Create or update the review for ``entry`` and mirror its status on the entry."""

    if status not in Entry.Status.values:
        raise ValueError(f"Unknown selection status {status!r}.")
    if score is not None and not 1 <= score <= 10:
        raise ValueError("Score must be between 1 and 10.")

    with transaction.atomic():
        selection, _created = Selection.objects.update_or_create(
            entry=entry,
            defaults={"reviewer": reviewer, "status": status, "score": score, "comments": comments},
        )
        Entry.objects.filter(pk=entry.pk).update(status=status, updated_at=timezone.now())
    entry.status = status
    logger.info("Entry %s marked %s by %s", entry.pk, status, getattr(reviewer, "pk", None))
    return selection


def bulk_update_status(entry_ids: Iterable[int], status: str) -> int:
    if status not in Entry.Status.values:
        raise ValueError(f"Unknown selection status {status!r}.")
    ids = list(entry_ids)
    if not ids:
        return 0
    with transaction.atomic():
        updated = Entry.objects.filter(pk__in=ids).update(status=status, updated_at=timezone.now())
        Selection.objects.filter(entry_id__in=ids).update(status=status, updated_at=timezone.now())
    return updated


def recompute_statuses(entries: Iterable[Entry] | None = None) -> int:
    """Re-evaluate every stage of each entry; returns how many status fields changed."""

    if entries is None:
        entries = Entry.objects.all().iterator()
    changed = 0
    for entry in entries:
        with transaction.atomic():
            for stage, field_name in STAGE_STATUS_FIELDS.items():
                before = getattr(entry, field_name)
                result = completion.refresh_stage_status(entry, stage)
                if result.status != before:
                    changed += 1
    return changed
