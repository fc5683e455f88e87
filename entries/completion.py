"""Stage completeness rules.

Every stage has one rule function that inspects a mapping of field values and
the set of attachment roles present, and reports which required fields and
files are still missing. ``evaluate`` is pure; ``refresh_stage_status`` is the
only helper here that touches the database.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Callable

from django.conf import settings

from .models import (
    STAGE_STATUS_FIELDS,
    AttachmentRole,
    ChaserSongDesignation,
    ColorType,
    CopyrightPermission,
    Entry,
    ProgramInfo,
    PropsUsage,
    ROLE_STAGES,
    Stage,
    StageRecord,
    StageStatus,
    SyncOption,
)

__all__ = [
    "Completion",
    "age_on",
    "evaluate",
    "guardian_required",
    "is_filled",
    "refresh_stage_status",
    "values_for",
]

ADULT_AGE = 18

BASIC_REQUIRED_FIELDS = (
    "dance_style",
    "category_division",
    "representative_name",
    "representative_furigana",
    "representative_birthdate",
    "representative_email",
    "phone_number",
    "real_name",
    "real_name_kana",
    "partner_name",
    "partner_furigana",
    "partner_real_name",
    "partner_real_name_kana",
    "emergency_contact_name_1",
    "emergency_contact_phone_1",
)
BASIC_REQUIRED_AGREEMENTS = ("agreement_checked", "privacy_policy_checked")
GUARDIAN_FIELDS = ("guardian_name", "guardian_phone", "guardian_email")
PARTNER_GUARDIAN_FIELDS = ("partner_guardian_name", "partner_guardian_phone", "partner_guardian_email")

PRELIMINARY_REQUIRED_FIELDS = (
    "work_title",
    "work_title_kana",
    "work_story",
    "music_title",
    "cd_title",
    "artist",
    "record_number",
    "jasrac_code",
    "choreographer1_name",
    "choreographer1_furigana",
)

PROGRAM_REQUIRED_FIELDS = ("song_count", "semifinal_story", "semifinal_highlight")
PROGRAM_FINAL_REQUIRED_FIELDS = ("final_story", "final_highlight")
PROGRAM_IMAGE_NUMBERS = (1, 2, 3, 4)

MUSIC_REQUIRED_FIELDS = ("work_title", "work_character_story", "copyright_permission", "music_title", "music_type")
SOUND_REQUIRED_FIELDS = (
    "sound_start_timing",
    "chaser_song_designation",
    "fade_out_start_time",
    "fade_out_complete_time",
)
LIGHTING_REQUIRED_SCENES = ("scene1", "chaser_exit")
BANK_REQUIRED_FIELDS = ("bank_name", "branch_name", "account_type", "account_number", "account_holder")
FINALS_OPTION_FIELDS = ("music_option", "sound_option", "lighting_option", "choreographer_option")

# Columns that never count as user data.
_BOOKKEEPING_FIELDS = frozenset({"id", "entry", "entry_id", "created_at", "updated_at"})


@dataclass(frozen=True)
class Completion:
    """Outcome of checking one stage."""

    stage: str
    has_data: bool
    missing_fields: tuple[str, ...] = ()
    missing_files: tuple[str, ...] = ()

    @property
    def is_complete(self) -> bool:
        return self.has_data and not self.missing_fields and not self.missing_files

    @property
    def status(self) -> str:
        if not self.has_data:
            return StageStatus.NOT_STARTED
        if self.is_complete:
            return StageStatus.REGISTERED
        return StageStatus.UNREGISTERED


def is_filled(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, (int, float)):
        return value != 0
    return True


def _as_date(value: Any) -> date | None:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        try:
            return date.fromisoformat(value.strip())
        except ValueError:
            return None
    return None


def age_on(birthdate: date, on: date) -> int:
    """Return the age in full years on the given day."""

    had_birthday = (on.month, on.day) >= (birthdate.month, birthdate.day)
    return on.year - birthdate.year - (0 if had_birthday else 1)


def guardian_required(birthdate: Any, event_date: date | None = None) -> bool:
    """Whether a person born on ``birthdate`` needs guardian details."""

    born = _as_date(birthdate)
    if born is None:
        return False
    return age_on(born, event_date or settings.COMPETITION_EVENT_DATE) < ADULT_AGE


def _missing(values: Mapping[str, Any], names: Iterable[str]) -> list[str]:
    return [name for name in names if not is_filled(values.get(name))]


def _missing_roles(roles: set[str], required: Iterable[str]) -> list[str]:
    return [role for role in required if role not in roles]


def _basic_rules(values, roles, event_date):
    required = list(BASIC_REQUIRED_FIELDS)
    if guardian_required(values.get("representative_birthdate"), event_date):
        required.extend(GUARDIAN_FIELDS)
    if guardian_required(values.get("partner_birthdate"), event_date):
        required.extend(PARTNER_GUARDIAN_FIELDS)
    missing = _missing(values, required)
    missing.extend(name for name in BASIC_REQUIRED_AGREEMENTS if values.get(name) is not True)
    return missing, []


def _preliminary_rules(values, roles, event_date):
    return (
        _missing(values, PRELIMINARY_REQUIRED_FIELDS),
        _missing_roles(roles, [AttachmentRole.PRELIMINARY_VIDEO]),
    )


def _program_rules(values, roles, event_date):
    fields = list(PROGRAM_REQUIRED_FIELDS)
    files = [AttachmentRole.PROGRAM_PLAYER_PHOTO]
    files.extend(f"program_semifinal_image{number}" for number in PROGRAM_IMAGE_NUMBERS)
    # A second piece gets its own programme page.
    if values.get("song_count") == ProgramInfo.SongCount.TWO:
        fields.extend(PROGRAM_FINAL_REQUIRED_FIELDS)
        files.append(AttachmentRole.PROGRAM_FINAL_PLAYER_PHOTO)
        files.extend(f"program_final_image{number}" for number in PROGRAM_IMAGE_NUMBERS)
    return _missing(values, fields), _missing_roles(roles, files)


def _music_requirements(values, stage):
    fields = list(MUSIC_REQUIRED_FIELDS)
    if values.get("copyright_permission") == CopyrightPermission.COMMERCIAL:
        fields.append("jasrac_code")
    return fields, [f"{stage}_music"]


def _sound_requirements(values, stage):
    files = []
    if values.get("chaser_song_designation") == ChaserSongDesignation.REQUIRED:
        files.append(f"{stage}_chaser_song")
    return list(SOUND_REQUIRED_FIELDS), files


def _lighting_requirements(values, stage):
    fields = ["dance_start_timing"]
    files = []
    for scene in LIGHTING_REQUIRED_SCENES:
        fields.extend(f"{scene}_{part}" for part in ("time", "trigger", "color_type", "image"))
        if values.get(f"{scene}_color_type") == ColorType.OTHER:
            fields.append(f"{scene}_color_other")
        files.append(f"{stage}_{scene}_image")
    # Optional scenes still need the free-text colour once "other" is picked.
    for number in range(2, 6):
        if values.get(f"scene{number}_color_type") == ColorType.OTHER:
            fields.append(f"scene{number}_color_other")
    return fields, files


def _props_requirements(values):
    fields = ["props_usage"]
    if values.get("props_usage") == PropsUsage.YES:
        fields.append("props_details")
    return fields


def _semifinals_rules(values, roles, event_date):
    fields = ["music_option"]
    files = []
    for requirements in (_music_requirements, _sound_requirements, _lighting_requirements):
        group_fields, group_files = requirements(values, Stage.SEMIFINALS)
        fields.extend(group_fields)
        files.extend(group_files)
    fields.extend(_props_requirements(values))
    fields.extend(BANK_REQUIRED_FIELDS)
    files.append(AttachmentRole.BANK_SLIP)
    return _missing(values, fields), _missing_roles(roles, files)


def _finals_rules(values, roles, event_date):
    fields = list(FINALS_OPTION_FIELDS)
    files = []
    for requirements in (_music_requirements, _sound_requirements, _lighting_requirements):
        group_fields, group_files = requirements(values, Stage.FINALS)
        fields.extend(group_fields)
        files.extend(group_files)
    if values.get("choreographer_option") == SyncOption.DIFFERENT:
        fields.append("choreographer_name")
    fields.extend(_props_requirements(values))
    fields.extend(["choreographer_attendance", "choreographer_photo_permission"])
    files.append(AttachmentRole.FINALS_CHOREOGRAPHER_PHOTO)
    return _missing(values, fields), _missing_roles(roles, files)


def _applications_rules(values, roles, event_date):
    count = values.get("related_ticket_count") or 0
    try:
        count = min(int(count), 5)
    except (TypeError, ValueError):
        count = 0
    fields = []
    files = []
    for number in range(1, count + 1):
        fields.extend([f"related{number}_name", f"related{number}_relationship"])
    if count > 0:
        files.append(AttachmentRole.PAYMENT_SLIP)
    return _missing(values, fields), _missing_roles(roles, files)


def _sns_rules(values, roles, event_date):
    return [], _missing_roles(
        roles, [AttachmentRole.SNS_PRACTICE_VIDEO, AttachmentRole.SNS_INTRODUCTION_HIGHLIGHT]
    )


_RULES: dict[str, Callable] = {
    Stage.BASIC: _basic_rules,
    Stage.PRELIMINARY: _preliminary_rules,
    Stage.PROGRAM: _program_rules,
    Stage.SEMIFINALS: _semifinals_rules,
    Stage.FINALS: _finals_rules,
    Stage.APPLICATIONS: _applications_rules,
    Stage.SNS: _sns_rules,
}


def evaluate(
    stage: str,
    values: Mapping[str, Any],
    attachments: Iterable[str] = (),
    *,
    event_date: date | None = None,
) -> Completion:
    """Check ``values`` and the attachment roles present against a stage's rules."""

    stage = Stage(stage)
    roles = {str(role) for role in attachments if ROLE_STAGES.get(str(role)) == stage}
    has_data = bool(roles) or any(
        is_filled(value) for name, value in values.items() if name not in _BOOKKEEPING_FIELDS
    )
    missing_fields, missing_files = _RULES[stage](values, roles, event_date)
    return Completion(
        stage=stage,
        has_data=has_data,
        missing_fields=tuple(dict.fromkeys(missing_fields)),
        missing_files=tuple(str(role) for role in missing_files),
    )


def values_for(record: StageRecord | None) -> dict[str, Any]:
    if record is None:
        return {}
    return {name: getattr(record, name) for name in record.data_field_names()}


def refresh_stage_status(entry: Entry, stage: str, *, event_date: date | None = None) -> Completion:
    """Re-evaluate a stage from the stored row and attachments and persist its status."""

    result = evaluate(
        stage,
        values_for(entry.stage_record(stage)),
        entry.attachment_roles(),
        event_date=event_date,
    )
    field_name = STAGE_STATUS_FIELDS[result.stage]
    if getattr(entry, field_name) != result.status:
        Entry.objects.filter(pk=entry.pk).update(**{field_name: result.status})
        setattr(entry, field_name, result.status)
    return result
