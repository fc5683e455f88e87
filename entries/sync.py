"""Copy field groups from an earlier stage, or clear them for fresh input.

Semifinals can reuse the preliminary music and choreographer details, and
finals can reuse the semifinals music, sound, lighting and choreographer
details. Finals music can also be taken straight from the preliminary round.
Each reusable block is a :class:`SyncGroup` with an option column on the
target record naming the stage it mirrors, or ``different`` for fresh input.
Changes to a source record or source file flow on to every stage mirroring
it, including stages that mirror those in turn.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

from django.db import transaction

from . import attachments, completion
from .models import (
    AttachmentRole,
    CopyrightPermission,
    Entry,
    MusicRightsCleared,
    Stage,
    StageRecord,
    SyncOption,
)

logger = logging.getLogger(__name__)

__all__ = [
    "LINKS",
    "StageLink",
    "SyncGroup",
    "SyncResult",
    "SyncSource",
    "apply_option",
    "follow_role",
    "link_for",
    "locked_fields",
    "locked_roles",
    "permission_from_rights_cleared",
    "sync_from_source",
]

SCENES = ("scene1", "scene2", "scene3", "scene4", "scene5", "chaser_exit")
SCENE_PARTS = ("time", "trigger", "color_type", "color_other", "image", "notes")

RIGHTS_CLEARED_PERMISSIONS = {
    MusicRightsCleared.COMMERCIAL: CopyrightPermission.COMMERCIAL,
    MusicRightsCleared.LICENSED: CopyrightPermission.LICENSED,
    MusicRightsCleared.ORIGINAL: CopyrightPermission.ORIGINAL,
}


def permission_from_rights_cleared(value: str | None) -> str:
    """Translate the preliminary rights answer into a copyright permission."""

    return RIGHTS_CLEARED_PERMISSIONS.get((value or "").strip().upper(), "")


def _same_names(*names: str) -> tuple[tuple[str, str], ...]:
    return tuple((name, name) for name in names)


@dataclass(frozen=True)
class SyncSource:
    """Where a group's values come from when it mirrors an earlier stage."""

    stage: str
    field_map: tuple[tuple[str, str], ...]
    file_map: tuple[tuple[str, str], ...] = ()
    converters: Mapping[str, Callable[[Any], Any]] = field(default_factory=dict)

    @property
    def target_fields(self) -> tuple[str, ...]:
        return tuple(target for target, _source in self.field_map)

    def value_for(self, record: StageRecord, target_field: str, source_field: str) -> Any:
        value = getattr(record, source_field)
        converter = self.converters.get(target_field)
        return converter(value) if converter is not None else value


@dataclass(frozen=True)
class SyncGroup:
    """A block of target fields (and file roles) that can mirror an earlier stage.

    ``sources`` maps each mirroring option to its :class:`SyncSource`;
    ``different`` is always available and clears the block.
    """

    name: str
    option_field: str
    sources: Mapping[str, SyncSource]

    @property
    def options(self) -> tuple[str, ...]:
        return (*self.sources, SyncOption.DIFFERENT)

    @property
    def target_fields(self) -> tuple[str, ...]:
        names = {}
        for source in self.sources.values():
            names.update(dict.fromkeys(source.target_fields))
        return tuple(names)

    @property
    def target_roles(self) -> tuple[str, ...]:
        roles = {}
        for source in self.sources.values():
            roles.update(dict.fromkeys(str(role) for role, _source in source.file_map))
        return tuple(roles)

    def active_source(self, record: StageRecord) -> SyncSource | None:
        return self.sources.get(getattr(record, self.option_field))


@dataclass(frozen=True)
class StageLink:
    source: str
    target: str
    groups: dict[str, SyncGroup]


@dataclass(frozen=True)
class SyncResult:
    stage: str
    group: str
    option: str
    values: dict[str, Any]
    roles: tuple[str, ...]


_MUSIC_FIELDS = (
    "work_title",
    "work_title_kana",
    "work_character_story",
    "copyright_permission",
    "music_title",
    "cd_title",
    "artist",
    "record_number",
    "jasrac_code",
    "music_type",
    "music_usage_method",
)
_SOUND_FIELDS = ("sound_start_timing", "chaser_song_designation", "fade_out_start_time", "fade_out_complete_time")
_LIGHTING_FIELDS = ("dance_start_timing",) + tuple(f"{scene}_{part}" for scene in SCENES for part in SCENE_PARTS)
_CHOREOGRAPHER_FIELDS = (
    "choreographer_name",
    "choreographer_furigana",
    "choreographer2_name",
    "choreographer2_furigana",
    "props_usage",
    "props_details",
)

# Preliminary music answers, as named on the later stages.
_PRELIMINARY_MUSIC = SyncSource(
    stage=Stage.PRELIMINARY,
    field_map=(
        ("work_title", "work_title"),
        ("work_title_kana", "work_title_kana"),
        ("work_character_story", "work_story"),
        ("copyright_permission", "music_rights_cleared"),
        ("music_title", "music_title"),
        ("cd_title", "cd_title"),
        ("artist", "artist"),
        ("record_number", "record_number"),
        ("jasrac_code", "jasrac_code"),
        ("music_type", "music_type"),
    ),
    converters={"copyright_permission": permission_from_rights_cleared},
)


def _stage_roles(target: str, source: str, *suffixes: str) -> tuple[tuple[str, str], ...]:
    return tuple((AttachmentRole(f"{target}_{suffix}"), AttachmentRole(f"{source}_{suffix}")) for suffix in suffixes)


def _from_semifinals(field_names, *role_suffixes) -> SyncSource:
    return SyncSource(
        stage=Stage.SEMIFINALS,
        field_map=_same_names(*field_names),
        file_map=_stage_roles(Stage.FINALS, Stage.SEMIFINALS, *role_suffixes),
    )


LINKS: dict[str, StageLink] = {
    Stage.SEMIFINALS: StageLink(
        source=Stage.PRELIMINARY,
        target=Stage.SEMIFINALS,
        groups={
            "music": SyncGroup(
                name="music",
                option_field="music_option",
                sources={SyncOption.SAME: _PRELIMINARY_MUSIC},
            ),
            "choreographer": SyncGroup(
                name="choreographer",
                option_field="choreographer_option",
                sources={
                    SyncOption.SAME: SyncSource(
                        stage=Stage.PRELIMINARY,
                        field_map=(
                            ("choreographer_name", "choreographer1_name"),
                            ("choreographer_furigana", "choreographer1_furigana"),
                            ("choreographer2_name", "choreographer2_name"),
                            ("choreographer2_furigana", "choreographer2_furigana"),
                        ),
                    ),
                },
            ),
        },
    ),
    Stage.FINALS: StageLink(
        source=Stage.SEMIFINALS,
        target=Stage.FINALS,
        groups={
            "music": SyncGroup(
                name="music",
                option_field="music_option",
                sources={
                    SyncOption.SAME: _from_semifinals(_MUSIC_FIELDS, "music"),
                    SyncOption.PRELIMINARY: _PRELIMINARY_MUSIC,
                },
            ),
            "sound": SyncGroup(
                name="sound",
                option_field="sound_option",
                sources={SyncOption.SAME: _from_semifinals(_SOUND_FIELDS, "chaser_song")},
            ),
            "lighting": SyncGroup(
                name="lighting",
                option_field="lighting_option",
                sources={
                    SyncOption.SAME: _from_semifinals(_LIGHTING_FIELDS, *(f"{scene}_image" for scene in SCENES)),
                },
            ),
            "choreographer": SyncGroup(
                name="choreographer",
                option_field="choreographer_option",
                sources={SyncOption.SAME: _from_semifinals(_CHOREOGRAPHER_FIELDS)},
            ),
        },
    ),
}


def link_for(stage: str) -> StageLink:
    try:
        return LINKS[Stage(stage)]
    except KeyError:
        raise ValueError(f"Stage {stage!r} does not copy from an earlier stage.") from None


def _blank(record: StageRecord, field_name: str) -> Any:
    return record._meta.get_field(field_name).get_default()


def _apply(
    target: StageRecord,
    link: StageLink,
    sync_group: SyncGroup,
    option: str,
    source: StageRecord | None,
) -> SyncResult:
    # Fields and files the chosen source does not provide are cleared only
    # when the option changes.
    switching = option == SyncOption.DIFFERENT or getattr(target, sync_group.option_field) != option
    mirror = sync_group.sources.get(option)
    entry = target.entry
    if mirror is not None and source is None:
        source = entry.stage_record(mirror.stage)
    field_map = dict(mirror.field_map) if mirror is not None else {}
    file_map = {str(target_role): source_role for target_role, source_role in mirror.file_map} if mirror else {}

    setattr(target, sync_group.option_field, option)
    values = {}
    for target_field in sync_group.target_fields:
        if target_field in field_map:
            value = None
            if source is not None:
                value = mirror.value_for(source, target_field, field_map[target_field])
        elif switching:
            value = None
        else:
            continue
        if value is None:
            value = _blank(target, target_field)
        setattr(target, target_field, value)
        values[target_field] = value
    target.save()

    for target_role in sync_group.target_roles:
        if target_role in file_map:
            attachments.copy_role(entry, file_map[target_role], target_role)
        elif switching:
            attachments.delete_by_role(entry, target_role)
    completion.refresh_stage_status(entry, link.target)
    return SyncResult(
        stage=link.target,
        group=sync_group.name,
        option=option,
        values=values,
        roles=sync_group.target_roles,
    )


def apply_option(
    target: StageRecord,
    group: str,
    option: str,
    *,
    source: StageRecord | None = None,
) -> SyncResult:
    """Set a group's option on ``target`` and copy or clear the group to match.

    A mirroring option (``same``, or ``preliminary`` for finals music) copies
    the group's fields from ``source`` (the entry's stored record for that
    stage when not given) and points the target's file roles at the source
    files. ``different`` clears the fields and drops the target's files.
    Stages mirroring ``target`` are brought up to date in the same
    transaction. The source record is never written.
    """

    option = SyncOption(option)
    link = link_for(target.stage)
    try:
        sync_group = link.groups[group]
    except KeyError:
        raise ValueError(f"Unknown group {group!r} for {link.target}.") from None
    if option not in sync_group.options:
        raise ValueError(f"The {link.target} {group} group cannot use {option.value!r}.")

    with transaction.atomic():
        result = _apply(target, link, sync_group, option, source)
        sync_from_source(target)

    logger.info("Applied %s=%s on %s for entry %s", group, option, link.target, target.entry_id)
    return result


def sync_from_source(source: StageRecord) -> list[SyncResult]:
    """Re-copy every group mirroring ``source``, then everything mirroring those targets."""

    results = []
    with transaction.atomic():
        for link in LINKS.values():
            target = source.entry.stage_record(link.target)
            if target is None:
                continue
            touched = False
            for sync_group in link.groups.values():
                mirror = sync_group.active_source(target)
                if mirror is None or mirror.stage != source.stage:
                    continue
                option = getattr(target, sync_group.option_field)
                results.append(_apply(target, link, sync_group, option, source))
                touched = True
            if touched:
                results.extend(sync_from_source(target))
    return results


def follow_role(entry: Entry, role: str) -> list[str]:
    """Point every role mirroring ``role`` at its current file.

    Returns the roles that were updated, downstream ones included.
    """

    role = str(role)
    updated = []
    with transaction.atomic():
        for link in LINKS.values():
            target = entry.stage_record(link.target)
            if target is None:
                continue
            for sync_group in link.groups.values():
                mirror = sync_group.active_source(target)
                if mirror is None:
                    continue
                for target_role, source_role in mirror.file_map:
                    if source_role == role:
                        attachments.copy_role(entry, source_role, target_role)
                        updated.append(str(target_role))
                        updated.extend(follow_role(entry, target_role))
    return updated


def locked_fields(record: StageRecord | None) -> set[str]:
    """Fields that currently mirror an earlier stage and are not user-editable."""

    if record is None or record.stage not in LINKS:
        return set()
    locked = set()
    for sync_group in LINKS[record.stage].groups.values():
        locked.add(sync_group.option_field)
        mirror = sync_group.active_source(record)
        if mirror is not None:
            locked.update(mirror.target_fields)
    return locked


def locked_roles(record: StageRecord | None) -> set[str]:
    """File roles that currently share an earlier stage's file."""

    if record is None or record.stage not in LINKS:
        return set()
    locked = set()
    for sync_group in LINKS[record.stage].groups.values():
        mirror = sync_group.active_source(record)
        if mirror is not None:
            locked.update(str(target_role) for target_role, _source in mirror.file_map)
    return locked
