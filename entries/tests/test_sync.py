"""Tests for copying field groups between stages."""

from __future__ import annotations

from django.core.files.storage import default_storage
from django.test import TestCase, override_settings

from entries import attachments, sync
from entries.models import (
    AttachmentRole,
    CopyrightPermission,
    FileAttachment,
    FinalsInfo,
    MusicRightsCleared,
    PreliminaryInfo,
    SemifinalsInfo,
    StageStatus,
    SyncOption,
)

from .utils import IN_MEMORY_STORAGES, make_entry, upload


class PreliminaryToSemifinalsTests(TestCase):
    def setUp(self) -> None:
        self.entry = make_entry()
        self.preliminary = PreliminaryInfo.objects.create(
            entry=self.entry,
            work_title="Spring",
            work_title_kana="ハル",
            work_story="A short story",
            music_title="Spring Song",
            artist="Quartet",
            choreographer1_name="Choreo",
            choreographer1_furigana="コレオ",
        )
        self.semifinals = SemifinalsInfo.objects.create(entry=self.entry, work_title="Old title")

    def test_same_copies_the_music_group(self) -> None:
        result = sync.apply_option(self.semifinals, "music", SyncOption.SAME)

        self.semifinals.refresh_from_db()
        self.assertEqual(self.semifinals.music_option, SyncOption.SAME)
        self.assertEqual(self.semifinals.work_title, "Spring")
        self.assertEqual(self.semifinals.work_character_story, "A short story")
        self.assertEqual(self.semifinals.cd_title, "")
        self.assertEqual(result.values["music_title"], "Spring Song")

    def test_same_twice_gives_identical_values(self) -> None:
        first = sync.apply_option(self.semifinals, "music", SyncOption.SAME)
        second = sync.apply_option(self.semifinals, "music", SyncOption.SAME)

        self.assertEqual(first.values, second.values)
        self.preliminary.refresh_from_db()
        self.assertEqual(self.preliminary.work_title, "Spring")

    def test_switching_to_different_blanks_the_group(self) -> None:
        sync.apply_option(self.semifinals, "choreographer", SyncOption.SAME)
        sync.apply_option(self.semifinals, "choreographer", SyncOption.DIFFERENT)

        self.semifinals.refresh_from_db()
        self.assertEqual(self.semifinals.choreographer_option, SyncOption.DIFFERENT)
        self.assertEqual(self.semifinals.choreographer_name, "")
        self.assertEqual(self.semifinals.choreographer_furigana, "")
        self.assertEqual(self.preliminary.choreographer1_name, "Choreo")

    def test_same_maps_the_rights_answer_to_a_copyright_permission(self) -> None:
        self.preliminary.music_rights_cleared = MusicRightsCleared.COMMERCIAL
        self.preliminary.save()

        sync.apply_option(self.semifinals, "music", SyncOption.SAME)

        self.semifinals.refresh_from_db()
        self.assertEqual(self.semifinals.copyright_permission, CopyrightPermission.COMMERCIAL)
        self.assertIn("copyright_permission", sync.locked_fields(self.semifinals))

        sync.apply_option(self.semifinals, "music", SyncOption.DIFFERENT)

        self.semifinals.refresh_from_db()
        self.assertEqual(self.semifinals.copyright_permission, "")

    def test_permission_from_rights_cleared(self) -> None:
        self.assertEqual(sync.permission_from_rights_cleared("B"), CopyrightPermission.LICENSED)
        self.assertEqual(sync.permission_from_rights_cleared("c"), CopyrightPermission.ORIGINAL)
        self.assertEqual(sync.permission_from_rights_cleared(""), "")
        self.assertEqual(sync.permission_from_rights_cleared(None), "")

    def test_same_without_a_source_record_blanks_the_group(self) -> None:
        self.preliminary.delete()

        sync.apply_option(self.semifinals, "music", SyncOption.SAME)

        self.semifinals.refresh_from_db()
        self.assertEqual(self.semifinals.work_title, "")

    def test_unknown_group_or_stage(self) -> None:
        with self.assertRaises(ValueError):
            sync.apply_option(self.semifinals, "lighting", SyncOption.SAME)
        with self.assertRaises(ValueError):
            sync.apply_option(self.preliminary, "music", SyncOption.SAME)
        with self.assertRaises(ValueError):
            sync.apply_option(self.semifinals, "music", "maybe")
        with self.assertRaises(ValueError):
            sync.apply_option(self.semifinals, "music", SyncOption.PRELIMINARY)

    def test_status_is_recomputed(self) -> None:
        sync.apply_option(self.semifinals, "music", SyncOption.SAME)

        self.entry.refresh_from_db()
        self.assertEqual(self.entry.semifinals_info_status, StageStatus.UNREGISTERED)


@override_settings(STORAGES=IN_MEMORY_STORAGES)
class SemifinalsToFinalsTests(TestCase):
    def setUp(self) -> None:
        self.entry = make_entry()
        self.semifinals = SemifinalsInfo.objects.create(
            entry=self.entry,
            music_title="Spring Song",
            dance_start_timing="Lights up",
            scene1_trigger="First pose",
            scene1_color_type="warm",
        )
        self.finals = FinalsInfo.objects.create(entry=self.entry)
        self.music_path = attachments.upload_and_register(
            self.entry,
            upload("song.mp3", b"music", "audio/mpeg"),
            AttachmentRole.SEMIFINALS_MUSIC,
        )

    def test_same_shares_the_source_file(self) -> None:
        sync.apply_option(self.finals, "music", SyncOption.SAME)

        finals_music = attachments.current(self.entry, AttachmentRole.FINALS_MUSIC)
        self.assertEqual(finals_music.file_path, self.music_path)
        self.assertEqual(finals_music.file_type, "music")

    def test_different_drops_the_target_file_but_keeps_the_shared_blob(self) -> None:
        sync.apply_option(self.finals, "music", SyncOption.SAME)

        with self.captureOnCommitCallbacks(execute=True):
            sync.apply_option(self.finals, "music", SyncOption.DIFFERENT)

        self.assertFalse(FileAttachment.objects.filter(entry=self.entry, role=AttachmentRole.FINALS_MUSIC).exists())
        self.assertTrue(default_storage.exists(self.music_path))
        self.finals.refresh_from_db()
        self.assertEqual(self.finals.music_title, "")

    def test_same_drops_the_target_file_when_source_has_none(self) -> None:
        attachments.upload_and_register(
            self.entry,
            upload("exit.png", b"png", "image/png"),
            AttachmentRole.FINALS_CHASER_EXIT_IMAGE,
        )

        sync.apply_option(self.finals, "lighting", SyncOption.SAME)

        self.assertIsNone(attachments.current(self.entry, AttachmentRole.FINALS_CHASER_EXIT_IMAGE))
        self.finals.refresh_from_db()
        self.assertEqual(self.finals.scene1_trigger, "First pose")

    def test_source_save_resyncs_groups_set_to_same(self) -> None:
        sync.apply_option(self.finals, "lighting", SyncOption.SAME)
        sync.apply_option(self.finals, "music", SyncOption.DIFFERENT)
        self.semifinals.scene1_trigger = "Second pose"
        self.semifinals.music_title = "Summer Song"
        self.semifinals.save()

        results = sync.sync_from_source(self.semifinals)

        self.finals.refresh_from_db()
        self.assertEqual([result.group for result in results], ["lighting"])
        self.assertEqual(self.finals.scene1_trigger, "Second pose")
        self.assertEqual(self.finals.music_title, "")

    def test_locked_fields_follow_the_options(self) -> None:
        sync.apply_option(self.finals, "sound", SyncOption.SAME)

        locked = sync.locked_fields(self.finals)

        self.assertIn("sound_start_timing", locked)
        self.assertIn("sound_option", locked)
        self.assertNotIn("music_title", locked)
        self.assertEqual(sync.locked_fields(PreliminaryInfo(entry=self.entry)), set())

    def test_switching_to_preliminary_drops_the_shared_file(self) -> None:
        sync.apply_option(self.finals, "music", SyncOption.SAME)

        with self.captureOnCommitCallbacks(execute=True):
            sync.apply_option(self.finals, "music", SyncOption.PRELIMINARY)

        self.assertIsNone(attachments.current(self.entry, AttachmentRole.FINALS_MUSIC))
        self.assertTrue(default_storage.exists(self.music_path))
        self.assertEqual(sync.locked_roles(self.finals), set())

    def test_locked_roles_follow_the_options(self) -> None:
        sync.apply_option(self.finals, "sound", SyncOption.SAME)

        self.assertEqual(sync.locked_roles(self.finals), {"finals_chaser_song"})
        self.assertEqual(sync.locked_roles(None), set())


class StageChainTests(TestCase):
    def setUp(self) -> None:
        self.entry = make_entry()
        self.preliminary = PreliminaryInfo.objects.create(
            entry=self.entry,
            work_title="Spring",
            work_story="A short story",
            music_title="First song",
            music_rights_cleared=MusicRightsCleared.ORIGINAL,
        )
        self.semifinals = SemifinalsInfo.objects.create(entry=self.entry)
        self.finals = FinalsInfo.objects.create(entry=self.entry)

    def test_preliminary_changes_reach_finals_through_semifinals(self) -> None:
        sync.apply_option(self.semifinals, "music", SyncOption.SAME)
        sync.apply_option(self.finals, "music", SyncOption.SAME)
        self.preliminary.music_title = "Second song"
        self.preliminary.save()

        results = sync.sync_from_source(self.preliminary)

        self.semifinals.refresh_from_db()
        self.finals.refresh_from_db()
        self.assertEqual(self.semifinals.music_title, "Second song")
        self.assertEqual(self.finals.music_title, "Second song")
        self.assertEqual(
            [(result.stage, result.group) for result in results],
            [("semifinals", "music"), ("finals", "music")],
        )

    def test_changing_a_semifinals_option_updates_finals(self) -> None:
        sync.apply_option(self.finals, "music", SyncOption.SAME)

        sync.apply_option(self.semifinals, "music", SyncOption.SAME)

        self.finals.refresh_from_db()
        self.assertEqual(self.finals.music_title, "First song")
        self.assertEqual(self.finals.copyright_permission, CopyrightPermission.ORIGINAL)

    def test_finals_music_can_come_from_preliminary(self) -> None:
        result = sync.apply_option(self.finals, "music", SyncOption.PRELIMINARY)

        self.finals.refresh_from_db()
        self.assertEqual(self.finals.music_option, SyncOption.PRELIMINARY)
        self.assertEqual(self.finals.work_character_story, "A short story")
        self.assertEqual(self.finals.copyright_permission, CopyrightPermission.ORIGINAL)
        self.assertEqual(result.values["music_title"], "First song")
        locked = sync.locked_fields(self.finals)
        self.assertIn("music_title", locked)
        self.assertNotIn("music_usage_method", locked)

    def test_preliminary_resync_keeps_fields_it_does_not_provide(self) -> None:
        sync.apply_option(self.finals, "music", SyncOption.PRELIMINARY)
        FinalsInfo.objects.filter(pk=self.finals.pk).update(music_usage_method="Shortened cut")
        self.preliminary.music_title = "Second song"
        self.preliminary.save()

        sync.sync_from_source(self.preliminary)

        self.finals.refresh_from_db()
        self.assertEqual(self.finals.music_title, "Second song")
        self.assertEqual(self.finals.music_usage_method, "Shortened cut")
