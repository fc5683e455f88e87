"""Tests for the stage form controller, deadlines and review helpers."""

from __future__ import annotations

from datetime import datetime, timedelta
from unittest import mock

from django.core.exceptions import ValidationError
from django.core.files.storage import default_storage
from django.db import DatabaseError
from django.test import TestCase, override_settings
from django.utils import timezone

from entries import attachments, services, sync
from entries.models import (
    AttachmentRole,
    BasicInfo,
    Entry,
    FileAttachment,
    FinalsInfo,
    PreliminaryInfo,
    Selection,
    SemifinalsInfo,
    Setting,
    Stage,
    StageStatus,
    SyncOption,
)

from .utils import IN_MEMORY_STORAGES, basic_form_data, make_entry, make_user, upload


class StageFormControllerTests(TestCase):
    def setUp(self) -> None:
        self.user = make_user()

    def test_first_basic_save_creates_the_entry(self) -> None:
        controller = services.StageFormController(Stage.BASIC, user=self.user)

        self.assertTrue(controller.save(basic_form_data()))

        entry = Entry.objects.get(user=self.user)
        self.assertEqual(controller.entry, entry)
        self.assertEqual(entry.participant_names, "山田 花子\n佐藤 太郎")
        self.assertEqual(entry.dance_style, "jazz")
        self.assertEqual(entry.basic_info_status, StageStatus.REGISTERED)
        self.assertEqual(controller.message, "Saved.")

    def test_second_save_updates_the_same_row(self) -> None:
        services.StageFormController(Stage.BASIC, user=self.user).save(basic_form_data())

        controller = services.StageFormController(Stage.BASIC, user=self.user)
        self.assertTrue(controller.save(basic_form_data(partner_name="")))

        self.assertEqual(BasicInfo.objects.count(), 1)
        entry = Entry.objects.get(user=self.user)
        self.assertEqual(entry.participant_names, "山田 花子\nNot entered")
        self.assertEqual(entry.basic_info_status, StageStatus.UNREGISTERED)

    def test_minor_without_guardian_saves_but_stays_unregistered(self) -> None:
        controller = services.StageFormController(Stage.BASIC, user=self.user)

        saved = controller.save(basic_form_data(representative_birthdate="2008-06-01"))

        self.assertTrue(saved)
        self.assertIn("guardian_name", controller.completion.missing_fields)
        entry = Entry.objects.get(user=self.user)
        self.assertEqual(entry.basic_info_status, StageStatus.UNREGISTERED)
        self.assertEqual(BasicInfo.objects.get(entry=entry).representative_birthdate.isoformat(), "2008-06-01")

    def test_validation_blocks_the_save_when_requested(self) -> None:
        controller = services.StageFormController(Stage.BASIC, user=self.user, validate_before_save=True)

        saved = controller.save(basic_form_data(representative_birthdate="2008-06-01"))

        self.assertFalse(saved)
        self.assertEqual(controller.errors["guardian_name"], ["This field is required."])
        self.assertEqual(controller.message, services.StageFormController.invalid_message)
        self.assertFalse(Entry.objects.exists())

    def test_temporary_save_skips_validation(self) -> None:
        controller = services.StageFormController(Stage.BASIC, user=self.user, validate_before_save=True)

        saved = controller.save({"representative_furigana": "yamada"}, is_temporary=True)

        self.assertTrue(saved)
        self.assertEqual(controller.message, "Draft saved.")
        self.assertEqual(controller.completion.status, StageStatus.UNREGISTERED)

    def test_later_stage_needs_an_entry(self) -> None:
        controller = services.StageFormController(Stage.PRELIMINARY, user=self.user)

        self.assertFalse(controller.save({"work_title": "Spring"}))
        self.assertEqual(controller.message, services.StageFormController.missing_entry_message)

    def test_database_failure_is_reported_and_rolled_back(self) -> None:
        controller = services.StageFormController(Stage.BASIC, user=self.user)

        with mock.patch.object(services.sync, "sync_from_source", side_effect=DatabaseError("boom")):
            with self.assertLogs("entries.services", level="ERROR"):
                saved = controller.save(basic_form_data())

        self.assertFalse(saved)
        self.assertEqual(controller.message, services.StageFormController.failure_message)
        self.assertFalse(Entry.objects.exists())
        self.assertFalse(BasicInfo.objects.exists())

    def test_semifinals_save_resyncs_finals(self) -> None:
        entry = make_entry(user=self.user)
        SemifinalsInfo.objects.create(entry=entry, scene1_trigger="First pose")
        FinalsInfo.objects.create(
            entry=entry,
            lighting_option=SyncOption.SAME,
            scene1_trigger="First pose",
        )

        controller = services.StageFormController(Stage.SEMIFINALS, user=self.user)
        self.assertTrue(controller.save({"scene1_trigger": "Second pose"}))

        self.assertEqual(FinalsInfo.objects.get(entry=entry).scene1_trigger, "Second pose")

    def test_preliminary_save_reaches_finals_through_semifinals(self) -> None:
        entry = make_entry(user=self.user)
        PreliminaryInfo.objects.create(entry=entry, music_title="First song")
        semifinals = SemifinalsInfo.objects.create(entry=entry)
        finals = FinalsInfo.objects.create(entry=entry)
        sync.apply_option(semifinals, "music", SyncOption.SAME)
        sync.apply_option(finals, "music", SyncOption.SAME)

        controller = services.StageFormController(Stage.PRELIMINARY, user=self.user)
        self.assertTrue(controller.save({"music_title": "Second song"}))

        self.assertEqual(SemifinalsInfo.objects.get(entry=entry).music_title, "Second song")
        self.assertEqual(FinalsInfo.objects.get(entry=entry).music_title, "Second song")


class DeadlineTests(TestCase):
    def setUp(self) -> None:
        self.now = timezone.make_aware(datetime(2025, 9, 1, 12, 0))
        self.entry = make_entry()

    def test_no_deadline_means_open(self) -> None:
        self.assertIsNone(services.stage_deadline(Stage.PRELIMINARY))
        self.assertTrue(services.is_stage_open(Stage.PRELIMINARY, self.now))

    def test_deadline_closes_the_stage(self) -> None:
        Setting.objects.create(key="preliminary_deadline", value="2025-08-31T23:59:59")

        self.assertEqual(services.stage_deadline(Stage.PRELIMINARY).day, 31)
        self.assertFalse(services.is_stage_open(Stage.PRELIMINARY, self.now))
        self.assertTrue(services.is_stage_open(Stage.PRELIMINARY, self.now - timedelta(days=2)))

    def test_malformed_deadline_is_ignored(self) -> None:
        Setting.objects.create(key="finals_deadline", value="soon")

        with self.assertLogs("entries.services", level="WARNING"):
            self.assertTrue(services.is_stage_open(Stage.FINALS, self.now))

    def test_late_save_is_refused_but_drafts_are_kept(self) -> None:
        Setting.objects.create(key="preliminary_deadline", value="2025-08-31T23:59:59+09:00")
        controller = services.StageFormController(Stage.PRELIMINARY, user=self.entry.user, now=self.now)

        with self.assertRaises(services.StageLocked):
            controller.save({"work_title": "Spring"})
        self.assertFalse(PreliminaryInfo.objects.exists())

        self.assertTrue(controller.save({"work_title": "Spring"}, is_temporary=True))


@override_settings(STORAGES=IN_MEMORY_STORAGES)
class AttachmentServiceTests(TestCase):
    def setUp(self) -> None:
        self.entry = make_entry()
        SemifinalsInfo.objects.create(entry=self.entry)
        self.finals = FinalsInfo.objects.create(entry=self.entry)
        self.first_path = services.store_attachment(
            self.entry, upload("first.mp3", b"first", "audio/mpeg"), AttachmentRole.SEMIFINALS_MUSIC
        )
        sync.apply_option(self.finals, "music", SyncOption.SAME)

    def test_replacing_a_source_file_moves_the_shared_role(self) -> None:
        with self.captureOnCommitCallbacks(execute=True):
            second_path = services.store_attachment(
                self.entry, upload("second.mp3", b"second", "audio/mpeg"), AttachmentRole.SEMIFINALS_MUSIC
            )

        self.assertEqual(attachments.current(self.entry, AttachmentRole.FINALS_MUSIC).file_path, second_path)
        self.assertFalse(default_storage.exists(self.first_path))
        self.assertTrue(default_storage.exists(second_path))

    def test_removing_a_source_file_clears_the_shared_role(self) -> None:
        with self.captureOnCommitCallbacks(execute=True):
            deleted = services.remove_attachment(self.entry, AttachmentRole.SEMIFINALS_MUSIC)

        self.assertEqual(deleted, 1)
        self.assertFalse(FileAttachment.objects.filter(entry=self.entry).exists())
        self.assertFalse(default_storage.exists(self.first_path))

    def test_shared_role_cannot_be_changed_directly(self) -> None:
        with self.assertRaises(ValidationError) as caught:
            services.store_attachment(
                self.entry, upload("own.mp3", b"own", "audio/mpeg"), AttachmentRole.FINALS_MUSIC
            )
        self.assertEqual(caught.exception.code, "mirrored_role")
        with self.assertRaises(ValidationError):
            services.remove_attachment(self.entry, AttachmentRole.FINALS_MUSIC)

        self.assertEqual(attachments.current(self.entry, AttachmentRole.FINALS_MUSIC).file_path, self.first_path)

    def test_roles_of_groups_with_their_own_files_stay_editable(self) -> None:
        sync.apply_option(self.finals, "music", SyncOption.DIFFERENT)

        path = services.store_attachment(
            self.entry, upload("own.mp3", b"own", "audio/mpeg"), AttachmentRole.FINALS_MUSIC
        )

        self.assertEqual(attachments.current(self.entry, AttachmentRole.FINALS_MUSIC).file_path, path)
        self.assertEqual(attachments.current(self.entry, AttachmentRole.SEMIFINALS_MUSIC).file_path, self.first_path)


class ReviewTests(TestCase):
    def setUp(self) -> None:
        self.reviewer = make_user("judge", is_staff=True)
        self.entry = make_entry()

    def test_record_selection_upserts_and_mirrors_status(self) -> None:
        services.record_selection(self.entry, self.reviewer, status=Entry.Status.SUBMITTED, score=6)
        selection = services.record_selection(
            self.entry,
            self.reviewer,
            status=Entry.Status.SELECTED,
            score=9,
            comments="Strong musicality",
        )

        self.assertEqual(Selection.objects.count(), 1)
        self.assertEqual(selection.score, 9)
        self.entry.refresh_from_db()
        self.assertEqual(self.entry.status, Entry.Status.SELECTED)
        self.assertEqual(self.entry.get_status_display(), "Selected")

    def test_record_selection_validates_arguments(self) -> None:
        with self.assertRaises(ValueError):
            services.record_selection(self.entry, self.reviewer, status="maybe")
        with self.assertRaises(ValueError):
            services.record_selection(self.entry, self.reviewer, status=Entry.Status.SELECTED, score=11)

    def test_bulk_update_status(self) -> None:
        other = make_entry(user=make_user("second"))

        updated = services.bulk_update_status([self.entry.pk, other.pk], Entry.Status.REJECTED)

        self.assertEqual(updated, 2)
        self.assertFalse(Entry.objects.exclude(status=Entry.Status.REJECTED).exists())
        self.assertEqual(services.bulk_update_status([], Entry.Status.REJECTED), 0)

    def test_recompute_statuses_repairs_stale_values(self) -> None:
        Entry.objects.filter(pk=self.entry.pk).update(finals_info_status=StageStatus.REGISTERED)
        PreliminaryInfo.objects.create(entry=self.entry, work_title="Spring")

        changed = services.recompute_statuses()

        self.entry.refresh_from_db()
        self.assertEqual(changed, 2)
        self.assertEqual(self.entry.finals_info_status, StageStatus.NOT_STARTED)
        self.assertEqual(self.entry.preliminary_info_status, StageStatus.UNREGISTERED)
