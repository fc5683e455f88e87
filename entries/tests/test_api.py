"""Tests for the entries REST API."""

from __future__ import annotations

from unittest import mock

from django.db import IntegrityError
from django.test import TestCase, override_settings
from rest_framework.test import APIClient

from entries import attachments
from entries.models import (
    AttachmentRole,
    Entry,
    FileAttachment,
    FinalsInfo,
    PreliminaryInfo,
    SemifinalsInfo,
    Setting,
    StageStatus,
)

from .utils import IN_MEMORY_STORAGES, basic_form_data, make_entry, make_user, upload


class StageApiTests(TestCase):
    def setUp(self) -> None:
        self.user = make_user()
        self.client = APIClient()
        self.client.force_authenticate(user=self.user)

    def test_requires_authentication(self) -> None:
        response = APIClient().get("/api/entries/me/")

        self.assertEqual(response.status_code, 403)

    def test_me_before_any_save(self) -> None:
        response = self.client.get("/api/entries/me/")

        self.assertEqual(response.status_code, 404)

    def test_put_basic_creates_entry(self) -> None:
        response = self.client.put("/api/entries/stages/basic/", basic_form_data(), format="json")

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["completion"]["status"], StageStatus.REGISTERED)
        self.assertEqual(body["values"]["representative_birthdate"], "1995-04-01")
        self.assertEqual(body["message"], "Saved.")

        me = self.client.get("/api/entries/me/").json()
        self.assertEqual(me["basic_info_status"], "registered")
        self.assertEqual(me["status_display"], "Awaiting selection")

    def test_validated_put_reports_errors(self) -> None:
        response = self.client.put(
            "/api/entries/stages/basic/?validate=1",
            basic_form_data(phone_number="phone"),
            format="json",
        )

        self.assertEqual(response.status_code, 400)
        self.assertIn("phone_number", response.json()["errors"])
        self.assertFalse(Entry.objects.exists())

    def test_get_stage_without_entry(self) -> None:
        response = self.client.get("/api/entries/stages/sns/")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["completion"]["status"], "not_started")
        self.assertEqual(response.json()["values"], {})

    def test_unknown_stage(self) -> None:
        self.assertEqual(self.client.get("/api/entries/stages/warmup/").status_code, 404)

    def test_deadline_returns_locked(self) -> None:
        make_entry(user=self.user)
        Setting.objects.create(key="preliminary_deadline", value="2000-01-01T00:00:00")

        response = self.client.put("/api/entries/stages/preliminary/", {"work_title": "Spring"}, format="json")
        draft = self.client.put(
            "/api/entries/stages/preliminary/?temporary=1",
            {"work_title": "Spring"},
            format="json",
        )

        self.assertEqual(response.status_code, 423)
        self.assertEqual(draft.status_code, 200)
        self.assertEqual(draft.json()["message"], "Draft saved.")

    def test_option_endpoint_copies_from_semifinals(self) -> None:
        entry = make_entry(user=self.user)
        SemifinalsInfo.objects.create(entry=entry, dance_start_timing="Lights up")

        response = self.client.post(
            "/api/entries/stages/finals/options/",
            {"group": "lighting", "option": "same"},
            format="json",
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["values"]["dance_start_timing"], "Lights up")
        self.assertEqual(FinalsInfo.objects.get(entry=entry).lighting_option, "same")

    def test_option_endpoint_takes_finals_music_from_preliminary(self) -> None:
        entry = make_entry(user=self.user)
        PreliminaryInfo.objects.create(entry=entry, work_story="A short story", music_rights_cleared="A")

        response = self.client.post(
            "/api/entries/stages/finals/options/",
            {"group": "music", "option": "preliminary"},
            format="json",
        )

        self.assertEqual(response.status_code, 200)
        values = response.json()["values"]
        self.assertEqual(values["music_option"], "preliminary")
        self.assertEqual(values["work_character_story"], "A short story")
        self.assertEqual(values["copyright_permission"], "commercial")

    def test_program_stage(self) -> None:
        make_entry(user=self.user)

        response = self.client.put(
            "/api/entries/stages/program/",
            {"song_count": "two", "semifinal_story": "A winter tale", "semifinal_highlight": "The final lift"},
            format="json",
        )

        self.assertEqual(response.status_code, 200)
        self.assertIn("final_story", response.json()["completion"]["missing_fields"])
        self.assertIn("program_player_photo", response.json()["completion"]["missing_files"])
        self.assertEqual(self.client.get("/api/entries/me/").json()["program_info_status"], "unregistered")

    def test_option_endpoint_rejects_unknown_group(self) -> None:
        make_entry(user=self.user)

        response = self.client.post(
            "/api/entries/stages/preliminary/options/",
            {"group": "music", "option": "same"},
            format="json",
        )

        self.assertEqual(response.status_code, 400)


@override_settings(STORAGES=IN_MEMORY_STORAGES)
class AttachmentApiTests(TestCase):
    def setUp(self) -> None:
        self.user = make_user()
        self.entry = make_entry(user=self.user)
        self.client = APIClient()
        self.client.force_authenticate(user=self.user)

    def test_upload_and_delete(self) -> None:
        response = self.client.post(
            "/api/entries/files/sns_practice_video/",
            {"file": upload()},
            format="multipart",
        )

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()["entry"]["sns_info_status"], "unregistered")
        self.assertTrue(FileAttachment.objects.filter(entry=self.entry, role=AttachmentRole.SNS_PRACTICE_VIDEO).exists())

        deleted = self.client.delete("/api/entries/files/sns_practice_video/")

        self.assertEqual(deleted.status_code, 204)
        self.assertFalse(FileAttachment.objects.filter(entry=self.entry).exists())

    def test_upload_rejects_wrong_type(self) -> None:
        response = self.client.post(
            "/api/entries/files/bank_slip/",
            {"file": upload("slip.gif", b"gif", "image/gif")},
            format="multipart",
        )

        self.assertEqual(response.status_code, 400)

    def test_upload_requires_a_file(self) -> None:
        response = self.client.post("/api/entries/files/bank_slip/", {}, format="multipart")

        self.assertEqual(response.status_code, 400)

    def test_role_shared_with_semifinals_is_refused(self) -> None:
        FinalsInfo.objects.create(entry=self.entry, music_option="same")

        response = self.client.post(
            "/api/entries/files/finals_music/",
            {"file": upload("own.mp3", b"own", "audio/mpeg")},
            format="multipart",
        )
        deleted = self.client.delete("/api/entries/files/finals_music/")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(deleted.status_code, 400)
        self.assertFalse(FileAttachment.objects.filter(entry=self.entry).exists())

    def test_conflicting_upload_returns_conflict(self) -> None:
        with mock.patch.object(attachments, "_replace", side_effect=IntegrityError("duplicate role")):
            with self.assertLogs("entries.attachments", level="ERROR"):
                response = self.client.post(
                    "/api/entries/files/sns_practice_video/",
                    {"file": upload()},
                    format="multipart",
                )

        self.assertEqual(response.status_code, 409)
        self.assertFalse(FileAttachment.objects.filter(entry=self.entry).exists())

    def test_unknown_role(self) -> None:
        self.assertEqual(self.client.delete("/api/entries/files/poster/").status_code, 404)


class AdminApiTests(TestCase):
    def setUp(self) -> None:
        self.entry = make_entry()
        self.admin = make_user("judge", is_staff=True)
        self.client = APIClient()

    def test_participants_cannot_review(self) -> None:
        self.client.force_authenticate(user=self.entry.user)

        response = self.client.put(
            f"/api/entries/admin/{self.entry.pk}/selection/",
            {"status": "selected"},
            format="json",
        )

        self.assertEqual(response.status_code, 403)

    def test_selection(self) -> None:
        self.client.force_authenticate(user=self.admin)

        response = self.client.put(
            f"/api/entries/admin/{self.entry.pk}/selection/",
            {"status": "selected", "score": 8, "comments": "Clean lines"},
            format="json",
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["score"], 8)
        self.entry.refresh_from_db()
        self.assertEqual(self.entry.status, Entry.Status.SELECTED)

    def test_selection_score_out_of_range(self) -> None:
        self.client.force_authenticate(user=self.admin)

        response = self.client.put(
            f"/api/entries/admin/{self.entry.pk}/selection/",
            {"status": "selected", "score": 12},
            format="json",
        )

        self.assertEqual(response.status_code, 400)

    def test_bulk_status(self) -> None:
        self.client.force_authenticate(user=self.admin)

        response = self.client.put(
            "/api/entries/admin/status/",
            {"entry_ids": [self.entry.pk], "status": "rejected"},
            format="json",
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"updated": 1})
