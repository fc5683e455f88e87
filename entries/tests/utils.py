"""Shared builders for the entries test-suite."""

from __future__ import annotations

from datetime import date

from django.contrib.auth import get_user_model
from django.core.files.uploadedfile import SimpleUploadedFile

from entries import models

IN_MEMORY_STORAGES = {
    "default": {"BACKEND": "django.core.files.storage.InMemoryStorage"},
    "staticfiles": {"BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage"},
}


def make_user(username: str = "dancer", **kwargs):
    return get_user_model().objects.create_user(username=username, password="password", **kwargs)


def make_entry(user=None, **kwargs) -> models.Entry:
    return models.Entry.objects.create(user=user or make_user(), **kwargs)


def basic_values(**overrides) -> dict[str, object]:
    """A complete set of basic information for two adult dancers."""

    values: dict[str, object] = {
        "dance_style": models.BasicInfo.DanceStyle.JAZZ,
        "category_division": "Adult",
        "representative_name": "山田 花子",
        "representative_furigana": "ヤマダ ハナコ",
        "representative_birthdate": date(1995, 4, 1),
        "representative_email": "hanako@example.com",
        "phone_number": "090-1234-5678",
        "real_name": "山田 花子",
        "real_name_kana": "ヤマダ ハナコ",
        "partner_name": "佐藤 太郎",
        "partner_furigana": "サトウ タロウ",
        "partner_birthdate": date(1994, 1, 1),
        "partner_real_name": "佐藤 太郎",
        "partner_real_name_kana": "サトウ タロウ",
        "emergency_contact_name_1": "山田 一郎",
        "emergency_contact_phone_1": "03-1234-5678",
        "agreement_checked": True,
        "privacy_policy_checked": True,
    }
    values.update(overrides)
    return values


def basic_form_data(**overrides) -> dict[str, object]:
    """``basic_values`` as a client would submit them."""

    data = basic_values(**overrides)
    return {name: value.isoformat() if isinstance(value, date) else value for name, value in data.items()}


def upload(name: str = "clip.mp4", content: bytes = b"video-bytes", content_type: str = "video/mp4"):
    return SimpleUploadedFile(name, content, content_type=content_type)
