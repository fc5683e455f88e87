"""Serializers for the entries API."""

from __future__ import annotations

from rest_framework import serializers

from . import attachments, completion
from .models import ROLE_STAGES, Entry, FileAttachment, Selection, SyncOption


class EntrySerializer(serializers.ModelSerializer):
    status_display = serializers.CharField(source="get_status_display", read_only=True)

    class Meta:
        model = Entry
        fields = [
            "id",
            "participant_names",
            "dance_style",
            "status",
            "status_display",
            "basic_info_status",
            "preliminary_info_status",
            "program_info_status",
            "semifinals_info_status",
            "finals_info_status",
            "applications_info_status",
            "sns_info_status",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class CompletionSerializer(serializers.Serializer):
    stage = serializers.CharField()
    status = serializers.CharField()
    is_complete = serializers.BooleanField()
    has_data = serializers.BooleanField()
    missing_fields = serializers.ListField(child=serializers.CharField())
    missing_files = serializers.ListField(child=serializers.CharField())


class FileAttachmentSerializer(serializers.ModelSerializer):
    url = serializers.SerializerMethodField()

    class Meta:
        model = FileAttachment
        fields = ["role", "file_type", "file_name", "file_path", "file_size", "mime_type", "uploaded_at", "url"]
        read_only_fields = fields

    def get_url(self, obj: FileAttachment) -> str:
        return attachments.signed_url(obj)


class SyncOptionSerializer(serializers.Serializer):
    group = serializers.CharField()
    option = serializers.ChoiceField(choices=SyncOption.choices)


class SelectionSerializer(serializers.ModelSerializer):
    score = serializers.IntegerField(min_value=1, max_value=10, required=False, allow_null=True)
    comments = serializers.CharField(allow_blank=True, default="")

    class Meta:
        model = Selection
        fields = ["status", "score", "comments", "reviewer", "updated_at"]
        read_only_fields = ["reviewer", "updated_at"]


class BulkStatusSerializer(serializers.Serializer):
    entry_ids = serializers.ListField(child=serializers.IntegerField(min_value=1), allow_empty=False)
    status = serializers.ChoiceField(choices=Entry.Status.choices)


def stage_payload(stage: str, entry: Entry | None) -> dict:
    """Values, completion and files for one stage of ``entry``."""

    record = entry.stage_record(stage) if entry else None
    roles = entry.attachment_roles() if entry else set()
    result = completion.evaluate(stage, completion.values_for(record), roles)
    files = []
    if entry is not None:
        files = entry.attachments.filter(role__in=[role for role in roles if ROLE_STAGES.get(role) == stage])
    return {
        "stage": stage,
        "values": completion.values_for(record),
        "completion": CompletionSerializer(result).data,
        "files": FileAttachmentSerializer(files, many=True).data,
    }
