"""Admin registrations for the entries application."""
from django.contrib import admin

from . import models


class FileAttachmentInline(admin.TabularInline):
    model = models.FileAttachment
    extra = 0
    fields = ("role", "file_type", "file_name", "file_size", "mime_type", "uploaded_at")
    readonly_fields = ("uploaded_at",)


class SelectionInline(admin.StackedInline):
    model = models.Selection
    extra = 0


@admin.register(models.Entry)
class EntryAdmin(admin.ModelAdmin):
    list_display = (
        "__str__",
        "dance_style",
        "status",
        "basic_info_status",
        "preliminary_info_status",
        "program_info_status",
        "semifinals_info_status",
        "finals_info_status",
        "applications_info_status",
        "sns_info_status",
        "updated_at",
    )
    list_filter = (
        "status",
        "dance_style",
        "basic_info_status",
        "preliminary_info_status",
        "program_info_status",
        "semifinals_info_status",
        "finals_info_status",
    )
    search_fields = ("participant_names", "user__username", "user__email")
    readonly_fields = ("created_at", "updated_at")
    inlines = (FileAttachmentInline, SelectionInline)


class StageRecordAdmin(admin.ModelAdmin):
    list_display = ("entry", "updated_at")
    search_fields = ("entry__participant_names",)
    readonly_fields = ("created_at", "updated_at")


for stage_model in models.STAGE_MODELS.values():
    admin.site.register(stage_model, StageRecordAdmin)


@admin.register(models.FileAttachment)
class FileAttachmentAdmin(admin.ModelAdmin):
    list_display = ("entry", "role", "file_type", "file_name", "file_size", "uploaded_at")
    list_filter = ("role", "file_type")
    search_fields = ("file_name", "file_path", "entry__participant_names")


@admin.register(models.Selection)
class SelectionAdmin(admin.ModelAdmin):
    list_display = ("entry", "status", "score", "reviewer", "updated_at")
    list_filter = ("status",)
    search_fields = ("entry__participant_names", "comments")


@admin.register(models.Setting)
class SettingAdmin(admin.ModelAdmin):
    list_display = ("key", "value", "updated_at")
    search_fields = ("key", "description")
