"""Database models for competition entries and their stage records."""
from __future__ import annotations

from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models


class Stage(models.TextChoices):
    BASIC = "basic", "Basic information"
    PRELIMINARY = "preliminary", "Preliminary"
    PROGRAM = "program", "Program information"
    SEMIFINALS = "semifinals", "Semifinals"
    FINALS = "finals", "Finals"
    APPLICATIONS = "applications", "Applications"
    SNS = "sns", "SNS"


class StageStatus(models.TextChoices):
    NOT_STARTED = "not_started", "Not started"
    UNREGISTERED = "unregistered", "In progress"
    REGISTERED = "registered", "Registered"


class SyncOption(models.TextChoices):
    SAME = "same", "Same as previous stage"
    DIFFERENT = "different", "Different from previous stage"
    PRELIMINARY = "preliminary", "Same as preliminary"


STAGE_STATUS_FIELDS: dict[str, str] = {
    Stage.BASIC: "basic_info_status",
    Stage.PRELIMINARY: "preliminary_info_status",
    Stage.PROGRAM: "program_info_status",
    Stage.SEMIFINALS: "semifinals_info_status",
    Stage.FINALS: "finals_info_status",
    Stage.APPLICATIONS: "applications_info_status",
    Stage.SNS: "sns_info_status",
}


class Entry(models.Model):
    """A participant's competition entry, parent of every stage record."""

    class Status(models.TextChoices):
        PENDING = "pending", "Awaiting selection"
        SUBMITTED = "submitted", "Submitted"
        SELECTED = "selected", "Selected"
        REJECTED = "rejected", "Not selected"

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="entries")
    participant_names = models.TextField(blank=True)
    dance_style = models.CharField(max_length=64, blank=True)
    status = models.CharField(max_length=12, choices=Status.choices, default=Status.PENDING)
    basic_info_status = models.CharField(
        max_length=16, choices=StageStatus.choices, default=StageStatus.NOT_STARTED
    )
    preliminary_info_status = models.CharField(
        max_length=16, choices=StageStatus.choices, default=StageStatus.NOT_STARTED
    )
    program_info_status = models.CharField(
        max_length=16, choices=StageStatus.choices, default=StageStatus.NOT_STARTED
    )
    semifinals_info_status = models.CharField(
        max_length=16, choices=StageStatus.choices, default=StageStatus.NOT_STARTED
    )
    finals_info_status = models.CharField(
        max_length=16, choices=StageStatus.choices, default=StageStatus.NOT_STARTED
    )
    applications_info_status = models.CharField(
        max_length=16, choices=StageStatus.choices, default=StageStatus.NOT_STARTED
    )
    sns_info_status = models.CharField(
        max_length=16, choices=StageStatus.choices, default=StageStatus.NOT_STARTED
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ("-created_at", "pk")
        verbose_name_plural = "entries"

    def __str__(self) -> str:
        names = " / ".join(part for part in self.participant_names.splitlines() if part.strip())
        return names or f"Entry #{self.pk}"

    def stage_status(self, stage: str) -> str:
        return getattr(self, STAGE_STATUS_FIELDS[Stage(stage)])

    def stage_record(self, stage: str) -> "StageRecord | None":
        """Return the stage row for this entry, or None when it was never saved."""

        model = STAGE_MODELS[Stage(stage)]
        return model.objects.filter(entry=self).first()

    def attachment_roles(self) -> set[str]:
        return set(self.attachments.values_list("role", flat=True))


class StageRecord(models.Model):
    """Common columns for the one-row-per-entry stage tables."""

    stage: Stage

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True

    @classmethod
    def data_field_names(cls) -> list[str]:
        """Names of the user-editable columns."""

        skipped = {"id", "entry", "created_at", "updated_at"}
        return [
            field.name
            for field in cls._meta.concrete_fields
            if field.name not in skipped
        ]


class BasicInfo(StageRecord):
    class DanceStyle(models.TextChoices):
        BALLROOM = "ballroom", "Ballroom"
        BALLET_CONTEMPORARY = "ballet_contemporary", "Ballet / contemporary"
        JAZZ = "jazz", "Jazz"
        STREET = "street", "Street dance"

    stage = Stage.BASIC

    entry = models.OneToOneField(Entry, on_delete=models.CASCADE, related_name="basic_info")
    dance_style = models.CharField(max_length=32, choices=DanceStyle.choices, blank=True)
    category_division = models.CharField(max_length=64, blank=True)
    representative_name = models.CharField(max_length=50, blank=True)
    representative_furigana = models.CharField(max_length=50, blank=True)
    representative_romaji = models.CharField(max_length=100, blank=True)
    representative_birthdate = models.DateField(blank=True, null=True)
    representative_email = models.CharField(max_length=254, blank=True)
    partner_name = models.CharField(max_length=50, blank=True)
    partner_furigana = models.CharField(max_length=50, blank=True)
    partner_romaji = models.CharField(max_length=100, blank=True)
    partner_birthdate = models.DateField(blank=True, null=True)
    phone_number = models.CharField(max_length=20, blank=True)
    real_name = models.CharField(max_length=50, blank=True)
    real_name_kana = models.CharField(max_length=50, blank=True)
    partner_real_name = models.CharField(max_length=50, blank=True)
    partner_real_name_kana = models.CharField(max_length=50, blank=True)
    emergency_contact_name_1 = models.CharField(max_length=50, blank=True)
    emergency_contact_phone_1 = models.CharField(max_length=20, blank=True)
    emergency_contact_name_2 = models.CharField(max_length=50, blank=True)
    emergency_contact_phone_2 = models.CharField(max_length=20, blank=True)
    guardian_name = models.CharField(max_length=50, blank=True)
    guardian_phone = models.CharField(max_length=20, blank=True)
    guardian_email = models.CharField(max_length=254, blank=True)
    partner_guardian_name = models.CharField(max_length=50, blank=True)
    partner_guardian_phone = models.CharField(max_length=20, blank=True)
    partner_guardian_email = models.CharField(max_length=254, blank=True)
    choreographer = models.CharField(max_length=50, blank=True)
    choreographer_furigana = models.CharField(max_length=50, blank=True)
    agreement_checked = models.BooleanField(default=False)
    media_consent_checked = models.BooleanField(default=False)
    privacy_policy_checked = models.BooleanField(default=False)

    class Meta:
        verbose_name = "basic information"
        verbose_name_plural = "basic information"

    def __str__(self) -> str:
        return f"Basic information for {self.entry}"


class MusicRightsCleared(models.TextChoices):
    COMMERCIAL = "A", "Commercial recording registered with JASRAC"
    LICENSED = "B", "Cleared with the rights holder"
    ORIGINAL = "C", "Original composition"


class PreliminaryInfo(StageRecord):
    stage = Stage.PRELIMINARY

    entry = models.OneToOneField(Entry, on_delete=models.CASCADE, related_name="preliminary_info")
    work_title = models.CharField(max_length=100, blank=True)
    work_title_kana = models.CharField(max_length=100, blank=True)
    work_story = models.TextField(blank=True)
    music_rights_cleared = models.CharField(max_length=32, choices=MusicRightsCleared.choices, blank=True)
    music_title = models.CharField(max_length=100, blank=True)
    cd_title = models.CharField(max_length=100, blank=True)
    artist = models.CharField(max_length=100, blank=True)
    record_number = models.CharField(max_length=50, blank=True)
    jasrac_code = models.CharField(max_length=50, blank=True)
    music_type = models.CharField(max_length=32, blank=True)
    choreographer1_name = models.CharField(max_length=50, blank=True)
    choreographer1_furigana = models.CharField(max_length=50, blank=True)
    choreographer2_name = models.CharField(max_length=50, blank=True)
    choreographer2_furigana = models.CharField(max_length=50, blank=True)

    class Meta:
        verbose_name = "preliminary information"
        verbose_name_plural = "preliminary information"

    def __str__(self) -> str:
        return f"Preliminary information for {self.entry}"


class ProgramInfo(StageRecord):
    """Text and images printed in the competition programme."""

    class SongCount(models.TextChoices):
        ONE = "one", "One piece (semifinals and finals share the music)"
        TWO = "two", "Two pieces (different music for the finals)"

    stage = Stage.PROGRAM

    entry = models.OneToOneField(Entry, on_delete=models.CASCADE, related_name="program_info")
    song_count = models.CharField(max_length=8, choices=SongCount.choices, blank=True)
    affiliation = models.CharField(max_length=100, blank=True)
    semifinal_story = models.CharField(max_length=100, blank=True)
    semifinal_highlight = models.CharField(max_length=50, blank=True)
    final_affiliation = models.CharField(max_length=100, blank=True)
    final_story = models.CharField(max_length=100, blank=True)
    final_highlight = models.CharField(max_length=50, blank=True)
    notes = models.TextField(blank=True)

    class Meta:
        verbose_name = "program information"
        verbose_name_plural = "program information"

    def __str__(self) -> str:
        return f"Program information for {self.entry}"


class CopyrightPermission(models.TextChoices):
    COMMERCIAL = "commercial", "Commercial recording"
    LICENSED = "licensed", "Licensed by the rights holder"
    ORIGINAL = "original", "Original composition"


class ChaserSongDesignation(models.TextChoices):
    REQUIRED = "required", "Separate chaser song"
    INCLUDED = "included", "Included in the music data"
    NOT_REQUIRED = "not_required", "No chaser song"


class ColorType(models.TextChoices):
    WARM = "warm", "Warm colours"
    COOL = "cool", "Cool colours"
    OTHER = "other", "Other (specify)"


class PropsUsage(models.TextChoices):
    YES = "yes", "Uses props"
    NO = "no", "No props"


class MusicFields(models.Model):
    work_title = models.CharField(max_length=100, blank=True)
    work_title_kana = models.CharField(max_length=100, blank=True)
    work_character_story = models.CharField(max_length=50, blank=True)
    copyright_permission = models.CharField(max_length=16, choices=CopyrightPermission.choices, blank=True)
    music_title = models.CharField(max_length=100, blank=True)
    cd_title = models.CharField(max_length=100, blank=True)
    artist = models.CharField(max_length=100, blank=True)
    record_number = models.CharField(max_length=50, blank=True)
    jasrac_code = models.CharField(max_length=50, blank=True)
    music_type = models.CharField(max_length=32, blank=True)
    music_usage_method = models.CharField(max_length=64, blank=True)

    class Meta:
        abstract = True


class SoundFields(models.Model):
    sound_start_timing = models.CharField(max_length=100, blank=True)
    chaser_song_designation = models.CharField(
        max_length=16, choices=ChaserSongDesignation.choices, blank=True
    )
    fade_out_start_time = models.CharField(max_length=16, blank=True)
    fade_out_complete_time = models.CharField(max_length=16, blank=True)

    class Meta:
        abstract = True


class LightingFields(models.Model):
    dance_start_timing = models.CharField(max_length=100, blank=True)
    scene1_time = models.CharField(max_length=16, blank=True)
    scene1_trigger = models.CharField(max_length=100, blank=True)
    scene1_color_type = models.CharField(max_length=8, choices=ColorType.choices, blank=True)
    scene1_color_other = models.CharField(max_length=100, blank=True)
    scene1_image = models.CharField(max_length=200, blank=True)
    scene1_notes = models.TextField(blank=True)
    scene2_time = models.CharField(max_length=16, blank=True)
    scene2_trigger = models.CharField(max_length=100, blank=True)
    scene2_color_type = models.CharField(max_length=8, choices=ColorType.choices, blank=True)
    scene2_color_other = models.CharField(max_length=100, blank=True)
    scene2_image = models.CharField(max_length=200, blank=True)
    scene2_notes = models.TextField(blank=True)
    scene3_time = models.CharField(max_length=16, blank=True)
    scene3_trigger = models.CharField(max_length=100, blank=True)
    scene3_color_type = models.CharField(max_length=8, choices=ColorType.choices, blank=True)
    scene3_color_other = models.CharField(max_length=100, blank=True)
    scene3_image = models.CharField(max_length=200, blank=True)
    scene3_notes = models.TextField(blank=True)
    scene4_time = models.CharField(max_length=16, blank=True)
    scene4_trigger = models.CharField(max_length=100, blank=True)
    scene4_color_type = models.CharField(max_length=8, choices=ColorType.choices, blank=True)
    scene4_color_other = models.CharField(max_length=100, blank=True)
    scene4_image = models.CharField(max_length=200, blank=True)
    scene4_notes = models.TextField(blank=True)
    scene5_time = models.CharField(max_length=16, blank=True)
    scene5_trigger = models.CharField(max_length=100, blank=True)
    scene5_color_type = models.CharField(max_length=8, choices=ColorType.choices, blank=True)
    scene5_color_other = models.CharField(max_length=100, blank=True)
    scene5_image = models.CharField(max_length=200, blank=True)
    scene5_notes = models.TextField(blank=True)
    chaser_exit_time = models.CharField(max_length=16, blank=True)
    chaser_exit_trigger = models.CharField(max_length=100, blank=True)
    chaser_exit_color_type = models.CharField(max_length=8, choices=ColorType.choices, blank=True)
    chaser_exit_color_other = models.CharField(max_length=100, blank=True)
    chaser_exit_image = models.CharField(max_length=200, blank=True)
    chaser_exit_notes = models.TextField(blank=True)

    class Meta:
        abstract = True


class ChoreographerFields(models.Model):
    choreographer_name = models.CharField(max_length=50, blank=True)
    choreographer_furigana = models.CharField(max_length=50, blank=True)
    choreographer2_name = models.CharField(max_length=50, blank=True)
    choreographer2_furigana = models.CharField(max_length=50, blank=True)
    props_usage = models.CharField(max_length=8, choices=PropsUsage.choices, blank=True)
    props_details = models.TextField(blank=True)

    class Meta:
        abstract = True


class SemifinalsInfo(StageRecord, MusicFields, SoundFields, LightingFields, ChoreographerFields):
    stage = Stage.SEMIFINALS

    entry = models.OneToOneField(Entry, on_delete=models.CASCADE, related_name="semifinals_info")
    music_option = models.CharField(max_length=16, choices=SyncOption.choices, blank=True)
    choreographer_option = models.CharField(max_length=16, choices=SyncOption.choices, blank=True)
    bank_name = models.CharField(max_length=100, blank=True)
    branch_name = models.CharField(max_length=100, blank=True)
    account_type = models.CharField(max_length=16, blank=True)
    account_number = models.CharField(max_length=16, blank=True)
    account_holder = models.CharField(max_length=100, blank=True)

    class Meta:
        verbose_name = "semifinals information"
        verbose_name_plural = "semifinals information"

    def __str__(self) -> str:
        return f"Semifinals information for {self.entry}"


class FinalsInfo(StageRecord, MusicFields, SoundFields, LightingFields, ChoreographerFields):
    stage = Stage.FINALS

    entry = models.OneToOneField(Entry, on_delete=models.CASCADE, related_name="finals_info")
    music_option = models.CharField(max_length=16, choices=SyncOption.choices, blank=True)
    sound_option = models.CharField(max_length=16, choices=SyncOption.choices, blank=True)
    lighting_option = models.CharField(max_length=16, choices=SyncOption.choices, blank=True)
    choreographer_option = models.CharField(max_length=16, choices=SyncOption.choices, blank=True)
    choreographer_attendance = models.CharField(max_length=32, blank=True)
    choreographer_photo_permission = models.CharField(max_length=32, blank=True)

    class Meta:
        verbose_name = "finals information"
        verbose_name_plural = "finals information"

    def __str__(self) -> str:
        return f"Finals information for {self.entry}"


class ApplicationsInfo(StageRecord):
    stage = Stage.APPLICATIONS

    entry = models.OneToOneField(Entry, on_delete=models.CASCADE, related_name="applications_info")
    related_ticket_count = models.PositiveSmallIntegerField(default=0, validators=[MaxValueValidator(5)])
    related1_relationship = models.CharField(max_length=50, blank=True)
    related1_name = models.CharField(max_length=50, blank=True)
    related1_furigana = models.CharField(max_length=50, blank=True)
    related2_relationship = models.CharField(max_length=50, blank=True)
    related2_name = models.CharField(max_length=50, blank=True)
    related2_furigana = models.CharField(max_length=50, blank=True)
    related3_relationship = models.CharField(max_length=50, blank=True)
    related3_name = models.CharField(max_length=50, blank=True)
    related3_furigana = models.CharField(max_length=50, blank=True)
    related4_relationship = models.CharField(max_length=50, blank=True)
    related4_name = models.CharField(max_length=50, blank=True)
    related4_furigana = models.CharField(max_length=50, blank=True)
    related5_relationship = models.CharField(max_length=50, blank=True)
    related5_name = models.CharField(max_length=50, blank=True)
    related5_furigana = models.CharField(max_length=50, blank=True)
    related_ticket_total_amount = models.PositiveIntegerField(blank=True, null=True)
    companion1_name = models.CharField(max_length=50, blank=True)
    companion1_furigana = models.CharField(max_length=50, blank=True)
    companion1_purpose = models.CharField(max_length=100, blank=True)
    companion2_name = models.CharField(max_length=50, blank=True)
    companion2_furigana = models.CharField(max_length=50, blank=True)
    companion2_purpose = models.CharField(max_length=100, blank=True)
    companion3_name = models.CharField(max_length=50, blank=True)
    companion3_furigana = models.CharField(max_length=50, blank=True)
    companion3_purpose = models.CharField(max_length=100, blank=True)
    companion_total_amount = models.PositiveIntegerField(blank=True, null=True)
    makeup_preferred_stylist = models.CharField(max_length=50, blank=True)
    makeup_name = models.CharField(max_length=50, blank=True)
    makeup_email = models.CharField(max_length=254, blank=True)
    makeup_phone = models.CharField(max_length=20, blank=True)
    makeup_notes = models.TextField(blank=True)
    applications_notes = models.TextField(blank=True)

    class Meta:
        verbose_name = "applications information"
        verbose_name_plural = "applications information"

    def __str__(self) -> str:
        return f"Applications for {self.entry}"


class SnsInfo(StageRecord):
    stage = Stage.SNS

    entry = models.OneToOneField(Entry, on_delete=models.CASCADE, related_name="sns_info")
    sns_notes = models.TextField(blank=True)

    class Meta:
        verbose_name = "SNS information"
        verbose_name_plural = "SNS information"

    def __str__(self) -> str:
        return f"SNS information for {self.entry}"


STAGE_MODELS: dict[str, type[StageRecord]] = {
    Stage.BASIC: BasicInfo,
    Stage.PRELIMINARY: PreliminaryInfo,
    Stage.PROGRAM: ProgramInfo,
    Stage.SEMIFINALS: SemifinalsInfo,
    Stage.FINALS: FinalsInfo,
    Stage.APPLICATIONS: ApplicationsInfo,
    Stage.SNS: SnsInfo,
}


class FileType(models.TextChoices):
    MUSIC = "music", "Music"
    AUDIO = "audio", "Audio"
    PHOTO = "photo", "Photo"
    VIDEO = "video", "Video"


class AttachmentRole(models.TextChoices):
    PRELIMINARY_VIDEO = "preliminary_video", "Preliminary video"
    PROGRAM_PLAYER_PHOTO = "program_player_photo", "Program player photo"
    PROGRAM_SEMIFINAL_IMAGE1 = "program_semifinal_image1", "Program semifinals image 1"
    PROGRAM_SEMIFINAL_IMAGE2 = "program_semifinal_image2", "Program semifinals image 2"
    PROGRAM_SEMIFINAL_IMAGE3 = "program_semifinal_image3", "Program semifinals image 3"
    PROGRAM_SEMIFINAL_IMAGE4 = "program_semifinal_image4", "Program semifinals image 4"
    PROGRAM_FINAL_PLAYER_PHOTO = "program_final_player_photo", "Program finals player photo"
    PROGRAM_FINAL_IMAGE1 = "program_final_image1", "Program finals image 1"
    PROGRAM_FINAL_IMAGE2 = "program_final_image2", "Program finals image 2"
    PROGRAM_FINAL_IMAGE3 = "program_final_image3", "Program finals image 3"
    PROGRAM_FINAL_IMAGE4 = "program_final_image4", "Program finals image 4"
    SEMIFINALS_MUSIC = "semifinals_music", "Semifinals music data"
    SEMIFINALS_CHASER_SONG = "semifinals_chaser_song", "Semifinals chaser song"
    SEMIFINALS_SCENE1_IMAGE = "semifinals_scene1_image", "Semifinals scene 1 image"
    SEMIFINALS_SCENE2_IMAGE = "semifinals_scene2_image", "Semifinals scene 2 image"
    SEMIFINALS_SCENE3_IMAGE = "semifinals_scene3_image", "Semifinals scene 3 image"
    SEMIFINALS_SCENE4_IMAGE = "semifinals_scene4_image", "Semifinals scene 4 image"
    SEMIFINALS_SCENE5_IMAGE = "semifinals_scene5_image", "Semifinals scene 5 image"
    SEMIFINALS_CHASER_EXIT_IMAGE = "semifinals_chaser_exit_image", "Semifinals chaser/exit image"
    BANK_SLIP = "bank_slip", "Entry fee bank slip"
    FINALS_MUSIC = "finals_music", "Finals music data"
    FINALS_CHASER_SONG = "finals_chaser_song", "Finals chaser song"
    FINALS_SCENE1_IMAGE = "finals_scene1_image", "Finals scene 1 image"
    FINALS_SCENE2_IMAGE = "finals_scene2_image", "Finals scene 2 image"
    FINALS_SCENE3_IMAGE = "finals_scene3_image", "Finals scene 3 image"
    FINALS_SCENE4_IMAGE = "finals_scene4_image", "Finals scene 4 image"
    FINALS_SCENE5_IMAGE = "finals_scene5_image", "Finals scene 5 image"
    FINALS_CHASER_EXIT_IMAGE = "finals_chaser_exit_image", "Finals chaser/exit image"
    FINALS_CHOREOGRAPHER_PHOTO = "finals_choreographer_photo", "Finals choreographer photo"
    PAYMENT_SLIP = "payment_slip", "Ticket payment slip"
    SNS_PRACTICE_VIDEO = "sns_practice_video", "SNS practice video"
    SNS_INTRODUCTION_HIGHLIGHT = "sns_introduction_highlight", "SNS introduction highlight"


def _role_stage(role: str) -> str:
    prefix = role.split("_", 1)[0]
    if prefix in (Stage.PRELIMINARY, Stage.PROGRAM, Stage.SEMIFINALS, Stage.FINALS, Stage.SNS):
        return Stage(prefix)
    if role == AttachmentRole.BANK_SLIP:
        return Stage.SEMIFINALS
    return Stage.APPLICATIONS


def _role_file_type(role: str) -> str:
    if role.endswith("_video") or role.endswith("_highlight"):
        return FileType.VIDEO
    if role.endswith("_music") or role.endswith("_song"):
        return FileType.MUSIC
    return FileType.PHOTO


ROLE_STAGES: dict[str, str] = {role: _role_stage(role) for role in AttachmentRole.values}
ROLE_FILE_TYPES: dict[str, str] = {role: _role_file_type(role) for role in AttachmentRole.values}


class FileAttachment(models.Model):
    """Metadata for an uploaded file; the bytes live in the storage backend."""

    entry = models.ForeignKey(Entry, on_delete=models.CASCADE, related_name="attachments")
    role = models.CharField(max_length=48, choices=AttachmentRole.choices)
    file_type = models.CharField(max_length=8, choices=FileType.choices)
    file_name = models.CharField(max_length=255)
    file_path = models.CharField(max_length=500)
    file_size = models.PositiveBigIntegerField(blank=True, null=True)
    mime_type = models.CharField(max_length=100, blank=True)
    uploaded_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["entry", "role"], name="unique_attachment_per_role"),
        ]
        ordering = ("entry", "role")

    def __str__(self) -> str:
        return f"{self.get_role_display()} for {self.entry}"

    @property
    def stage(self) -> str:
        return ROLE_STAGES[self.role]


class Selection(models.Model):
    """An administrator's review of an entry."""

    entry = models.OneToOneField(Entry, on_delete=models.CASCADE, related_name="selection")
    reviewer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        blank=True,
        null=True,
        related_name="selections",
    )
    score = models.PositiveSmallIntegerField(
        blank=True,
        null=True,
        validators=[MinValueValidator(1), MaxValueValidator(10)],
    )
    comments = models.TextField(blank=True)
    status = models.CharField(max_length=12, choices=Entry.Status.choices, default=Entry.Status.PENDING)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ("-updated_at",)

    def __str__(self) -> str:
        return f"Selection for {self.entry}"


class Setting(models.Model):
    """Site-wide key/value settings such as stage deadlines."""

    key = models.CharField(max_length=100, unique=True)
    value = models.TextField(blank=True)
    description = models.CharField(max_length=255, blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ("key",)

    def __str__(self) -> str:
        return self.key
