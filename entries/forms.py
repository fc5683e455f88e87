"""Stage forms.

One ``ModelForm`` per stage. Storage limits (max length, type coercion,
choices) always apply. Requiredness, formats and other content rules only
apply to strict forms; draft saves build the form with ``strict=False``.
"""
from __future__ import annotations

from django import forms
from django.core.validators import RegexValidator, validate_email

from . import completion, models, sync

KATAKANA = RegexValidator(
    r"^[\u30a0-\u30ff\u3000 ]+$",
    message="Enter this in full-width katakana.",
    code="katakana",
)
PHONE = RegexValidator(
    r"^0\d{1,4}-?\d{1,4}-?\d{3,4}$",
    message="Enter a phone number using digits and hyphens.",
    code="phone",
)
NUMERIC = RegexValidator(r"^\d+$", message="Enter digits only.", code="numeric")

REQUIRED_MESSAGE = "This field is required."


class StageForm(forms.ModelForm):
    """Base form for stage records.

    Subclasses list per-field format validators in ``pattern_rules`` and the
    fields that must hold a valid email address in ``email_fields``.
    """

    pattern_rules: dict[str, tuple[RegexValidator, ...]] = {}
    email_fields: tuple[str, ...] = ()

    def __init__(self, *args, strict: bool = True, attachments=(), event_date=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.strict = strict
        self.attachment_roles = set(attachments)
        self.event_date = event_date
        for name in sync.locked_fields(self.instance) & set(self.fields):
            del self.fields[name]
        for field in self.fields.values():
            field.required = False
        if strict:
            for name, validators in self.pattern_rules.items():
                if name in self.fields:
                    self.fields[name].validators.extend(validators)

    def clean(self):
        cleaned_data = super().clean()
        if self.strict:
            for name in self.email_fields:
                value = cleaned_data.get(name)
                if value and name not in self.errors:
                    try:
                        validate_email(value)
                    except forms.ValidationError as exc:
                        self.add_error(name, exc)
            self._check_completeness(cleaned_data)
        return cleaned_data

    def _check_completeness(self, cleaned_data) -> None:
        values = completion.values_for(self.instance)
        values.update(cleaned_data)
        result = completion.evaluate(
            self._meta.model.stage,
            values,
            self.attachment_roles,
            event_date=self.event_date,
        )
        for name in result.missing_fields:
            if name in self.errors:
                continue
            if name in self.fields:
                self.add_error(name, REQUIRED_MESSAGE)
            else:
                self.add_error(None, f"{name} is required.")
        for role in result.missing_files:
            label = models.AttachmentRole(role).label
            self.add_error(None, f"Upload the {label.lower()}.")


class BasicInfoForm(StageForm):
    pattern_rules = {
        "representative_furigana": (KATAKANA,),
        "partner_furigana": (KATAKANA,),
        "real_name_kana": (KATAKANA,),
        "partner_real_name_kana": (KATAKANA,),
        "choreographer_furigana": (KATAKANA,),
        "phone_number": (PHONE,),
        "emergency_contact_phone_1": (PHONE,),
        "emergency_contact_phone_2": (PHONE,),
        "guardian_phone": (PHONE,),
        "partner_guardian_phone": (PHONE,),
    }
    email_fields = ("representative_email", "guardian_email", "partner_guardian_email")

    class Meta:
        model = models.BasicInfo
        exclude = ("entry",)


class PreliminaryInfoForm(StageForm):
    pattern_rules = {
        "choreographer1_furigana": (KATAKANA,),
        "choreographer2_furigana": (KATAKANA,),
    }

    class Meta:
        model = models.PreliminaryInfo
        exclude = ("entry",)


class ProgramInfoForm(StageForm):
    class Meta:
        model = models.ProgramInfo
        exclude = ("entry",)


class SemifinalsInfoForm(StageForm):
    pattern_rules = {
        "choreographer_furigana": (KATAKANA,),
        "choreographer2_furigana": (KATAKANA,),
        "account_number": (NUMERIC,),
    }

    class Meta:
        model = models.SemifinalsInfo
        exclude = ("entry", "music_option", "choreographer_option")


class FinalsInfoForm(StageForm):
    pattern_rules = {
        "choreographer_furigana": (KATAKANA,),
        "choreographer2_furigana": (KATAKANA,),
    }

    class Meta:
        model = models.FinalsInfo
        exclude = ("entry", "music_option", "sound_option", "lighting_option", "choreographer_option")


class ApplicationsInfoForm(StageForm):
    pattern_rules = {
        **{f"related{number}_furigana": (KATAKANA,) for number in range(1, 6)},
        **{f"companion{number}_furigana": (KATAKANA,) for number in range(1, 4)},
        "makeup_phone": (PHONE,),
    }
    email_fields = ("makeup_email",)

    class Meta:
        model = models.ApplicationsInfo
        exclude = ("entry",)

    def clean_related_ticket_count(self):
        return self.cleaned_data.get("related_ticket_count") or 0


class SnsInfoForm(StageForm):
    class Meta:
        model = models.SnsInfo
        exclude = ("entry",)


STAGE_FORMS: dict[str, type[StageForm]] = {
    models.Stage.BASIC: BasicInfoForm,
    models.Stage.PRELIMINARY: PreliminaryInfoForm,
    models.Stage.PROGRAM: ProgramInfoForm,
    models.Stage.SEMIFINALS: SemifinalsInfoForm,
    models.Stage.FINALS: FinalsInfoForm,
    models.Stage.APPLICATIONS: ApplicationsInfoForm,
    models.Stage.SNS: SnsInfoForm,
}
