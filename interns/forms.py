from django import forms

from .models import Intern
from .records import InternRecord, phone_validator


class InternForm(forms.ModelForm):
    phone = forms.CharField(max_length=20, required=False, validators=[phone_validator])

    class Meta:
        model = Intern
        fields = [
            "first_name",
            "last_name",
            "email",
            "phone",
            "university",
            "major",
            "start_date",
            "end_date",
            "supervisor",
            "department",
        ]

    def clean_email(self):
        return (self.cleaned_data.get("email") or "").strip().lower()

    def clean(self):
        cleaned = super().clean()
        start = cleaned.get("start_date")
        end = cleaned.get("end_date")

        if start and end and end < start:
            raise forms.ValidationError("End date must not be before start date.")

        return cleaned

    def validate_unique(self):
        # uniqueness is checked by the service so it can report DuplicateInternError
        pass

    def to_record(self):
        return InternRecord(**{name: self.cleaned_data.get(name) or "" for name in self.Meta.fields})


class StatusForm(forms.Form):
    status = forms.ChoiceField(choices=Intern.STATUS)


class BatchUploadForm(forms.Form):
    file = forms.FileField()

    def clean_file(self):
        f = self.cleaned_data["file"]
        if not f.name.lower().endswith((".xlsx", ".csv")):
            raise forms.ValidationError("Upload an .xlsx or .csv file.")
        return f
