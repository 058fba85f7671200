from django import forms
from django.conf import settings
from django.core.exceptions import ValidationError

from .models import Activity, Document


class ActivityForm(forms.ModelForm):
    class Meta:
        model = Activity
        fields = ["description"]

    def clean_description(self):
        text = (self.cleaned_data.get("description") or "").strip()
        if not text:
            raise ValidationError("Description is required.")
        return text


class DocumentUploadForm(forms.Form):
    file = forms.FileField()
    type = forms.ChoiceField(choices=Document.TYPES, initial=Document.OTHER, required=False)
    comment = forms.CharField(required=False)

    def clean_file(self):
        f = self.cleaned_data.get("file")
        if not f:
            return f

        if f.size > settings.MAX_DOCUMENT_SIZE:
            raise ValidationError("File is too large. Maximum allowed size is 5MB.")

        return f

    def clean_type(self):
        return self.cleaned_data.get("type") or Document.OTHER
