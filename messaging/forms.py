from django import forms


class MessageForm(forms.Form):
    subject = forms.CharField(max_length=255)
    content = forms.CharField()


class BulkMessageForm(MessageForm):
    intern_ids = forms.JSONField()

    def clean_intern_ids(self):
        ids = self.cleaned_data.get("intern_ids")
        if not isinstance(ids, list) or not ids or not all(isinstance(i, int) for i in ids):
            raise forms.ValidationError("intern_ids must be a non-empty list of integers.")
        return ids


class MessageToHRForm(MessageForm):
    hr_user_id = forms.IntegerField()
