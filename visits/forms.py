from django import forms
from django.core.validators import FileExtensionValidator


class VisitUploadForm(forms.Form):
    document = forms.FileField(
        validators=[FileExtensionValidator(["pdf"])],
        widget=forms.ClearableFileInput(attrs={'accept': 'application/pdf'}),
    )
    clinic_name = forms.CharField(max_length=200)
    type_of_visit = forms.CharField(max_length=200)


class TranslateForm(forms.Form):
    target_language = forms.CharField(
        max_length=60,
        error_messages={'required': 'Please enter a target language first'},
        widget=forms.TextInput(attrs={'placeholder': 'Enter target language (e.g., Spanish)'}),
    )
