from django import forms
from django.core.validators import FileExtensionValidator

from .models import Profile


class SignInForm(forms.Form):
    email = forms.EmailField()
    password = forms.CharField(widget=forms.PasswordInput)

    def __init__(self, *args, **kwargs):
        self.auth_context = kwargs.pop('auth_context', None)
        super().__init__(*args, **kwargs)

    def clean(self):
        cleaned_data = super().clean()
        email = cleaned_data.get('email')
        password = cleaned_data.get('password')

        if email and password and self.auth_context is not None:
            result = self.auth_context.sign_in(email, password)
            if not result.success:
                raise forms.ValidationError(result.error)
            cleaned_data['session'] = result.data
        return cleaned_data


class SignUpForm(forms.Form):
    email = forms.EmailField()
    password = forms.CharField(widget=forms.PasswordInput)

    def __init__(self, *args, **kwargs):
        self.auth_context = kwargs.pop('auth_context', None)
        super().__init__(*args, **kwargs)

    def clean(self):
        cleaned_data = super().clean()
        email = cleaned_data.get('email')
        password = cleaned_data.get('password')

        # password rules are enforced by the sign-up call itself
        if email and password and self.auth_context is not None:
            result = self.auth_context.sign_up(email, password)
            if not result.success:
                raise forms.ValidationError(result.error)
            cleaned_data['session'] = result.data
        return cleaned_data


class ProfileForm(forms.ModelForm):
    avatar = forms.FileField(
        required=False,
        validators=[FileExtensionValidator(["png", "jpg", "jpeg", "gif", "webp"])],
    )

    class Meta:
        model = Profile
        fields = ['name', 'birthday', 'height', 'weight', 'country']
        widgets = {
            'birthday': forms.DateInput(attrs={'type': 'date'}),
            'weight': forms.NumberInput(attrs={'step': '0.1'}),
        }
        labels = {
            'height': 'Height (cm)',
            'weight': 'Weight (kg)',
        }
