"""
Presentation Forms
Field rendering and the browser-side checks that run before an action is
invoked. Server-side rules live in ``invoices.validation.schemas``.
"""
from django import forms

INPUT_CLASS = 'peer block w-full rounded-md border border-gray-200 py-[9px] pl-10 text-sm outline-2 placeholder:text-gray-500'


class BaseFormMixin:
    def add_error_class(self) -> None:
        fields = getattr(self, 'fields', {})
        errors = getattr(self, 'errors', {})
        for field_name, field in fields.items():
            if field_name in errors:
                field.widget.attrs['class'] = field.widget.attrs.get('class', '') + ' border-red-500'
                field.widget.attrs['aria-invalid'] = 'true'


class SignUpForm(forms.Form, BaseFormMixin):
    name = forms.CharField(
        widget=forms.TextInput(attrs={
            'class': INPUT_CLASS,
            'placeholder': 'Enter your name',
            'autocomplete': 'name',
        })
    )
    email = forms.CharField(
        widget=forms.EmailInput(attrs={
            'class': INPUT_CLASS,
            'placeholder': 'Enter your email address',
            'autocomplete': 'email',
        })
    )
    password = forms.CharField(
        strip=False,
        widget=forms.PasswordInput(attrs={
            'class': INPUT_CLASS,
            'placeholder': 'Enter password',
            'autocomplete': 'new-password',
            'minlength': 6,
        })
    )
    confirmPassword = forms.CharField(
        strip=False,
        label="Confirm Password",
        widget=forms.PasswordInput(attrs={
            'class': INPUT_CLASS,
            'placeholder': 'Confirm your password',
            'autocomplete': 'new-password',
            'minlength': 6,
        })
    )

    def clean(self):
        cleaned_data = super().clean()
        password = cleaned_data.get('password')
        confirm_password = cleaned_data.get('confirmPassword')

        if password != confirm_password:
            self.add_error('confirmPassword', "Passwords do not match")

        return cleaned_data

    def action_fields(self) -> dict:
        """The fields handed to the signup action; the confirmation stays here."""
        return {
            'name': self.cleaned_data.get('name', ''),
            'email': self.cleaned_data.get('email', ''),
            'password': self.cleaned_data.get('password', ''),
        }


class LoginForm(forms.Form, BaseFormMixin):
    email = forms.CharField(
        widget=forms.EmailInput(attrs={
            'class': INPUT_CLASS,
            'placeholder': 'Enter your email address',
            'autocomplete': 'email',
            'autofocus': True,
        })
    )
    password = forms.CharField(
        strip=False,
        widget=forms.PasswordInput(attrs={
            'class': INPUT_CLASS,
            'placeholder': 'Enter password',
            'autocomplete': 'current-password',
            'minlength': 6,
        })
    )
    redirectTo = forms.CharField(required=False, widget=forms.HiddenInput())
