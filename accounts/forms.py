from django import forms


class LoginForm(forms.Form):
    email = forms.EmailField()
    password = forms.CharField(strip=False)


class PasswordChangeForm(forms.Form):
    current_password = forms.CharField(strip=False)
    new_password = forms.CharField(strip=False)
    confirm_password = forms.CharField(strip=False)
