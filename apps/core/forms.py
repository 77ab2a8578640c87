from django import forms
from django.core.validators import MinLengthValidator
from django.utils.translation import gettext_lazy as _


class ContactForm(forms.Form):
    name = forms.CharField(label=_('Your name'), max_length=100, validators=[MinLengthValidator(2)])
    email = forms.EmailField(label=_('E-mail address'))
    subject = forms.CharField(label=_('Subject'), max_length=200, validators=[MinLengthValidator(5)])
    message = forms.CharField(
        label=_('Message'), validators=[MinLengthValidator(20)], widget=forms.Textarea(attrs={'rows': 6}),
    )
