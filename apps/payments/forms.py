import re

from django import forms
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

EXPIRY_RE = re.compile(r'^(0[1-9]|1[0-2])/(\d\d)$')


def only_digits(value):
    return re.sub(r'\D', '', value or '')


def format_card_number(value):
    """ Format a card number in groups of four digits, e.g. "4242 4242 4242 4242". Keeps at most 16 digits. """
    digits = only_digits(value)[:16]
    if not digits:
        return value
    return ' '.join(digits[i:i + 4] for i in range(0, len(digits), 4))


def format_expiry(value):
    """ Format an expiry date as MM/YY, e.g. "1228" becomes "12/28". """
    digits = only_digits(value)
    if len(digits) >= 2:
        return digits[:2] + '/' + digits[2:4]
    return digits


class PaymentForm(forms.Form):
    """
    Card details.

    These are only validated, never stored or sent anywhere: actual payment processing is left to the event service.
    """

    card_number = forms.CharField(
        label=_('Card number'), max_length=19,
        widget=forms.TextInput(attrs={'autocomplete': 'cc-number', 'inputmode': 'numeric',
                                      'placeholder': '1234 5678 9012 3456'}),
    )
    card_name = forms.CharField(
        label=_('Name on card'), max_length=100,
        widget=forms.TextInput(attrs={'autocomplete': 'cc-name'}),
    )
    expiry = forms.CharField(
        label=_('Expiry date'), max_length=5,
        widget=forms.TextInput(attrs={'autocomplete': 'cc-exp', 'placeholder': 'MM/YY'}),
    )
    cvc = forms.CharField(
        label=_('CVC'), max_length=4,
        widget=forms.TextInput(attrs={'autocomplete': 'cc-csc', 'inputmode': 'numeric', 'placeholder': '123'}),
    )

    def clean_card_number(self):
        digits = only_digits(self.cleaned_data['card_number'])
        if not 13 <= len(digits) <= 16:
            raise forms.ValidationError(_('Enter a valid card number.'))
        return format_card_number(digits)

    def clean_expiry(self):
        expiry = format_expiry(self.cleaned_data['expiry'])
        match = EXPIRY_RE.match(expiry)
        if not match:
            raise forms.ValidationError(_('Enter the expiry date as MM/YY.'))

        month, year = int(match.group(1)), 2000 + int(match.group(2))
        today = timezone.localdate()
        # Cards expire at the end of the month shown
        if (year, month) < (today.year, today.month):
            raise forms.ValidationError(_('This card has expired.'))
        return expiry

    def clean_cvc(self):
        cvc = self.cleaned_data['cvc'].strip()
        if not re.match(r'^\d{3,4}$', cvc):
            raise forms.ValidationError(_('Enter the 3 or 4 digit security code.'))
        return cvc
