import phonenumbers
from django import forms
from django.core.validators import MaxValueValidator, MinLengthValidator, MinValueValidator
from django.utils.translation import gettext_lazy as _

from .constants import COUNTRIES, COUNTRY_CODES, AccommodationType, CertificateType, FoodPreference, Profession
from .services import PricingService


class RegistrationStepForm(forms.Form):
    """ Base class for the forms of the registration wizard. """

    def get_draft_data(self):
        """ Cleaned data, in a form that can be stored in the session and fed back into the form later. """
        return dict(self.cleaned_data)

    def get_summary(self):
        """ Returns (label, value) pairs of the cleaned data, with human readable values. """
        summary = []
        for name, field in self.fields.items():
            value = self.cleaned_data.get(name)
            if isinstance(field, forms.ChoiceField):
                value = dict(field.choices).get(value, value)
            elif isinstance(field, forms.BooleanField):
                value = _('Yes') if value else _('No')
            elif value in (None, ''):
                value = '-'
            summary.append((field.label, value))
        return summary


class PersonalInfoForm(RegistrationStepForm):
    full_name = forms.CharField(
        label=_('Full name'), max_length=100, validators=[MinLengthValidator(2)],
    )
    email = forms.EmailField(label=_('E-mail address'))
    country_code = forms.ChoiceField(
        label=_('Country code'),
        choices=[(code, '{} ({})'.format(code, country)) for code, country in COUNTRY_CODES],
        initial='+1',
    )
    phone = forms.CharField(
        label=_('Phone number'), max_length=20, validators=[MinLengthValidator(10)],
    )
    country = forms.ChoiceField(
        label=_('Country'),
        choices=[('', '---------')] + [(country, country) for country in COUNTRIES],
    )
    profession = forms.ChoiceField(
        label=_('Profession'), choices=Profession.choices, initial=Profession.DENTIST,
    )
    experience_years = forms.IntegerField(
        label=_('Years of experience'), initial=0,
        validators=[MinValueValidator(0), MaxValueValidator(60)],
    )
    license_number = forms.CharField(label=_('License number'), max_length=50, required=False)

    def clean(self):
        cleaned_data = super().clean()
        country_code = cleaned_data.get('country_code')
        phone = cleaned_data.get('phone')
        if country_code and phone:
            try:
                number = phonenumbers.parse(country_code + phone)
            except phonenumbers.NumberParseException:
                number = None
            if number is None or not phonenumbers.is_possible_number(number):
                self.add_error('phone', _('Enter a valid phone number for the selected country code.'))
        return cleaned_data


class PreferencesForm(RegistrationStepForm):
    accommodation_type = forms.ChoiceField(
        label=_('Accommodation'), choices=AccommodationType.choices, initial=AccommodationType.NONE,
        widget=forms.RadioSelect,
    )
    food_preference = forms.ChoiceField(
        label=_('Food preference'), choices=FoodPreference.choices, initial=FoodPreference.HALAL,
        widget=forms.RadioSelect,
    )
    dietary_restrictions = forms.CharField(
        label=_('Dietary restrictions or allergies'), required=False, widget=forms.Textarea(attrs={'rows': 3}),
    )


class ExtrasForm(RegistrationStepForm):
    certificate_type = forms.ChoiceField(
        label=_('Certificate'), choices=CertificateType.choices, initial=CertificateType.DIGITAL,
        widget=forms.RadioSelect,
    )
    materials_kit = forms.BooleanField(label=_('Workshop materials kit'), required=False)
    networking_dinner = forms.BooleanField(label=_('Networking dinner with the speakers'), required=False)
    promo_code = forms.CharField(label=_('Promo code'), max_length=30, required=False)

    def clean_promo_code(self):
        code = self.cleaned_data['promo_code'].strip()
        if not code:
            return ''
        promo = PricingService.find_promo_code(code)
        if promo is None:
            raise forms.ValidationError(_('This promo code is not valid.'))
        return promo[0]


class ReviewForm(RegistrationStepForm):
    agreed_to_terms = forms.BooleanField(
        label=_('I agree to the terms and conditions and the privacy policy'),
        error_messages={'required': _('You must agree to the terms and conditions.')},
    )
