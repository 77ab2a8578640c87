from decimal import Decimal

from django.db import models
from django.utils.translation import gettext_lazy as _


class Profession(models.TextChoices):
    DENTIST = 'dentist', _('Dentist')
    STUDENT = 'student', _('Dental Student')
    HYGIENIST = 'hygienist', _('Dental Hygienist')
    OTHER = 'other', _('Other')


class AccommodationType(models.TextChoices):
    SINGLE = 'single', _('Single Room')
    SHARED = 'shared', _('Shared Room')
    NONE = 'none', _('No Accommodation')


class FoodPreference(models.TextChoices):
    HALAL = 'halal', _('Halal')
    VEGETARIAN = 'vegetarian', _('Vegetarian')
    VEGAN = 'vegan', _('Vegan')
    NONE = 'none', _('No Food')


class CertificateType(models.TextChoices):
    HARDCOPY = 'hardcopy', _('Hard Copy Certificate')
    DIGITAL = 'digital', _('Digital Certificate')


class DiscountType(models.TextChoices):
    PERCENTAGE = 'percentage', _('Percentage')
    FIXED = 'fixed', _('Fixed amount')


ACCOMMODATION_PRICES = {
    AccommodationType.SINGLE: Decimal('200.00'),
    AccommodationType.SHARED: Decimal('150.00'),
    AccommodationType.NONE: Decimal('0.00'),
}

# Opting out of meals is a discount
FOOD_PRICES = {
    FoodPreference.HALAL: Decimal('0.00'),
    FoodPreference.VEGETARIAN: Decimal('0.00'),
    FoodPreference.VEGAN: Decimal('0.00'),
    FoodPreference.NONE: Decimal('-50.00'),
}

CERTIFICATE_PRICES = {
    CertificateType.HARDCOPY: Decimal('25.00'),
    CertificateType.DIGITAL: Decimal('0.00'),
}

MATERIALS_KIT_PRICE = Decimal('75.00')
NETWORKING_DINNER_PRICE = Decimal('100.00')

ACCOMMODATION_DESCRIPTIONS = {
    AccommodationType.SINGLE: _('Private single room accommodation'),
    AccommodationType.SHARED: _('Shared room (2 people)'),
    AccommodationType.NONE: _('Arrange your own accommodation'),
}

FOOD_DESCRIPTIONS = {
    FoodPreference.HALAL: _('Halal meals included'),
    FoodPreference.VEGETARIAN: _('Vegetarian meals included'),
    FoodPreference.VEGAN: _('Vegan meals included'),
    FoodPreference.NONE: _('Opt out for $50 discount'),
}

CERTIFICATE_DESCRIPTIONS = {
    CertificateType.HARDCOPY: _('Printed and framed certificate'),
    CertificateType.DIGITAL: _('PDF certificate included'),
}

COUNTRIES = [
    'United States', 'United Kingdom', 'Canada', 'Australia', 'Germany',
    'France', 'India', 'China', 'Japan', 'Brazil', 'Mexico', 'South Korea',
    'Italy', 'Spain', 'Netherlands', 'Sweden', 'Switzerland', 'Singapore',
    'United Arab Emirates', 'Saudi Arabia', 'South Africa', 'New Zealand',
    'Ireland', 'Belgium', 'Austria', 'Norway', 'Denmark', 'Finland', 'Other',
]

COUNTRY_CODES = [
    ('+1', 'US/CA'),
    ('+44', 'UK'),
    ('+91', 'IN'),
    ('+61', 'AU'),
    ('+49', 'DE'),
    ('+33', 'FR'),
    ('+81', 'JP'),
    ('+86', 'CN'),
    ('+971', 'UAE'),
    ('+65', 'SG'),
    ('+55', 'BR'),
    ('+27', 'ZA'),
]
