from decimal import Decimal

from django import template
from django.conf import settings
from django.utils.formats import number_format

register = template.Library()


@register.filter()
def moneyformat(value):
    """ Format an amount with currency sign, e.g. $1,234.50. Negative amounts become -$50.00. """
    if value is None or value == '':
        return ''
    value = Decimal(value)
    formatted = number_format(abs(value), settings.MONETARY_DECIMAL_PLACES, force_grouping=True)
    sign = '-' if value < 0 else ''
    return '{}{}{}'.format(sign, settings.MONETARY_CURRENCY, formatted)


@register.filter()
def signed_moneyformat(value):
    """ Like moneyformat, but with an explicit + for positive amounts, for surcharges in a price breakdown. """
    formatted = moneyformat(value)
    if formatted and Decimal(value) > 0:
        return '+' + formatted
    return formatted
