from decimal import Decimal

import pytest

from ..templatetags.coretags import moneyformat, signed_moneyformat


@pytest.mark.parametrize('value, expected', [
    (Decimal('499'), '$499.00'),
    (Decimal('1234.5'), '$1,234.50'),
    ('0.00', '$0.00'),
    (Decimal('-50'), '-$50.00'),
    (None, ''),
])
def test_moneyformat(value, expected):
    assert moneyformat(value) == expected


@pytest.mark.parametrize('value, expected', [
    (Decimal('200'), '+$200.00'),
    (Decimal('-50'), '-$50.00'),
    (Decimal('0'), '$0.00'),
])
def test_signed_moneyformat(value, expected):
    assert signed_moneyformat(value) == expected