from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from django.conf import settings

from apps.core.backend import expect_dict
from apps.events.catalog import to_decimal

CENTS = Decimal('0.01')
ZERO = Decimal('0.00')


def to_money(value):
    return to_decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


def amount_in_cents(amount):
    """ Integer amount of cents, as used by the payment service. """
    return int((to_money(amount) * 100).to_integral_value(rounding=ROUND_HALF_UP))


@dataclass
class PricingBreakdown:
    """
    Itemized price of a single registration.

    The components are stored, the subtotal and total are always derived from them, so they can never disagree.
    """

    base: Decimal
    accommodation: Decimal = ZERO
    food: Decimal = ZERO
    certificate: Decimal = ZERO
    materials_kit: Decimal = ZERO
    networking_dinner: Decimal = ZERO
    discount: Decimal = ZERO
    promo_code: str = ''

    # Keys used when exchanging breakdowns with the event service (and storing them in the session)
    API_KEYS = {
        'base': 'basePrice',
        'accommodation': 'accommodation',
        'food': 'food',
        'certificate': 'certificate',
        'materials_kit': 'materialsKit',
        'networking_dinner': 'networkingDinner',
        'discount': 'discount',
    }

    @property
    def subtotal(self):
        return (
            self.base + self.accommodation + self.food + self.certificate + self.materials_kit
            + self.networking_dinner
        )

    @property
    def total(self):
        return self.subtotal - self.discount

    @property
    def amount_in_cents(self):
        return amount_in_cents(self.total)

    @property
    def currency(self):
        return settings.MONETARY_CURRENCY

    def as_dict(self):
        data = {key: str(getattr(self, attr)) for attr, key in self.API_KEYS.items()}
        data['total'] = str(self.total)
        if self.promo_code:
            data['promoCode'] = self.promo_code
        return data

    @classmethod
    def from_dict(cls, data):
        """
        Parse a breakdown as produced by as_dict() (or returned by the event service).

        Raises ValueError when a component is not a number, when the discount is negative or more than the subtotal, or
        when the total given does not match the components.
        """
        data = expect_dict(data, 'pricing')
        breakdown = cls(
            promo_code=data.get('promoCode') or '',
            **{attr: to_money(data.get(key) or 0) for attr, key in cls.API_KEYS.items()},
        )
        if breakdown.discount < ZERO or breakdown.total < ZERO:
            raise ValueError("Discount {} out of range for subtotal {}".format(breakdown.discount, breakdown.subtotal))
        if 'total' in data and to_money(data['total']) != breakdown.total:
            raise ValueError("Total {} does not match components (expected {})".format(data['total'], breakdown.total))
        return breakdown
