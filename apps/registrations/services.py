import logging
import time
from decimal import ROUND_HALF_UP, Decimal

from django.conf import settings
from django.forms import ValidationError
from django.utils.translation import gettext as _

from apps.core import backend

from .constants import (ACCOMMODATION_DESCRIPTIONS, ACCOMMODATION_PRICES, CERTIFICATE_DESCRIPTIONS, CERTIFICATE_PRICES,
                        FOOD_DESCRIPTIONS, FOOD_PRICES, MATERIALS_KIT_PRICE, NETWORKING_DINNER_PRICE, AccommodationType,
                        CertificateType, DiscountType, FoodPreference)
from .pricing import ZERO, PricingBreakdown, to_money

logger = logging.getLogger(__name__)

DRAFT_SESSION_KEY = 'registration_draft'
CHECKOUT_SESSION_KEY = 'registration_checkout'

# Used for pricing when (part of) the options have not been chosen yet
DEFAULT_SELECTIONS = {
    'accommodation_type': AccommodationType.NONE,
    'food_preference': FoodPreference.HALAL,
    'certificate_type': CertificateType.DIGITAL,
    'materials_kit': False,
    'networking_dinner': False,
}


class PricingService:
    @staticmethod
    def get_options():
        """ All priced options, grouped, for showing a price list. Returns (group title, options) tuples. """
        def options(choices, prices, descriptions):
            return [
                {'name': label, 'price': prices[value], 'description': descriptions[value]}
                for value, label in choices
            ]

        return [
            (_('Accommodation'), options(
                AccommodationType.choices, ACCOMMODATION_PRICES, ACCOMMODATION_DESCRIPTIONS,
            )),
            (_('Food'), options(FoodPreference.choices, FOOD_PRICES, FOOD_DESCRIPTIONS)),
            (_('Extras'), options(CertificateType.choices, CERTIFICATE_PRICES, CERTIFICATE_DESCRIPTIONS) + [
                {'name': _('Workshop Materials Kit'), 'price': MATERIALS_KIT_PRICE,
                 'description': _('Physical materials and tools kit')},
                {'name': _('Networking Dinner'), 'price': NETWORKING_DINNER_PRICE,
                 'description': _('Exclusive dinner with speakers')},
            ]),
        ]

    @staticmethod
    def find_promo_code(code):
        """
        Look up a promotional code in the PROMO_CODES setting, ignoring case and surrounding whitespace.

        Returns a (code, config) tuple, with code normalized to how it is configured, or None when the code is empty
        or unknown.
        """
        code = (code or '').strip().upper()
        if not code:
            return None
        for configured, config in settings.PROMO_CODES.items():
            if configured.upper() == code:
                return configured, config
        return None

    @staticmethod
    def calculate_discount(subtotal, promo):
        """ Discount for the given promo config, never more than the subtotal (and never negative). """
        if promo is None or subtotal <= 0:
            return ZERO

        value = to_money(promo['value'])
        if promo['type'] == DiscountType.PERCENTAGE:
            discount = (subtotal * value / Decimal(100)).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)
        elif promo['type'] == DiscountType.FIXED:
            discount = value
        else:
            raise ValueError("Unknown discount type: {}".format(promo['type']))

        return max(min(discount, subtotal), ZERO)

    @staticmethod
    def calculate(base_price, selections, promo_code=None):
        """
        Calculate the price of a registration.

        selections is a dict with accommodation_type, food_preference, certificate_type, materials_kit and
        networking_dinner. Options that are missing get their default, invalid options raise a ValidationError.
        """
        selections = {**DEFAULT_SELECTIONS, **{k: v for k, v in selections.items() if v is not None}}

        try:
            accommodation = ACCOMMODATION_PRICES[selections['accommodation_type']]
            food = FOOD_PRICES[selections['food_preference']]
            certificate = CERTIFICATE_PRICES[selections['certificate_type']]
        except KeyError as ex:
            raise ValidationError(_("Invalid option: %(option)s"), params={'option': ex.args[0]})

        breakdown = PricingBreakdown(
            base=to_money(base_price),
            accommodation=accommodation,
            food=food,
            certificate=certificate,
            materials_kit=MATERIALS_KIT_PRICE if selections['materials_kit'] else ZERO,
            networking_dinner=NETWORKING_DINNER_PRICE if selections['networking_dinner'] else ZERO,
        )

        promo = PricingService.find_promo_code(promo_code)
        if promo is not None:
            breakdown.promo_code, config = promo
            breakdown.discount = PricingService.calculate_discount(breakdown.subtotal, config)
        return breakdown


class RegistrationDraftService:
    """
    Keeps the data of the registration wizard in the session, per step.

    Only validated step data is stored, so a draft can always be used to prefill the forms again.
    """

    @staticmethod
    def get(session):
        return session.get(DRAFT_SESSION_KEY, {})

    @staticmethod
    def get_step(session, step):
        return RegistrationDraftService.get(session).get(step)

    @staticmethod
    def save_step(session, step, data):
        draft = RegistrationDraftService.get(session)
        draft[step] = data
        # Assign again, so the session notices the change
        session[DRAFT_SESSION_KEY] = draft

    @staticmethod
    def get_data(session):
        """ All data of all steps, as a single flat dict. """
        data = {}
        for step_data in RegistrationDraftService.get(session).values():
            data.update(step_data)
        return data

    @staticmethod
    def clear(session):
        session.pop(DRAFT_SESSION_KEY, None)

    @staticmethod
    def get_pricing(session, event):
        data = RegistrationDraftService.get_data(session)
        selections = {key: data.get(key) for key in DEFAULT_SELECTIONS}
        try:
            return PricingService.calculate(event.base_price, selections, data.get('promo_code'))
        except ValidationError:
            # Stale draft with options that no longer exist, the step forms will complain about those
            return PricingService.calculate(event.base_price, {})


class RegistrationService:
    @staticmethod
    def submit(session, event):
        """
        Submit the registration in the session draft to the event service and prepare for payment.

        When the event service accepts the registration, its registration id, confirmation number and (when given)
        pricing are used. Otherwise, the registration continues with locally calculated pricing and a demo id. Either
        way, the draft is cleared and the checkout info (as also returned) is stored in the session.
        """
        data = RegistrationDraftService.get_data(session)
        pricing = RegistrationDraftService.get_pricing(session, event)

        registration_id = confirmation_number = None
        client = backend.get_backend_client()
        if client is None:
            logger.info("No event service configured, registration for %s not submitted", data.get('email'))
        else:
            payload = backend.to_api({**data, 'event_id': event.id, 'agreed_to_terms': True})
            try:
                result = backend.expect_dict(client.post('/registrations', payload), 'registration')
                registration_id = str(result['registrationId'])
                confirmation_number = result.get('confirmationNumber') or ''
                if result.get('pricing'):
                    pricing = PricingBreakdown.from_dict(result['pricing'])
            except backend.RECOVERABLE_ERRORS as ex:
                logger.warning("Submitting registration for %s failed, continuing without: %s", data.get('email'), ex)
                registration_id = confirmation_number = None

        checkout = {
            'registration': data,
            'pricing': pricing.as_dict(),
            'registration_id': registration_id or 'demo-{}'.format(int(time.time() * 1000)),
            'confirmation_number': confirmation_number or '',
            'submitted': registration_id is not None,
        }
        session[CHECKOUT_SESSION_KEY] = checkout
        RegistrationDraftService.clear(session)
        return checkout

    @staticmethod
    def get_checkout(session):
        """ Returns the checkout info stored by submit() (with pricing parsed), or None. """
        checkout = session.get(CHECKOUT_SESSION_KEY)
        if not checkout:
            return None
        return {**checkout, 'pricing': PricingBreakdown.from_dict(checkout['pricing'])}

    @staticmethod
    def clear_checkout(session):
        session.pop(CHECKOUT_SESSION_KEY, None)
