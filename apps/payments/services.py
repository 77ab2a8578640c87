import logging
import re
import string

from django.conf import settings
from django.core.mail import EmailMessage
from django.forms import ValidationError
from django.template.loader import render_to_string
from django.utils.crypto import get_random_string
from django.utils.translation import gettext as _

from apps.core import backend
from apps.registrations.pricing import PricingBreakdown

logger = logging.getLogger(__name__)

ORDER_SESSION_KEY = 'completed_order'


def generate_order_id():
    """ Order id shown to attendees when the event service did not provide a confirmation number. """
    return 'DM-' + get_random_string(6, allowed_chars=string.ascii_uppercase + string.digits)


class PaymentService:
    @staticmethod
    def process_payment(registration_id, pricing):
        """
        Create a payment intent at the event service and confirm it.

        Returns a (confirmation number, demo) tuple. Raises BackendError (or one of the other RECOVERABLE_ERRORS for
        malformed replies) when this fails.
        """
        client = backend.get_backend_client()
        if client is None:
            raise backend.BackendError("No event service configured")

        if pricing.amount_in_cents <= 0:
            raise ValueError("Invalid amount: {}".format(pricing.total))

        intent = backend.expect_dict(client.post('/payments/create-intent', {
            'registrationId': registration_id,
            'amount': pricing.amount_in_cents,
        }), 'payment intent')
        confirmation = backend.expect_dict(client.post('/payments/confirm', {
            'registrationId': registration_id,
            'paymentIntentId': intent['paymentIntentId'],
        }), 'payment confirmation')
        return confirmation.get('confirmationNumber') or '', bool(confirmation.get('demo', False))

    @staticmethod
    def pay(session, checkout):
        """
        Pay for the registration in the given checkout (as returned by RegistrationService.get_checkout).

        When payment fails, this either continues in demo mode (with a generated order id) or raises a
        ValidationError, depending on the PAYMENTS_DEMO_FALLBACK setting. On success (demo or not), the order is
        stored in the session for the success page and returned.
        """
        registration_id = checkout['registration_id']
        pricing = checkout['pricing']
        if pricing.amount_in_cents == 0:
            # Fully discounted, nothing to pay
            logger.info("Registration %s is free, no payment needed", registration_id)
            confirmation_number, demo = checkout.get('confirmation_number', ''), False
        else:
            try:
                confirmation_number, demo = PaymentService.process_payment(registration_id, pricing)
            except backend.RECOVERABLE_ERRORS as ex:
                if not settings.PAYMENTS_DEMO_FALLBACK:
                    logger.error("Payment for registration %s failed: %s", registration_id, ex)
                    raise ValidationError(_("Payment failed, please try again later."))
                logger.warning("Payment for registration %s failed, continuing in demo mode: %s", registration_id, ex)
                confirmation_number, demo = '', True

        order = {
            'order_id': confirmation_number or generate_order_id(),
            'demo': demo,
            'registration_id': registration_id,
            'registration': checkout['registration'],
            'pricing': checkout['pricing'].as_dict(),
        }
        session[ORDER_SESSION_KEY] = order
        return order

    @staticmethod
    def get_order(session):
        """ Returns the order completed in this session (with pricing parsed), or None. """
        order = session.get(ORDER_SESSION_KEY)
        if not order:
            return None
        return {**order, 'pricing': PricingBreakdown.from_dict(order['pricing'])}


class PaymentNotifyService:
    @staticmethod
    def send_confirmation_email(request, order, event):
        registration = order['registration']
        context = {
            'order': order,
            'registration': registration,
            'first_name': registration['full_name'].split(' ')[0],
            'event': event,
            'site_url': request.build_absolute_uri('/'),
        }
        body = render_to_string('payments/email/order_confirmation.txt', context)
        subject = render_to_string('payments/email/order_confirmation_subject.txt', context).strip()
        subject = settings.EMAIL_SUBJECT_PREFIX + subject
        # Remove all empty lines, except for the ones that contain just a . (then just remove the .). This allows
        # removing the empty lines produced by template tags that got removed, while keeping the empty lines that were
        # explicitly added in the template.
        body = re.sub("^\n+", "", body)
        body = re.sub("\n\n+", "\n", body)
        body = re.sub("\n\\.\n", "\n\n", body)

        email = EmailMessage(
            body=body, subject=subject, to=[registration['email']],
            bcc=settings.BCC_EMAIL_TO,
        )
        email.send()
