from decimal import Decimal

from django.test import SimpleTestCase, override_settings

from apps.core.backend import BackendError
from apps.core.tests.utils import MockBackendMixin, OfflineBackendMixin
from apps.events.tests.factories import make_event

from ..services import CHECKOUT_SESSION_KEY, DRAFT_SESSION_KEY, RegistrationDraftService, RegistrationService
from .factories import make_draft


class TestRegistrationDraftService(SimpleTestCase):
    def test_save_and_get(self):
        session = {}
        RegistrationDraftService.save_step(session, 'preferences', {'accommodation_type': 'single'})
        RegistrationDraftService.save_step(session, 'extras', {'materials_kit': True})
        self.assertEqual(RegistrationDraftService.get_step(session, 'preferences'), {'accommodation_type': 'single'})
        self.assertIsNone(RegistrationDraftService.get_step(session, 'personal_info'))
        self.assertEqual(
            RegistrationDraftService.get_data(session),
            {'accommodation_type': 'single', 'materials_kit': True},
        )

    def test_save_overwrites_step(self):
        session = {}
        RegistrationDraftService.save_step(session, 'extras', {'materials_kit': True, 'networking_dinner': True})
        RegistrationDraftService.save_step(session, 'extras', {'materials_kit': False})
        self.assertEqual(RegistrationDraftService.get_step(session, 'extras'), {'materials_kit': False})

    def test_clear(self):
        session = {DRAFT_SESSION_KEY: make_draft()}
        RegistrationDraftService.clear(session)
        self.assertEqual(RegistrationDraftService.get(session), {})
        # Clearing twice is fine
        RegistrationDraftService.clear(session)

    def test_pricing_of_empty_draft(self):
        pricing = RegistrationDraftService.get_pricing({}, make_event(basePrice=499))
        self.assertEqual(pricing.total, Decimal('499.00'))

    def test_pricing_of_draft(self):
        session = {DRAFT_SESSION_KEY: make_draft(accommodation_type='single', networking_dinner=True)}
        pricing = RegistrationDraftService.get_pricing(session, make_event(basePrice=499))
        self.assertEqual(pricing.total, Decimal('799.00'))

    def test_pricing_of_stale_draft(self):
        session = {DRAFT_SESSION_KEY: make_draft(accommodation_type='castle')}
        pricing = RegistrationDraftService.get_pricing(session, make_event(basePrice=499))
        self.assertEqual(pricing.total, Decimal('499.00'))


class TestSubmitToService(MockBackendMixin, SimpleTestCase):
    def setUp(self):
        super().setUp()
        self.event = make_event(id='event-1', basePrice=499)
        self.session = {DRAFT_SESSION_KEY: make_draft(full_name='Jane Doe', certificate_type='hardcopy')}

    def test_accepted(self):
        self.backend_responses['/registrations'] = {'registrationId': 42, 'confirmationNumber': 'DM-ABC123'}
        checkout = RegistrationService.submit(self.session, self.event)

        self.assertEqual(checkout['registration_id'], '42')
        self.assertEqual(checkout['confirmation_number'], 'DM-ABC123')
        self.assertTrue(checkout['submitted'])
        self.assertEqual(checkout['pricing']['total'], '524.00')
        self.assertEqual(checkout['registration']['full_name'], 'Jane Doe')

        (payload,) = self.assert_posted('/registrations')
        self.assertEqual(payload['fullName'], 'Jane Doe')
        self.assertEqual(payload['certificateType'], 'hardcopy')
        self.assertEqual(payload['eventId'], 'event-1')
        self.assertIs(payload['agreedToTerms'], True)

        self.assertNotIn(DRAFT_SESSION_KEY, self.session)
        self.assertEqual(self.session[CHECKOUT_SESSION_KEY], checkout)

    def test_service_pricing(self):
        """ Pricing returned by the event service takes precedence. """
        self.backend_responses['/registrations'] = {
            'registrationId': 'r-1',
            'pricing': {'basePrice': 449, 'certificate': 25, 'total': 474},
        }
        checkout = RegistrationService.submit(self.session, self.event)
        pricing = RegistrationService.get_checkout(self.session)['pricing']
        self.assertEqual(checkout['pricing']['total'], '474.00')
        self.assertEqual(pricing.base, Decimal('449.00'))

    def test_failure_falls_back(self):
        self.backend_responses['/registrations'] = BackendError("Bad gateway", status_code=502)
        with self.assertLogs('apps.registrations.services', level='WARNING'):
            checkout = RegistrationService.submit(self.session, self.event)

        self.assertFalse(checkout['submitted'])
        self.assertRegex(checkout['registration_id'], r'^demo-\d+$')
        self.assertEqual(checkout['confirmation_number'], '')
        self.assertEqual(checkout['pricing']['total'], '524.00')
        self.assertNotIn(DRAFT_SESSION_KEY, self.session)

    def test_inconsistent_pricing_falls_back(self):
        self.backend_responses['/registrations'] = {
            'registrationId': 'r-1',
            'pricing': {'basePrice': 499, 'total': 1},
        }
        with self.assertLogs('apps.registrations.services', level='WARNING'):
            checkout = RegistrationService.submit(self.session, self.event)
        self.assertFalse(checkout['submitted'])
        self.assertEqual(checkout['pricing']['total'], '524.00')

    def test_excessive_discount_falls_back(self):
        self.backend_responses['/registrations'] = {
            'registrationId': 'r-1',
            'pricing': {'basePrice': 100, 'discount': 250, 'total': -150},
        }
        with self.assertLogs('apps.registrations.services', level='WARNING'):
            checkout = RegistrationService.submit(self.session, self.event)
        self.assertFalse(checkout['submitted'])
        self.assertEqual(checkout['pricing']['total'], '524.00')

    def test_empty_reply_falls_back(self):
        self.backend_responses['/registrations'] = None
        with self.assertLogs('apps.registrations.services', level='WARNING'):
            checkout = RegistrationService.submit(self.session, self.event)
        self.assertFalse(checkout['submitted'])
        self.assertRegex(checkout['registration_id'], r'^demo-\d+$')


@override_settings(PROMO_CODES={'FLAT100': {'type': 'fixed', 'value': Decimal('100.00')}})
class TestSubmitOffline(OfflineBackendMixin, SimpleTestCase):
    def test_submit(self):
        session = {DRAFT_SESSION_KEY: make_draft(promo_code='FLAT100')}
        checkout = RegistrationService.submit(session, make_event(basePrice=499))
        self.assertFalse(checkout['submitted'])
        self.assertTrue(checkout['registration_id'].startswith('demo-'))
        self.assertEqual(checkout['pricing']['discount'], '100.00')
        self.assertEqual(checkout['pricing']['total'], '399.00')

    def test_get_checkout(self):
        self.assertIsNone(RegistrationService.get_checkout({}))

        session = {DRAFT_SESSION_KEY: make_draft()}
        RegistrationService.submit(session, make_event(basePrice=499))
        checkout = RegistrationService.get_checkout(session)
        self.assertEqual(checkout['pricing'].total, Decimal('499.00'))

        RegistrationService.clear_checkout(session)
        self.assertIsNone(RegistrationService.get_checkout(session))
