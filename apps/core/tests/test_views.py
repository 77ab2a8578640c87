from django.core import mail
from django.test import TestCase, override_settings
from django.urls import reverse

from apps.core.tests.utils import OfflineBackendMixin


class TestInfoPages(OfflineBackendMixin, TestCase):
    def test_home(self):
        with self.assertTemplateUsed('core/home.html'):
            response = self.client.get(reverse('core:home'))

        self.assertContains(response, 'Master Class in Modern Dentistry 2026')
        self.assertContains(response, 'Only 158 of 500 seats remaining')
        self.assertContains(response, 'Dr. Emily Rodriguez')
        self.assertContains(response, 'Dr. Robert Williams')
        self.assertContains(response, 'Opt out for $50 discount')
        self.assertContains(response, '+$200.00')
        self.assertEqual(len(response.context['reviews']), 5)
        self.assertTrue(response.has_header('ETag'))

    def test_home_unchanged(self):
        etag = self.client.get(reverse('core:home'))['ETag']
        response = self.client.get(reverse('core:home'), HTTP_IF_NONE_MATCH=etag)
        self.assertEqual(response.status_code, 304)

    def test_home_unchanged_with_messages(self):
        """ Pending messages must still be shown, even if the content is unchanged. """
        etag = self.client.get(reverse('core:home'))['ETag']
        self.client.post(reverse('core:contact'), {
            'name': 'Jane Doe',
            'email': 'jane@example.com',
            'subject': 'Group registration',
            'message': 'We would like to register five people from our practice.',
        })
        response = self.client.get(reverse('core:home'), HTTP_IF_NONE_MATCH=etag)
        self.assertContains(response, 'Thank you for your message!')
        self.assertFalse(response.has_header('ETag'))

    def test_about(self):
        with self.assertTemplateUsed('core/about.html'):
            response = self.client.get(reverse('core:about'))

        self.assertEqual(len(response.context['schedule']), 8)
        self.assertContains(response, 'Panel Discussion &amp; Q&amp;A')
        self.assertContains(response, 'Practice Owners')
        self.assertContains(response, 'Develop strategies for practice growth and patient retention')

    def test_privacy_policy(self):
        response = self.client.get(reverse('core:privacy_policy'))
        self.assertRedirects(response, 'https://www.dentalmasters.com/privacy', fetch_redirect_response=False)

    def test_terms_of_service(self):
        response = self.client.get(reverse('core:terms_of_service'))
        self.assertRedirects(response, 'https://www.dentalmasters.com/terms', fetch_redirect_response=False)


class TestFaq(TestCase):
    def get(self, **params):
        with self.assertTemplateUsed('core/faq.html'):
            return self.client.get(reverse('core:faq'), params)

    def test_default_category(self):
        response = self.get()
        self.assertEqual(response.context['category'], 'registration')
        self.assertEqual(len(response.context['entries']), 4)
        self.assertContains(response, 'Is early bird pricing available?')

    def test_category(self):
        response = self.get(category='refunds')
        self.assertEqual([e.category for e in response.context['entries']], ['refunds'] * 3)
        self.assertContains(response, 'What is your refund policy?')

    def test_unknown_category(self):
        response = self.get(category='gossip')
        self.assertEqual(response.context['category'], 'registration')

    def test_search_overrides_category(self):
        response = self.get(category='registration', q='CE CREDITS')
        self.assertIsNone(response.context['category'])
        (entry,) = response.context['entries']
        self.assertEqual(entry.question, 'How many CE credits does this course provide?')

    def test_search_answers(self):
        response = self.get(q='stripe')
        (entry,) = response.context['entries']
        self.assertEqual(entry.category, 'payment')

    def test_no_results(self):
        response = self.get(q='parking')
        self.assertEqual(response.context['entries'], [])
        self.assertContains(response, 'No questions found matching')


@override_settings(CONTACT_EMAIL_TO=['info@example.com'])
class TestContact(TestCase):
    def setUp(self):
        self.data = {
            'name': 'Jane Doe',
            'email': 'jane@example.com',
            'subject': 'Group registration',
            'message': 'We would like to register five people from our practice.',
        }

    def test_show(self):
        with self.assertTemplateUsed('core/contact.html'):
            response = self.client.get(reverse('core:contact'))
        self.assertContains(response, 'info@dentalmasters.com')
        self.assertContains(response, '+1-800-DENTIST')

    def test_send(self):
        response = self.client.post(reverse('core:contact'), self.data, follow=True)
        self.assertRedirects(response, reverse('core:contact'))
        self.assertContains(response, 'Thank you for your message!')

        (email,) = mail.outbox
        self.assertEqual(email.to, ['info@example.com'])
        self.assertEqual(email.reply_to, ['jane@example.com'])
        self.assertIn('Group registration', email.subject)
        self.assertIn('We would like to register five people', email.body)

    def test_validation(self):
        invalid = {
            'name': 'J',
            'email': 'jane',
            'subject': 'Hi',
            'message': 'Too short',
        }
        for field, value in invalid.items():
            with self.subTest(field=field):
                response = self.client.post(reverse('core:contact'), {**self.data, field: value})
                self.assertEqual(response.status_code, 200)
                self.assertIn(field, response.context['form'].errors)
        self.assertEqual(mail.outbox, [])
