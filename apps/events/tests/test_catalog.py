import datetime
from decimal import Decimal

from django.test import SimpleTestCase, override_settings

from .. import mock_data
from ..catalog import Event, EventStatus, Review, Speaker, to_decimal
from .factories import EventDataFactory, ReviewDataFactory, SpeakerDataFactory


class TestEvent(SimpleTestCase):
    def test_from_api(self):
        event = Event.from_api(mock_data.UPCOMING_EVENT)
        self.assertEqual(event.id, 'webinar-2026-feb')
        self.assertEqual(event.name, 'Master Class in Modern Dentistry 2026')
        self.assertEqual(event.date, datetime.date(2026, 2, 15))
        self.assertEqual(event.time, datetime.time(9, 0))
        self.assertEqual(event.duration_hours, 12)
        self.assertEqual(event.base_price, Decimal('499'))
        self.assertEqual(event.status, EventStatus.UPCOMING)
        self.assertEqual(event.get_status_display(), 'Upcoming')

    def test_seats_remaining(self):
        event = Event.from_api(EventDataFactory(maxCapacity=500, currentRegistrations=342))
        self.assertEqual(event.seats_remaining, 158)
        self.assertFalse(event.is_sold_out)

    def test_overbooked(self):
        """ Seats remaining never drops below zero. """
        event = Event.from_api(EventDataFactory(maxCapacity=10, currentRegistrations=12))
        self.assertEqual(event.seats_remaining, 0)
        self.assertTrue(event.is_sold_out)

    def test_end_time(self):
        event = Event.from_api(EventDataFactory(time='09:00', durationHours=12))
        self.assertEqual(event.end_time, datetime.time(21, 0))

    @override_settings(DEFAULT_BASE_PRICE=Decimal('399.00'))
    def test_missing_base_price(self):
        for price in (None, 0):
            with self.subTest(price=price):
                event = Event.from_api(EventDataFactory(basePrice=price))
                self.assertEqual(event.base_price, Decimal('399.00'))

    def test_invalid_data(self):
        with self.assertRaises(ValueError):
            Event.from_api(EventDataFactory(date='15 feb'))
        with self.assertRaises(ValueError):
            Event.from_api(EventDataFactory(basePrice='lots'))
        with self.assertRaises(KeyError):
            data = EventDataFactory()
            del data['maxCapacity']
            Event.from_api(data)


class TestSpeaker(SimpleTestCase):
    def test_from_api(self):
        data = SpeakerDataFactory(id=7, socialLinks={'twitter': 'https://twitter.com'})
        speaker = Speaker.from_api(data)
        self.assertEqual(speaker.id, '7')
        self.assertEqual(speaker.anchor, 'dentist-7')
        self.assertEqual(speaker.social_links, {'twitter': 'https://twitter.com'})
        self.assertEqual(speaker.topics_covered, data['topicsCovered'])

    def test_optional_fields(self):
        speaker = Speaker.from_api({'id': '1', 'name': 'Dr. Who'})
        self.assertEqual(speaker.achievements, [])
        self.assertEqual(speaker.social_links, {})
        self.assertEqual(speaker.years_experience, 0)

    def test_mock_data(self):
        speakers = [Speaker.from_api(d) for d in mock_data.DENTISTS]
        self.assertEqual(len(speakers), 5)
        self.assertEqual(len({s.id for s in speakers}), 5)


class TestReview(SimpleTestCase):
    def test_from_api(self):
        review = Review.from_api(ReviewDataFactory(rating=4, eventDate='2025-08-20'))
        self.assertEqual(review.rating, 4)
        self.assertEqual(list(review.stars), [0, 1, 2, 3])
        self.assertEqual(review.event_date, datetime.date(2025, 8, 20))

    def test_rating_out_of_range(self):
        for rating in (0, 6):
            with self.subTest(rating=rating):
                with self.assertRaises(ValueError):
                    Review.from_api(ReviewDataFactory(rating=rating))


class TestToDecimal(SimpleTestCase):
    def test_to_decimal(self):
        self.assertEqual(to_decimal(499), Decimal('499'))
        self.assertEqual(to_decimal('12.50'), Decimal('12.50'))
        self.assertEqual(to_decimal(0.1), Decimal('0.1'))
        with self.assertRaises(ValueError):
            to_decimal('twelve')
