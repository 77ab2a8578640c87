from datetime import date, timedelta

import factory

from ..catalog import Event


class EventDataFactory(factory.DictFactory):
    """ Event as returned by the event service. """

    class Params:
        starts_in_days = 30

    id = factory.Sequence(lambda n: 'event-%d' % n)
    name = factory.Sequence(lambda n: 'Masterclass %d' % n)
    date = factory.LazyAttribute(lambda obj: (date.today() + timedelta(days=obj.starts_in_days)).isoformat())
    time = '09:00'
    durationHours = 12
    platform = 'In-Person'
    maxCapacity = 500
    currentRegistrations = 100
    basePrice = 499
    status = 'upcoming'
    description = factory.Faker('paragraph')


class SpeakerDataFactory(factory.DictFactory):
    id = factory.Sequence(lambda n: str(n))
    name = factory.Sequence(lambda n: 'Dr. Speaker %d' % n)
    credentials = 'DDS, PhD'
    specialty = 'Endodontics'
    biography = factory.Faker('paragraph')
    profileImageUrl = factory.Faker('image_url')
    achievements = factory.List([factory.Faker('sentence') for _ in range(3)])
    socialLinks = factory.Dict({'linkedin': 'https://linkedin.com'})
    topicsCovered = factory.List(['Root Canal Retreatment', 'Apical Surgery'])
    institution = factory.Faker('company')
    yearsExperience = 15


class ReviewDataFactory(factory.DictFactory):
    id = factory.Sequence(lambda n: str(n))
    attendeeName = factory.Faker('name')
    attendeeCredential = 'DMD, General Dentist'
    attendeePhotoUrl = factory.Faker('image_url')
    rating = 5
    reviewText = factory.Faker('paragraph')
    eventDate = '2025-11-15'
    verified = True


def make_event(**kwargs):
    return Event.from_api(EventDataFactory(**kwargs))