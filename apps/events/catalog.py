"""
Plain data objects for the content shown on the site.

These are owned by the external event service (or the built-in mock data), not by our own database, so they are
dataclasses rather than models. Each has a from_api() constructor that parses the camelCase JSON the service uses.
"""
import datetime
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation

from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.core.backend import expect_dict


class EventStatus(models.TextChoices):
    UPCOMING = 'upcoming', _('Upcoming')
    LIVE = 'live', _('Live')
    COMPLETED = 'completed', _('Completed')
    CANCELLED = 'cancelled', _('Cancelled')


def to_decimal(value):
    """ Like Decimal(), but raises ValueError for junk, like int() and float() do. """
    try:
        return Decimal(str(value))
    except InvalidOperation:
        raise ValueError("Not a number: {!r}".format(value))


@dataclass
class Event:
    id: str
    name: str
    date: datetime.date
    time: datetime.time
    duration_hours: int
    platform: str
    max_capacity: int
    current_registrations: int
    base_price: Decimal
    status: str = EventStatus.UPCOMING
    description: str = ''

    @property
    def seats_remaining(self):
        return max(self.max_capacity - self.current_registrations, 0)

    @property
    def is_sold_out(self):
        return self.seats_remaining == 0

    @property
    def end_time(self):
        start = datetime.datetime.combine(self.date, self.time)
        return (start + datetime.timedelta(hours=self.duration_hours)).time()

    def get_status_display(self):
        if self.status in EventStatus.values:
            return EventStatus(self.status).label
        return self.status

    @classmethod
    def from_api(cls, data):
        data = expect_dict(data, 'event')
        base_price = data.get('basePrice')
        return cls(
            id=str(data['id']),
            name=data['name'],
            date=datetime.date.fromisoformat(data['date']),
            time=datetime.time.fromisoformat(data.get('time') or '09:00'),
            duration_hours=int(data.get('durationHours') or 0),
            platform=data.get('platform') or '',
            max_capacity=int(data['maxCapacity']),
            current_registrations=int(data.get('currentRegistrations') or 0),
            # A missing or zero base price means the service does not know, not that the event is free
            base_price=to_decimal(base_price) if base_price else settings.DEFAULT_BASE_PRICE,
            status=data.get('status') or EventStatus.UPCOMING,
            description=data.get('description') or '',
        )


@dataclass
class Speaker:
    id: str
    name: str
    credentials: str
    specialty: str
    biography: str
    profile_image_url: str
    institution: str = ''
    years_experience: int = 0
    achievements: list = field(default_factory=list)
    social_links: dict = field(default_factory=dict)
    topics_covered: list = field(default_factory=list)
    video_intro_url: str = ''

    @property
    def anchor(self):
        """ Fragment used to link to this speaker on the speakers page. """
        return 'dentist-{}'.format(self.id)

    @classmethod
    def from_api(cls, data):
        data = expect_dict(data, 'speaker')
        return cls(
            id=str(data['id']),
            name=data['name'],
            credentials=data.get('credentials') or '',
            specialty=data.get('specialty') or '',
            biography=data.get('biography') or '',
            profile_image_url=data.get('profileImageUrl') or '',
            institution=data.get('institution') or '',
            years_experience=int(data.get('yearsExperience') or 0),
            achievements=list(data.get('achievements') or []),
            social_links=dict(data.get('socialLinks') or {}),
            topics_covered=list(data.get('topicsCovered') or []),
            video_intro_url=data.get('videoIntroUrl') or '',
        )


@dataclass
class Review:
    id: str
    attendee_name: str
    attendee_credential: str
    rating: int
    review_text: str
    event_date: datetime.date = None
    attendee_photo_url: str = ''
    verified: bool = False

    @property
    def stars(self):
        """ Rating as a range, for templates to loop over. """
        return range(self.rating)

    @classmethod
    def from_api(cls, data):
        data = expect_dict(data, 'review')
        rating = int(data['rating'])
        if not 1 <= rating <= 5:
            raise ValueError("Rating out of range: {}".format(rating))

        event_date = data.get('eventDate')
        return cls(
            id=str(data['id']),
            attendee_name=data['attendeeName'],
            attendee_credential=data.get('attendeeCredential') or '',
            rating=rating,
            review_text=data['reviewText'],
            event_date=datetime.date.fromisoformat(event_date) if event_date else None,
            attendee_photo_url=data.get('attendeePhotoUrl') or '',
            verified=bool(data.get('verified', False)),
        )
