import logging

from apps.core import backend

from . import mock_data
from .catalog import Event, Review, Speaker

logger = logging.getLogger(__name__)


def fetch_with_fallback(path, parse, fallback):
    """
    Fetch path from the event service and return it parsed. When no service is configured or it fails (or returns
    something unparseable), the fallback data is parsed and returned instead.
    """
    client = backend.get_backend_client()
    if client is not None:
        try:
            return parse(client.get(path))
        except backend.RECOVERABLE_ERRORS as ex:
            logger.warning("Using built-in data instead of %s: %s", path, ex)
    return parse(fallback)


class EventCatalogService:
    @staticmethod
    def get_upcoming_event():
        return fetch_with_fallback('/events/upcoming', Event.from_api, mock_data.UPCOMING_EVENT)

    @staticmethod
    def get_speakers():
        return fetch_with_fallback(
            '/dentists',
            lambda data: [Speaker.from_api(d) for d in data],
            mock_data.DENTISTS,
        )

    @staticmethod
    def get_speaker(speaker_id):
        """ Returns the speaker with the given id, or None when there is no such speaker. """
        for speaker in EventCatalogService.get_speakers():
            if speaker.id == str(speaker_id):
                return speaker
        return None

    @staticmethod
    def get_reviews():
        return fetch_with_fallback(
            '/reviews',
            lambda data: [Review.from_api(d) for d in data],
            mock_data.REVIEWS,
        )
