import logging

import requests
from django.conf import settings

logger = logging.getLogger(__name__)


class BackendError(Exception):
    """ The external event service could not be reached, or it reported an error. """

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class BackendClient:
    """
    Thin client for the external event service.

    Every endpoint answers with an envelope like {"success": true, "data": ..., "error": null}. request() unwraps that
    and returns just the data, or raises BackendError for anything else: network errors, timeouts, HTTP errors,
    responses that are not a JSON envelope and envelopes that report failure.
    """

    def __init__(self, base_url, timeout=10, api_key=None, session=None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()
        self.session.headers.update({'Accept': 'application/json'})
        if api_key:
            self.session.headers['Authorization'] = 'Bearer {}'.format(api_key)

    def url(self, path):
        return '{}/{}'.format(self.base_url, path.lstrip('/'))

    def request(self, method, path, **kwargs):
        url = self.url(path)
        logger.debug("%s %s", method, url)

        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as ex:
            raise BackendError("{} {} failed: {}".format(method, url, ex)) from ex

        try:
            envelope = response.json()
        except ValueError:
            envelope = None

        if not isinstance(envelope, dict):
            raise BackendError(
                "{} {} returned a malformed response".format(method, url),
                status_code=response.status_code,
            )

        if not response.ok or not envelope.get('success'):
            error = envelope.get('error') or "{} {} failed with HTTP {}".format(method, url, response.status_code)
            raise BackendError(error, status_code=response.status_code)

        return envelope.get('data')

    def get(self, path, **kwargs):
        return self.request('GET', path, **kwargs)

    def post(self, path, payload):
        return self.request('POST', path, json=payload)


def get_backend_client():
    """ Returns a client for the configured event service, or None when running without one (i.e. on mock data). """
    if not settings.BACKEND_API_URL:
        return None

    return BackendClient(
        settings.BACKEND_API_URL,
        timeout=settings.BACKEND_API_TIMEOUT,
        api_key=getattr(settings, 'BACKEND_API_KEY', None),
    )


# Errors that mean the service is unusable for a request: it failed, or it answered with data we cannot parse
RECOVERABLE_ERRORS = (BackendError, KeyError, TypeError, ValueError)


def expect_dict(data, what):
    """ Returns data when it is a JSON object, raises ValueError (so, recoverable) otherwise. """
    if not isinstance(data, dict):
        raise ValueError("Expected an object for {}, got {!r}".format(what, data))
    return data


def camel_case(name):
    """ Convert a snake_case name to the camelCase used by the event service. """
    first, *rest = name.split('_')
    return first + ''.join(word.capitalize() for word in rest)


def to_api(data):
    """ Returns a copy of data (a flat dict, e.g. form data) with camelCase keys. """
    return {camel_case(key): value for key, value in data.items()}
