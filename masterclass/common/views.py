import dataclasses
import hashlib
import json

from django.contrib.messages import get_messages
from django.utils.functional import cached_property
from django.views.decorators.http import condition


class ConditionalMixin:
    """
    Handle ETag and Last-Modified headers.

    Basically a class-based version of the django.views.decorators.http.condition decorator. Subclasses should define
    the etag and/or last_modified (cached) properties.
    """

    @property
    def etag(self):
        return None

    @property
    def last_modified(self):
        return None

    def dispatch(self, *args, **kwargs):
        # Emulate a view function to allow using the @condition decorator to do the heavy lifting
        @condition(etag_func=lambda r: self.etag, last_modified_func=lambda r: self.last_modified)
        def func(request):
            return super(ConditionalMixin, self).dispatch(*args, **kwargs)
        return func(self.request)


def _json_default(value):
    if dataclasses.is_dataclass(value):
        return dataclasses.asdict(value)
    return str(value)


class CacheUsingContentMixin(ConditionalMixin):
    """ Generate and process ETag HTTP headers from the content shown, to help browsers validate cached responses. """

    def content_used(self):
        """
        Should return (or generate) all catalog content used by this view.

        Items can be dataclass instances, or anything else that serializes to JSON (other values are converted using
        str()). The content is hashed into the ETag, so any change (e.g. the external service returning updated
        registration counts, or falling back to mock data) invalidates cached pages.

        If None is returned, no caching is applied.
        """
        return None

    @cached_property
    def etag(self):
        # Pending messages are shown on this page, so it must be rendered
        if get_messages(self.request):
            return None

        content = self.content_used()
        if content is None:
            return None

        serialized = json.dumps(list(content), default=_json_default, sort_keys=True)
        return hashlib.sha1(serialized.encode('utf-8')).hexdigest()
