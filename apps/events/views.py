from django.http import Http404
from django.shortcuts import redirect
from django.urls import reverse
from django.utils.functional import cached_property
from django.views.generic import TemplateView, View

from masterclass.common.views import CacheUsingContentMixin

from .services import EventCatalogService


class SpeakerList(CacheUsingContentMixin, TemplateView):
    """ All speakers of the masterclass, with their full biographies. """

    template_name = 'events/speakers.html'

    @cached_property
    def speakers(self):
        return EventCatalogService.get_speakers()

    def content_used(self):
        return self.speakers

    def get_context_data(self, **kwargs):
        kwargs['speakers'] = self.speakers
        return super().get_context_data(**kwargs)


class SpeakerDetail(View):
    """ Permalink for a single speaker, which lives on the speakers page. """

    def get(self, request, speaker_id):
        speaker = EventCatalogService.get_speaker(speaker_id)
        if speaker is None:
            raise Http404("No such speaker")
        return redirect('{}#{}'.format(reverse('events:speakers'), speaker.anchor))
