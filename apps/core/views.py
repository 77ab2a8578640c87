from django.conf import settings
from django.contrib import messages
from django.urls import reverse_lazy
from django.utils.functional import cached_property
from django.utils.translation import gettext_lazy as _
from django.views.generic import RedirectView, TemplateView
from django.views.generic.edit import FormView

from apps.events.services import EventCatalogService
from apps.registrations.services import PricingService
from masterclass.common.views import CacheUsingContentMixin

from . import content
from .forms import ContactForm
from .services import ContactNotifyService


class PrivacyPolicy(RedirectView):
    url = settings.PRIVACY_POLICY_URL


class TermsOfService(RedirectView):
    url = settings.TERMS_OF_SERVICE_URL


class Home(CacheUsingContentMixin, TemplateView):
    template_name = 'core/home.html'

    @cached_property
    def event(self):
        return EventCatalogService.get_upcoming_event()

    @cached_property
    def speakers(self):
        return EventCatalogService.get_speakers()

    @cached_property
    def reviews(self):
        return EventCatalogService.get_reviews()

    def content_used(self):
        return [self.event, *self.speakers, *self.reviews]

    def get_context_data(self, **kwargs):
        kwargs.update({
            'event': self.event,
            'speakers': self.speakers,
            'reviews': self.reviews,
            'pricing_options': PricingService.get_options(),
        })
        return super().get_context_data(**kwargs)


class About(CacheUsingContentMixin, TemplateView):
    template_name = 'core/about.html'

    @cached_property
    def event(self):
        return EventCatalogService.get_upcoming_event()

    def content_used(self):
        return [self.event]

    def get_context_data(self, **kwargs):
        kwargs.update({
            'event': self.event,
            'schedule': content.SCHEDULE,
            'who_should_attend': content.WHO_SHOULD_ATTEND,
            'learning_objectives': content.LEARNING_OBJECTIVES,
        })
        return super().get_context_data(**kwargs)


class Faq(TemplateView):
    template_name = 'core/faq.html'

    def get_context_data(self, **kwargs):
        query = self.request.GET.get('q', '').strip()
        category = self.request.GET.get('category')
        if category not in content.FaqCategory.values:
            category = content.FaqCategory.REGISTRATION

        kwargs.update({
            'query': query,
            # When searching, no category is selected
            'category': None if query else category,
            'categories': content.FaqCategory.choices,
            'entries': content.search_faq(category=category, query=query),
        })
        return super().get_context_data(**kwargs)


class Contact(FormView):
    template_name = 'core/contact.html'
    form_class = ContactForm
    success_url = reverse_lazy('core:contact')

    def form_valid(self, form):
        ContactNotifyService.send_contact_email(form.cleaned_data)
        messages.success(self.request, _("Thank you for your message! We'll get back to you within 24 hours."))
        return super().form_valid(form)
