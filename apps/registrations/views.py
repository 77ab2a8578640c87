from django.contrib import messages
from django.shortcuts import redirect
from django.urls import reverse
from django.utils.functional import cached_property
from django.utils.translation import gettext_lazy as _
from django.views.generic import View
from django.views.generic.base import ContextMixin
from django.views.generic.edit import FormView

from apps.events.services import EventCatalogService

from .forms import ExtrasForm, PersonalInfoForm, PreferencesForm, ReviewForm
from .services import RegistrationDraftService, RegistrationService

REGISTRATION_STEPS = [
    {
        'title': _('Personal Info'),
        'view': 'registrations:step_personal_info',
        'key': 'personal_info',
        'form_class': PersonalInfoForm,
    }, {
        'title': _('Preferences'),
        'view': 'registrations:step_preferences',
        'key': 'preferences',
        'form_class': PreferencesForm,
    }, {
        'title': _('Extras'),
        'view': 'registrations:step_extras',
        'key': 'extras',
        'form_class': ExtrasForm,
    }, {
        'title': _('Review'),
        'view': 'registrations:step_review',
        'key': 'review',
        'form_class': ReviewForm,
    },
]

# Steps whose data is kept in the draft, i.e. all but the final review
DRAFT_STEPS = REGISTRATION_STEPS[:-1]


def step_is_complete(session, step):
    """ Whether the draft has valid data for the given step. """
    data = RegistrationDraftService.get_step(session, step['key'])
    return data is not None and step['form_class'](data=data).is_valid()


def first_incomplete_step(session):
    for step in DRAFT_STEPS:
        if not step_is_complete(session, step):
            return step
    return REGISTRATION_STEPS[-1]


class RegistrationStepMixin(ContextMixin):
    template_name = 'registrations/step.html'

    @cached_property
    def event(self):
        return EventCatalogService.get_upcoming_event()

    @cached_property
    def current_step(self):
        view = self.request.resolver_match.view_name
        for step in REGISTRATION_STEPS:
            if step['view'] == view:
                return step
        raise Exception(f"Current step ({view}) not listed in REGISTRATION_STEPS")

    @cached_property
    def current_step_num(self):
        return REGISTRATION_STEPS.index(self.current_step)

    @cached_property
    def pricing(self):
        return RegistrationDraftService.get_pricing(self.request.session, self.event)

    def get_form_class(self):
        return self.current_step['form_class']

    def get_success_url(self):
        return reverse(REGISTRATION_STEPS[self.current_step_num + 1]['view'])

    def check_request(self):
        """
        Called at the start of dispatch (so for all HTTP methods) to check that all previous steps are complete.

        Should return None for normal processing, or a response to bypass normal processing.
        """
        for step in REGISTRATION_STEPS[:self.current_step_num]:
            if not step_is_complete(self.request.session, step):
                return redirect(step['view'])
        return None

    def dispatch(self, *args, **kwargs):
        response = self.check_request()
        if response is None:
            response = super().dispatch(*args, **kwargs)
        return response

    def get_context_data(self, **kwargs):
        if self.current_step_num > 0:
            kwargs.update({
                'back_url': reverse(REGISTRATION_STEPS[self.current_step_num - 1]['view']),
                'back_text': _('Back'),
            })

        kwargs['steps'] = [
            {
                'num': num,
                'title': step['title'],
                'url': reverse(step['view']),
                'current': step is self.current_step,
                'done': num < self.current_step_num,
            }
            for num, step in enumerate(REGISTRATION_STEPS, start=1)
        ]
        kwargs['step_num'] = self.current_step_num + 1
        kwargs['step_count'] = len(REGISTRATION_STEPS)
        kwargs['current_step'] = self.current_step
        kwargs['event'] = self.event
        kwargs['pricing'] = self.pricing
        return super().get_context_data(**kwargs)


class RegistrationStart(View):
    """ Entry point of the registration wizard, continues a saved draft where it was left off. """

    def get(self, request):
        if RegistrationDraftService.get(request.session):
            messages.info(request, _('We restored your saved registration. You can continue where you left off.'))
        return redirect(first_incomplete_step(request.session)['view'])


class RegistrationStepView(RegistrationStepMixin, FormView):
    def get_initial(self):
        initial = super().get_initial()
        initial.update(RegistrationDraftService.get_step(self.request.session, self.current_step['key']) or {})
        return initial

    def form_valid(self, form):
        RegistrationDraftService.save_step(self.request.session, self.current_step['key'], form.get_draft_data())
        return super().form_valid(form)


class ReviewStep(RegistrationStepMixin, FormView):
    template_name = 'registrations/review.html'

    def get_context_data(self, **kwargs):
        sections = []
        for step in DRAFT_STEPS:
            form = step['form_class'](data=RegistrationDraftService.get_step(self.request.session, step['key']))
            # check_request guarantees this is valid
            form.is_valid()
            sections.append({
                'title': step['title'],
                'url': reverse(step['view']),
                'summary': form.get_summary(),
            })
        kwargs['sections'] = sections
        return super().get_context_data(**kwargs)

    def form_valid(self, form):
        RegistrationService.submit(self.request.session, self.event)
        return redirect('payments:payment')


class StartOver(View):
    """ Throw away the saved draft. """

    def post(self, request):
        RegistrationDraftService.clear(request.session)
        messages.info(request, _('Your saved registration has been cleared.'))
        return redirect('registrations:start')
