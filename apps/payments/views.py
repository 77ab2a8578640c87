from django import forms
from django.contrib import messages
from django.http import Http404
from django.shortcuts import redirect
from django.utils.functional import cached_property
from django.utils.translation import gettext_lazy as _
from django.views.generic import TemplateView
from django.views.generic.edit import FormView

from apps.events.services import EventCatalogService
from apps.registrations.services import RegistrationService

from .forms import PaymentForm
from .services import PaymentNotifyService, PaymentService


class PaymentView(FormView):
    """ Card details for a submitted registration. """

    template_name = 'payments/payment.html'

    @cached_property
    def checkout(self):
        return RegistrationService.get_checkout(self.request.session)

    @cached_property
    def event(self):
        return EventCatalogService.get_upcoming_event()

    def dispatch(self, request, *args, **kwargs):
        if self.checkout is None:
            messages.warning(request, _('Your session has expired. Please start the registration process again.'))
            return redirect('registrations:start')
        return super().dispatch(request, *args, **kwargs)

    def get_form_class(self):
        if self.checkout['pricing'].amount_in_cents == 0:
            # Nothing to pay, so no card details needed either
            return forms.Form
        return PaymentForm

    def form_valid(self, form):
        try:
            order = PaymentService.pay(self.request.session, self.checkout)
        except forms.ValidationError as ex:
            messages.error(self.request, ' '.join(ex.messages))
            return self.form_invalid(form)

        RegistrationService.clear_checkout(self.request.session)
        if order['demo']:
            messages.warning(self.request, _('Payment was processed in demo mode, no actual payment was made.'))
        PaymentNotifyService.send_confirmation_email(self.request, order, self.event)
        return redirect('payments:success')

    def get_context_data(self, **kwargs):
        kwargs.update({
            'event': self.event,
            'registration': self.checkout['registration'],
            'pricing': self.checkout['pricing'],
        })
        return super().get_context_data(**kwargs)


class SuccessView(TemplateView):
    """ Confirmation of a completed registration and payment, only available in the session that completed it. """

    template_name = 'payments/success.html'

    def get_context_data(self, **kwargs):
        order = PaymentService.get_order(self.request.session)
        if order is None:
            raise Http404("No completed registration in this session")

        registration = order['registration']
        kwargs.update({
            'order': order,
            'registration': registration,
            'pricing': order['pricing'],
            'first_name': registration['full_name'].split(' ')[0],
            'event': EventCatalogService.get_upcoming_event(),
        })
        return super().get_context_data(**kwargs)
