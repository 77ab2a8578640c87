from django.conf import settings
from django.core.mail import EmailMessage
from django.template.loader import render_to_string


class ContactNotifyService:
    @staticmethod
    def send_contact_email(contact):
        """ Forward a (cleaned) contact form submission to the organizers, with reply-to set to the sender. """
        context = {'contact': contact}
        body = render_to_string('core/email/contact_message.txt', context)
        subject = render_to_string('core/email/contact_message_subject.txt', context).strip()
        subject = settings.EMAIL_SUBJECT_PREFIX + subject

        email = EmailMessage(
            body=body, subject=subject, to=settings.CONTACT_EMAIL_TO,
            reply_to=[contact['email']],
        )
        email.send()
