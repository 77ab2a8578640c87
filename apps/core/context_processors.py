from django.conf import settings


def site(request):
    """ Site-wide information used by the base template. """
    return {
        'site_title': settings.SITE_TITLE,
        'contact_details': settings.CONTACT_DETAILS,
        'privacy_policy_url': settings.PRIVACY_POLICY_URL,
        'terms_of_service_url': settings.TERMS_OF_SERVICE_URL,
    }
