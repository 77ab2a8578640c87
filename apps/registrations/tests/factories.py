import factory

from ..constants import AccommodationType, CertificateType, FoodPreference, Profession


class PersonalInfoDataFactory(factory.DictFactory):
    """ Valid data for the personal info step (as posted, or as stored in the draft). """

    full_name = factory.Faker('name')
    email = factory.Faker('email')
    country_code = '+1'
    phone = '2025550143'
    country = 'United States'
    profession = Profession.DENTIST.value
    experience_years = 10
    license_number = ''


class PreferencesDataFactory(factory.DictFactory):
    accommodation_type = AccommodationType.NONE.value
    food_preference = FoodPreference.HALAL.value
    dietary_restrictions = ''


class ExtrasDataFactory(factory.DictFactory):
    certificate_type = CertificateType.DIGITAL.value
    materials_kit = False
    networking_dinner = False
    promo_code = ''


def make_draft(personal_info=None, preferences=None, extras=None, **kwargs):
    """
    Build a complete registration draft, as stored in the session. Keyword arguments override data of any step.
    """
    def step(factory_class, data):
        values = factory_class(**(data or {}))
        values.update({k: v for k, v in kwargs.items() if k in values})
        return values

    return {
        'personal_info': step(PersonalInfoDataFactory, personal_info),
        'preferences': step(PreferencesDataFactory, preferences),
        'extras': step(ExtrasDataFactory, extras),
    }


def post_data(data):
    """ Convert stored data to what a browser would post (i.e. omit unchecked checkboxes). """
    return {k: v for k, v in data.items() if v is not False}
