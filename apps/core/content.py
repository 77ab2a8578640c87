"""
Static content of the informational pages.

Unlike the event and speakers (see apps.events), this content is not managed by the event service.
"""
from dataclasses import dataclass, field

from django.db import models
from django.utils.translation import gettext_lazy as _


class FaqCategory(models.TextChoices):
    REGISTRATION = 'registration', _('Registration')
    PAYMENT = 'payment', _('Payment')
    TECHNICAL = 'technical', _('Technical')
    CERTIFICATES = 'certificates', _('Certificates')
    REFUNDS = 'refunds', _('Refunds')


@dataclass
class FaqEntry:
    category: str
    question: str
    answer: str

    def matches(self, query):
        query = query.lower()
        return query in self.question.lower() or query in self.answer.lower()


@dataclass
class ScheduleItem:
    time: str
    title: str
    speaker: str = ''
    topics: list = field(default_factory=list)

    @property
    def is_break(self):
        return not self.speaker


FAQ_ENTRIES = [
    FaqEntry(
        FaqCategory.REGISTRATION,
        'How do I register for the training session?',
        'Simply click the "Register Now" button on any page and complete the 4-step registration form. You\'ll '
        'receive a confirmation email with your access details immediately after successful payment.',
    ),
    FaqEntry(
        FaqCategory.REGISTRATION,
        'Can I register multiple attendees from my practice?',
        'Yes! We offer group discounts for 3 or more registrations from the same institution. Contact us at '
        'groups@ltdentalacademy.com for special pricing.',
    ),
    FaqEntry(
        FaqCategory.REGISTRATION,
        'Is early bird pricing available?',
        'Yes, we offer 20% off for registrations made 30 or more days before the event. The discount is '
        'automatically applied at checkout.',
    ),
    FaqEntry(
        FaqCategory.REGISTRATION,
        'Can I change my registration details after signing up?',
        'Yes, you can update your registration details up to 48 hours before the event by logging into your account '
        'or contacting our support team.',
    ),
    FaqEntry(
        FaqCategory.PAYMENT,
        'What payment methods do you accept?',
        'We accept all major credit cards (Visa, Mastercard, American Express), PayPal, and bank transfers. For '
        'institutional purchases, we can also provide invoicing options.',
    ),
    FaqEntry(
        FaqCategory.PAYMENT,
        'Is the payment secure?',
        'Absolutely. We use Stripe for payment processing, which is PCI DSS Level 1 certified, the highest level of '
        'payment security. Your card details are never stored on our servers.',
    ),
    FaqEntry(
        FaqCategory.PAYMENT,
        'Can I pay in installments?',
        'We currently don\'t offer installment plans. However, we recommend using a credit card that offers payment '
        'flexibility if needed.',
    ),
    FaqEntry(
        FaqCategory.TECHNICAL,
        'Where is the training session held?',
        'This is a live, in-person 12-hour training session. The venue details and full address will be shared via '
        'email after your registration is confirmed.',
    ),
    FaqEntry(
        FaqCategory.TECHNICAL,
        'What should I bring to the training session?',
        'Please bring a notebook for taking notes, your professional ID or registration confirmation, and any '
        'questions you have for our expert speakers. All training materials will be provided at the venue.',
    ),
    FaqEntry(
        FaqCategory.TECHNICAL,
        'Can I watch on multiple devices?',
        'Your registration allows access from one device at a time. If you need to switch devices during the event, '
        'simply log in from the new device.',
    ),
    FaqEntry(
        FaqCategory.TECHNICAL,
        'What if I experience technical difficulties during the event?',
        'Our tech support team will be available throughout the event via live chat. We also provide a technical '
        'support hotline number in your confirmation email.',
    ),
    FaqEntry(
        FaqCategory.CERTIFICATES,
        'Will I receive a certificate of completion?',
        'Yes! All attendees who complete the full 12-hour session receive a digital certificate. You can also opt '
        'for a printed, framed certificate for an additional $25.',
    ),
    FaqEntry(
        FaqCategory.CERTIFICATES,
        'How many CE credits does this course provide?',
        'This masterclass is approved for up to 12 CE credits. Credits are recognized by ADA CERP, AGD PACE, and '
        'most state dental boards.',
    ),
    FaqEntry(
        FaqCategory.CERTIFICATES,
        'When will I receive my certificate?',
        'Digital certificates are emailed within 48 hours of event completion. Printed certificates are shipped '
        'within 7-10 business days.',
    ),
    FaqEntry(
        FaqCategory.REFUNDS,
        'What is your refund policy?',
        'We offer a full refund if you cancel 14 or more days before the event. Cancellations within 14 days '
        'receive a 50% refund or full credit toward a future event.',
    ),
    FaqEntry(
        FaqCategory.REFUNDS,
        'What if the event is cancelled?',
        'In the unlikely event of cancellation, all registrants will receive a full refund within 5-7 business '
        'days.',
    ),
    FaqEntry(
        FaqCategory.REFUNDS,
        'Can I transfer my registration to someone else?',
        'Yes, registration transfers are allowed up to 48 hours before the event at no additional charge. Contact '
        'our support team to process the transfer.',
    ),
]


def search_faq(category=None, query=None):
    """
    Returns the FAQ entries to show.

    A non-empty query searches questions and answers of all categories (ignoring case) and overrides category.
    Otherwise, the entries of the given category are returned (registration if no category is given).
    """
    query = (query or '').strip()
    if query:
        return [entry for entry in FAQ_ENTRIES if entry.matches(query)]

    if category not in FaqCategory.values:
        category = FaqCategory.REGISTRATION
    return [entry for entry in FAQ_ENTRIES if entry.category == category]


SCHEDULE = [
    ScheduleItem('9:00 AM - 10:30 AM', 'Digital Dentistry Revolution', 'Dr. Aisha Patel',
                 ['CAD/CAM Workflow', 'Digital Smile Design', '3D Printing in Dentistry']),
    ScheduleItem('10:45 AM - 12:15 PM', 'Advanced Implantology', 'Dr. Sarah Mitchell',
                 ['Full-Arch Rehabilitation', 'Immediate Loading Protocols', 'Guided Surgery']),
    ScheduleItem('12:15 PM - 1:15 PM', 'Lunch Break & Networking'),
    ScheduleItem('1:15 PM - 2:45 PM', 'Microscopic Endodontics', 'Dr. James Chen',
                 ['Advanced Instrumentation', 'Retreatment Strategies', 'Apical Microsurgery']),
    ScheduleItem('3:00 PM - 4:30 PM', 'Regenerative Periodontics', 'Dr. Emily Rodriguez',
                 ['Growth Factors & PRF', 'Soft Tissue Grafting', 'Bone Regeneration']),
    ScheduleItem('4:45 PM - 6:15 PM', 'Complex Oral Surgery', 'Dr. Michael Thompson',
                 ['Orthognathic Surgery', '3D Surgical Planning', 'TMJ Disorders']),
    ScheduleItem('6:30 PM - 8:00 PM', 'Panel Discussion & Q&A', 'All Speakers',
                 ['Case Presentations', 'Live Q&A', 'Practice Management Tips']),
    ScheduleItem('8:00 PM', 'Networking Dinner (Optional)', '',
                 ['Meet the speakers', 'Network with peers']),
]

WHO_SHOULD_ATTEND = [
    (_('General Dentists'), _('Looking to expand their skill set')),
    (_('Specialists'), _('Seeking cutting-edge techniques')),
    (_('Dental Students'), _('Wanting exposure to advanced procedures')),
    (_('Practice Owners'), _('Aiming to differentiate their practice')),
]

LEARNING_OBJECTIVES = [
    _('Master the latest digital dentistry workflows and tools'),
    _('Learn advanced implant placement techniques with minimal complications'),
    _('Understand microscopic approaches to endodontic treatment'),
    _('Implement regenerative procedures in your practice'),
    _('Apply evidence-based protocols for complex cases'),
    _('Develop strategies for practice growth and patient retention'),
]
