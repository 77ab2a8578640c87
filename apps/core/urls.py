from django.urls import path

from . import views

app_name = 'core'
urlpatterns = [
    path('', views.Home.as_view(), name='home'),
    path('about/', views.About.as_view(), name='about'),
    path('faq/', views.Faq.as_view(), name='faq'),
    path('contact/', views.Contact.as_view(), name='contact'),
    path('privacy/', views.PrivacyPolicy.as_view(), name='privacy_policy'),
    path('terms/', views.TermsOfService.as_view(), name='terms_of_service'),
]
