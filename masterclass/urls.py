"""Masterclass URL Configuration.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/4.2/topics/http/urls/
"""
from django.urls import include, path

urlpatterns = [
    # Include urls of the apps
    path('', include('apps.core.urls')),
    path('dentists/', include('apps.events.urls')),
    path('register/', include('apps.registrations.urls')),
    path('payment/', include('apps.payments.urls')),
]
