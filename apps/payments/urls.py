from django.urls import path

from . import views

app_name = 'payments'
urlpatterns = [
    path('', views.PaymentView.as_view(), name='payment'),
    path('success/', views.SuccessView.as_view(), name='success'),
]
