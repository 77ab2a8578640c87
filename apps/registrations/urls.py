from django.urls import path

from . import views

app_name = 'registrations'
urlpatterns = [
    path('', views.RegistrationStart.as_view(), name="start"),
    path('personal/', views.RegistrationStepView.as_view(), name="step_personal_info"),
    path('preferences/', views.RegistrationStepView.as_view(), name="step_preferences"),
    path('extras/', views.RegistrationStepView.as_view(), name="step_extras"),
    path('review/', views.ReviewStep.as_view(), name="step_review"),
    path('start-over/', views.StartOver.as_view(), name="start_over"),
]
