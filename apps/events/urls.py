from django.urls import path

from . import views

app_name = 'events'
urlpatterns = [
    path('', views.SpeakerList.as_view(), name='speakers'),
    path('<str:speaker_id>/', views.SpeakerDetail.as_view(), name='speaker'),
]
