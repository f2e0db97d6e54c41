from django.urls import path
from . import views

app_name = 'feedbacks'

urlpatterns = [
    # GET  /feedbacks - List feedback (public)
    # POST /feedbacks - Leave feedback
    path('feedbacks', views.FeedbackView.as_view(), name='feedbacks'),
]
