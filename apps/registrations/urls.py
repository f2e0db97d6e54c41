from django.urls import path
from . import views

app_name = 'registrations'

urlpatterns = [
    # POST   /camp-registration                      - Register for a camp
    # GET    /camps-registered                       - All registrations (organizer)
    # GET    /registered-camps?email=                - A participant's registrations
    # GET    /registered-camp/{id}                   - One registration
    # DELETE /cancel-registration/{id}?camp_id=      - Cancel a registration
    path('camp-registration', views.camp_registration, name='create'),
    path('camps-registered', views.all_registrations, name='list-all'),
    path('registered-camps', views.registered_camps, name='list-mine'),
    path('registered-camp/<str:registration_id>', views.registered_camp, name='detail'),
    path('cancel-registration/<str:registration_id>', views.cancel_registration_view, name='cancel'),
]
