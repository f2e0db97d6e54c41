from django.urls import path
from . import views

app_name = 'camps'

urlpatterns = [
    # GET  /camps                   - All camps (organizer)
    # POST /camps                   - Create camp (organizer)
    path('camps', views.camps, name='camps'),

    # Public listings
    path('camps/paginated', views.paginated_camps, name='paginated'),
    path('camps/popular', views.popular, name='popular'),
    path('camp-details/<str:camp_id>', views.camp_details, name='detail'),

    # Organizer management
    path('update-camp/<str:camp_id>', views.update_camp_view, name='update'),
    path('delete-camp/<str:camp_id>', views.delete_camp_view, name='delete'),
]
