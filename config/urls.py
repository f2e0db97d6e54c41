"""
URL configuration for the medical camp project.

Route paths are kept flat (``/camps``, ``/camp-registration`` ...) so the
existing single-page frontend can keep its route table.
"""
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from config.views import home, health_check

urlpatterns = [
    # Health checks
    path('', home, name='home'),
    path('api/health/', health_check, name='health-check'),

    # Admin
    path('admin/', admin.site.urls),

    # API Documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='api-schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='api-schema'), name='api-docs'),

    # API endpoints
    path('', include('apps.accounts.urls')),
    path('', include('apps.camps.urls')),
    path('', include('apps.registrations.urls')),
    path('', include('apps.payments.urls')),
    path('', include('apps.feedbacks.urls')),
]


# Custom error handlers
handler404 = 'config.views.error_404'
handler500 = 'config.views.error_500'
