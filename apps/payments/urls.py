from django.urls import path
from . import views

app_name = 'payments'

urlpatterns = [
    # POST /create-payment-intent    - Get a client secret from the provider
    # GET  /payments?email=          - Payment history
    # POST /payments                 - Record a completed payment
    path('create-payment-intent', views.payment_intent, name='intent'),
    path('payments', views.payments, name='payments'),
]
