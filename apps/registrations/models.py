from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid


class PaymentStatus(models.TextChoices):
    UNPAID = 'unpaid', 'Unpaid'
    PAID = 'paid', 'Paid'


class ConfirmationStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    CONFIRMED = 'confirmed', 'Confirmed'


class Registration(models.Model):
    """A participant's registration for a camp."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    camp = models.ForeignKey(
        'camps.Camp',
        on_delete=models.PROTECT,
        related_name='registrations'
    )
    email = models.EmailField(max_length=255)

    # Camp snapshot at registration time
    camp_name = models.CharField(max_length=200)
    fees = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))]
    )

    # Participant details
    participant_name = models.CharField(max_length=150, blank=True)
    age = models.PositiveSmallIntegerField(null=True, blank=True)
    phone_number = models.CharField(max_length=30, blank=True)
    gender = models.CharField(max_length=20, blank=True)
    emergency_contact = models.CharField(max_length=100, blank=True)

    # Status pair, flipped together by a successful payment
    payment_status = models.CharField(
        max_length=20,
        choices=PaymentStatus.choices,
        default=PaymentStatus.UNPAID
    )
    confirmation_status = models.CharField(
        max_length=20,
        choices=ConfirmationStatus.choices,
        default=ConfirmationStatus.PENDING
    )

    registered_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'registered_camps'
        indexes = [
            models.Index(fields=['email', 'registered_at'], name='registration_email_idx'),
            models.Index(fields=['registered_at'], name='registration_time_idx'),
        ]
        ordering = ['-registered_at']

    def __str__(self):
        return f"{self.email} -> {self.camp_name} ({self.payment_status}/{self.confirmation_status})"

    @property
    def is_paid(self):
        return self.payment_status == PaymentStatus.PAID
