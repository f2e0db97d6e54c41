from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid


class Payment(models.Model):
    """
    A completed payment for one registration.

    Append-only. Exactly one payment exists per paid registration.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    registration = models.OneToOneField(
        'registrations.Registration',
        on_delete=models.PROTECT,
        related_name='payment'
    )
    camp = models.ForeignKey(
        'camps.Camp',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='payments'
    )

    # Snapshot at payment time
    camp_name = models.CharField(max_length=200, blank=True)
    email = models.EmailField(max_length=255)
    amount = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    currency = models.CharField(max_length=3, default='usd')

    payment_method = models.CharField(max_length=50, blank=True)
    transaction_id = models.CharField(max_length=255, blank=True)

    paid_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'payments'
        indexes = [
            models.Index(fields=['email', 'paid_at'], name='payment_email_idx'),
        ]
        ordering = ['-paid_at']

    def __str__(self):
        return f"{self.email} paid {self.amount} {self.currency} for {self.camp_name}"
