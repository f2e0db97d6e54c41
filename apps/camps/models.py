from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid


class Camp(models.Model):
    """Medical camp listing."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    name = models.CharField(max_length=200)
    image = models.URLField(max_length=500, blank=True)
    fees = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    scheduled_at = models.DateTimeField(null=True, blank=True)
    location = models.CharField(max_length=255)
    healthcare_professional = models.CharField(max_length=150, blank=True)
    description = models.TextField(blank=True)

    # Live registrations, maintained by apps.registrations
    participant_count = models.PositiveIntegerField(default=0)

    # Email of the organizer who created the camp
    created_by = models.EmailField(max_length=255, blank=True)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'camps'
        indexes = [
            models.Index(fields=['created_at'], name='camps_created_idx'),
            models.Index(fields=['participant_count'], name='camps_participants_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.name} ({self.location})"
