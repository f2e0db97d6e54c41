from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
from django.utils import timezone
import uuid


class Feedback(models.Model):
    """Feedback left by a participant. Append-only."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    email = models.EmailField(max_length=255)
    name = models.CharField(max_length=150, blank=True)
    photo = models.URLField(max_length=500, blank=True)

    rating = models.PositiveSmallIntegerField(
        null=True,
        blank=True,
        validators=[MinValueValidator(1), MaxValueValidator(5)]
    )
    content = models.TextField()

    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'feedbacks'
        ordering = ['-created_at']

    def __str__(self):
        return f"Feedback from {self.email}"
