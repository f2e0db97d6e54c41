from django.db import models
import uuid


class Role(models.TextChoices):
    ORGANIZER = 'organizer', 'Organizer'
    PARTICIPANT = 'participant', 'Participant'


class User(models.Model):
    """
    Application user keyed by the email of the verified identity.

    Not the Django auth user: nobody signs in with a password here, the
    bearer credential is checked by the identity verifier and the email it
    yields is looked up in this table.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(unique=True, max_length=255)
    name = models.CharField(max_length=150, blank=True)
    photo = models.URLField(max_length=500, blank=True)

    # Unset means participant
    role = models.CharField(
        max_length=20,
        choices=Role.choices,
        null=True,
        blank=True
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    last_signin_time = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'users'
        ordering = ['-created_at']

    def __str__(self):
        return self.email

    @property
    def effective_role(self):
        return self.role or Role.PARTICIPANT

    @property
    def is_organizer(self):
        return self.effective_role == Role.ORGANIZER
