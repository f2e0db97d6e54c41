import uuid
from decimal import Decimal
from django.core.validators import MinValueValidator
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Camp',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=200)),
                ('image', models.URLField(blank=True, max_length=500)),
                ('fees', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=10, validators=[MinValueValidator(Decimal('0.00'))])),
                ('scheduled_at', models.DateTimeField(blank=True, null=True)),
                ('location', models.CharField(max_length=255)),
                ('healthcare_professional', models.CharField(blank=True, max_length=150)),
                ('description', models.TextField(blank=True)),
                ('participant_count', models.PositiveIntegerField(default=0)),
                ('created_by', models.EmailField(blank=True, max_length=255)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'camps',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['created_at'], name='camps_created_idx'),
                    models.Index(fields=['participant_count'], name='camps_participants_idx'),
                ],
            },
        ),
    ]
