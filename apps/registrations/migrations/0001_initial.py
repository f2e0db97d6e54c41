import uuid
from decimal import Decimal
from django.core.validators import MinValueValidator
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('camps', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Registration',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('email', models.EmailField(max_length=255)),
                ('camp_name', models.CharField(max_length=200)),
                ('fees', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=10, validators=[MinValueValidator(Decimal('0.00'))])),
                ('participant_name', models.CharField(blank=True, max_length=150)),
                ('age', models.PositiveSmallIntegerField(blank=True, null=True)),
                ('phone_number', models.CharField(blank=True, max_length=30)),
                ('gender', models.CharField(blank=True, max_length=20)),
                ('emergency_contact', models.CharField(blank=True, max_length=100)),
                ('payment_status', models.CharField(choices=[('unpaid', 'Unpaid'), ('paid', 'Paid')], default='unpaid', max_length=20)),
                ('confirmation_status', models.CharField(choices=[('pending', 'Pending'), ('confirmed', 'Confirmed')], default='pending', max_length=20)),
                ('registered_at', models.DateTimeField(auto_now_add=True)),
                ('camp', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='registrations', to='camps.camp')),
            ],
            options={
                'db_table': 'registered_camps',
                'ordering': ['-registered_at'],
                'indexes': [
                    models.Index(fields=['email', 'registered_at'], name='registration_email_idx'),
                    models.Index(fields=['registered_at'], name='registration_time_idx'),
                ],
            },
        ),
    ]
