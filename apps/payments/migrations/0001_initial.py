import uuid
from decimal import Decimal
from django.core.validators import MinValueValidator
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('camps', '0001_initial'),
        ('registrations', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Payment',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('camp_name', models.CharField(blank=True, max_length=200)),
                ('email', models.EmailField(max_length=255)),
                ('amount', models.DecimalField(decimal_places=2, max_digits=10, validators=[MinValueValidator(Decimal('0.01'))])),
                ('currency', models.CharField(default='usd', max_length=3)),
                ('payment_method', models.CharField(blank=True, max_length=50)),
                ('transaction_id', models.CharField(blank=True, max_length=255)),
                ('paid_at', models.DateTimeField(auto_now_add=True)),
                ('camp', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='payments', to='camps.camp')),
                ('registration', models.OneToOneField(on_delete=django.db.models.deletion.PROTECT, related_name='payment', to='registrations.registration')),
            ],
            options={
                'db_table': 'payments',
                'ordering': ['-paid_at'],
                'indexes': [
                    models.Index(fields=['email', 'paid_at'], name='payment_email_idx'),
                ],
            },
        ),
    ]
