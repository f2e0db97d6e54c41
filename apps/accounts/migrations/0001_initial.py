import uuid
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='User',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('email', models.EmailField(max_length=255, unique=True)),
                ('name', models.CharField(blank=True, max_length=150)),
                ('photo', models.URLField(blank=True, max_length=500)),
                ('role', models.CharField(blank=True, choices=[('organizer', 'Organizer'), ('participant', 'Participant')], max_length=20, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('last_signin_time', models.DateTimeField(blank=True, null=True)),
            ],
            options={
                'db_table': 'users',
                'ordering': ['-created_at'],
            },
        ),
    ]
