import events.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Event',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(help_text='Display name of the event', max_length=200)),
                ('slug', models.SlugField(help_text='URL identifier derived from the title', max_length=255, unique=True)),
                ('description', models.TextField()),
                ('overview', models.TextField()),
                ('image', models.CharField(help_text='Reference to the event image', max_length=500)),
                ('venue', models.CharField(max_length=200)),
                ('location', models.CharField(max_length=200)),
                ('date', models.CharField(help_text='Calendar date as YYYY-MM-DD', max_length=10)),
                ('time', models.CharField(help_text='Start time as 24-hour HH:MM', max_length=5)),
                ('mode', models.CharField(choices=[('online', 'Online'), ('offline', 'Offline'), ('hybrid', 'Hybrid')], max_length=10)),
                ('audience', models.CharField(max_length=200)),
                ('agenda', models.JSONField(help_text='Ordered list of agenda items', validators=[events.validators.validate_string_list])),
                ('organizer', models.CharField(max_length=200)),
                ('tags', models.JSONField(validators=[events.validators.validate_string_list])),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Event',
                'verbose_name_plural': 'Events',
                'ordering': ['date', 'time'],
            },
        ),
    ]
