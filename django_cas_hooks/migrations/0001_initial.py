from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='CASSetting',
            fields=[
                ('key', models.CharField(
                    max_length=100, primary_key=True, serialize=False)),
                ('value', models.JSONField()),
            ],
        ),
        migrations.CreateModel(
            name='LoginData',
            fields=[
                ('id', models.AutoField(
                    auto_created=True, primary_key=True, serialize=False,
                    verbose_name='ID')),
                ('session_key', models.CharField(max_length=40, unique=True)),
                ('ticket', models.CharField(blank=True, max_length=255)),
                ('created', models.DateTimeField(
                    db_index=True, default=django.utils.timezone.now)),
            ],
            options={
                'verbose_name_plural': 'login data',
            },
        ),
        migrations.CreateModel(
            name='CASUser',
            fields=[
                ('user', models.OneToOneField(
                    on_delete=django.db.models.deletion.CASCADE,
                    primary_key=True, serialize=False,
                    to=settings.AUTH_USER_MODEL)),
                ('cas_username', models.CharField(
                    db_index=True, max_length=255)),
            ],
            options={
                'permissions': [
                    ('administer_cas',
                     'Administer CAS settings and associations'),
                ],
            },
        ),
    ]
