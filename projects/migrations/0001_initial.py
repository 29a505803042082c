import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Project',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=255)),
                ('description', models.TextField()),
                ('tech_stack', models.CharField(max_length=255, validators=[django.core.validators.RegexValidator(message='Tech stack must be a list of technologies separated by ", ".', regex='^([\\w.+#-]+)(, [\\w.+#-]+)*$')])),
                ('team_size', models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(1)])),
                ('current_team_size', models.PositiveIntegerField(default=0)),
                ('duration_weeks', models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(1)])),
                ('content', models.TextField(blank=True)),
                ('status', models.CharField(choices=[('RECRUITING', 'Recruiting'), ('IN_PROGRESS', 'In progress'), ('COMPLETED', 'Completed')], default='RECRUITING', max_length=20)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('creator', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='projects', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Project',
                'verbose_name_plural': 'Projects',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['creator'], name='idx_project_creator')],
            },
        ),
    ]
