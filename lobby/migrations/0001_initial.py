import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Region',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100)),
                ('slug', models.CharField(max_length=2, unique=True, validators=[django.core.validators.RegexValidator('^\\w{2}$', "Region slugs are two letters, e.g. 'zh'.")])),
            ],
            options={
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Politician',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('first_name', models.CharField(max_length=100)),
                ('last_name', models.CharField(max_length=100)),
                ('slug', models.CharField(max_length=150, unique=True, validators=[django.core.validators.RegexValidator('^[\\w.-]+$')])),
                ('politician_type', models.CharField(choices=[('national_council', 'National Council'), ('council_of_states', 'Council of States'), ('cantonal', 'Cantonal Parliament')], default='national_council', max_length=30)),
                ('party', models.CharField(blank=True, max_length=100, null=True)),
                ('email', models.EmailField(blank=True, max_length=254, null=True)),
                ('image_url', models.URLField(blank=True, null=True)),
                ('regions', models.ManyToManyField(blank=True, related_name='politicians', to='lobby.region')),
            ],
            options={
                'ordering': ['last_name', 'first_name'],
            },
        ),
        migrations.CreateModel(
            name='Campaign',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200)),
                ('slug', models.CharField(max_length=100, unique=True, validators=[django.core.validators.RegexValidator('^[\\w-]+$')])),
                ('description', models.TextField(blank=True, null=True)),
                ('politician_type', models.CharField(choices=[('national_council', 'National Council'), ('council_of_states', 'Council of States'), ('cantonal', 'Cantonal Parliament')], default='national_council', max_length=30)),
                ('is_active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('regions', models.ManyToManyField(blank=True, related_name='campaigns', to='lobby.region')),
            ],
        ),
        migrations.CreateModel(
            name='Argument',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('text', models.TextField()),
                ('display_order', models.PositiveIntegerField(default=0)),
                ('campaign', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='arguments', to='lobby.campaign')),
            ],
            options={
                'ordering': ['display_order', 'id'],
            },
        ),
        migrations.CreateModel(
            name='Person',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('email', models.EmailField(max_length=254, unique=True)),
                ('first_name', models.CharField(max_length=100)),
                ('last_name', models.CharField(max_length=100)),
                ('city', models.CharField(max_length=100)),
                ('language', models.CharField(blank=True, max_length=10, null=True)),
                ('confirmed', models.BooleanField(default=False)),
                ('confirmation_token', models.CharField(blank=True, max_length=100, null=True, unique=True)),
                ('confirmation_expires', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
        ),
        migrations.CreateModel(
            name='CampaignEntry',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('opt_in_information', models.BooleanField(default=False)),
                ('confirmed', models.BooleanField(default=False)),
                ('color', models.CharField(blank=True, max_length=7)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('argument', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='entries', to='lobby.argument')),
                ('campaign', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='entries', to='lobby.campaign')),
                ('person', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='entries', to='lobby.person')),
                ('politician', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='entries', to='lobby.politician')),
            ],
            options={
                'verbose_name_plural': 'Campaign entries',
                'unique_together': {('person', 'campaign', 'politician', 'argument')},
            },
        ),
        migrations.CreateModel(
            name='WipCount',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('status', models.IntegerField(default=0)),
                ('voted', models.IntegerField(blank=True, null=True)),
                ('campaign', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='wip_counts', to='lobby.campaign')),
                ('politician', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='wip_counts', to='lobby.politician')),
            ],
            options={
                'unique_together': {('campaign', 'politician')},
            },
        ),
    ]
