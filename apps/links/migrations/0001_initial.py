# Generated manually for links app

import uuid
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('accounts', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Link',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('title', models.CharField(default='Entry Form', max_length=200)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='links', to='accounts.admin', to_field='admin_id')),
            ],
            options={
                'db_table': 'links',
                'ordering': ['created_at', 'id'],
                'indexes': [models.Index(fields=['created_at', 'id'], name='links_created_id_idx')],
            },
        ),
    ]
