# Generated manually for entries app

import uuid
from decimal import Decimal
from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('links', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Entry',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=150)),
                ('upi_id', models.CharField(max_length=255)),
                ('amount', models.DecimalField(decimal_places=2, max_digits=12, validators=[MinValueValidator(Decimal('0.01'))])),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('employee', models.ForeignKey(db_constraint=False, on_delete=django.db.models.deletion.DO_NOTHING, related_name='entries', to=settings.AUTH_USER_MODEL, to_field='employee_id')),
                ('link', models.ForeignKey(db_constraint=False, on_delete=django.db.models.deletion.DO_NOTHING, related_name='entries', to='links.link')),
            ],
            options={
                'verbose_name_plural': 'entries',
                'db_table': 'entries',
                'ordering': ['created_at', 'id'],
                'indexes': [
                    models.Index(fields=['employee', 'link', 'created_at'], name='entries_emp_link_created_idx'),
                    models.Index(fields=['link', 'employee'], name='entries_link_emp_idx'),
                ],
                'constraints': [
                    models.UniqueConstraint(fields=('link', 'upi_id'), name='unique_upi_id_per_link'),
                ],
            },
        ),
    ]
