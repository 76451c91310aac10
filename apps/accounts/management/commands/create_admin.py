"""
Management command to create an administrator account.

Usage:
    python manage.py create_admin --email admin@example.com --password secret --name "Ops"

Links record the admin that created them by its id. Admin accounts have no
public registration endpoint and are created here.
"""

from django.core.management.base import BaseCommand, CommandError

from apps.accounts.models import Admin


class Command(BaseCommand):
    help = 'Create an administrator account'

    def add_arguments(self, parser):
        parser.add_argument('--email', required=True)
        parser.add_argument('--password', required=True)
        parser.add_argument('--name', default='')

    def handle(self, *args, **options):
        email = options['email']
        if Admin.objects.filter(email__iexact=email).exists():
            raise CommandError(f"Admin with email {email} already exists")

        admin = Admin(email=email, name=options['name'])
        admin.set_password(options['password'])
        admin.save()

        self.stdout.write(self.style.SUCCESS(
            f"Created admin {admin.email} (admin_id={admin.admin_id})"
        ))
