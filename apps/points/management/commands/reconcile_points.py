from django.core.management.base import BaseCommand, CommandError
from django.contrib.auth import get_user_model

from apps.points.models import PointsAccount
from apps.points.services import PointsService


class Command(BaseCommand):
    help = 'Report points accounts whose balance differs from the sum of their ledger entries'

    def add_arguments(self, parser):
        parser.add_argument(
            '--user-id',
            type=int,
            help='Reconcile a specific user ID only',
        )

    def handle(self, *args, **options):
        user_id = options.get('user_id')

        if user_id:
            User = get_user_model()
            try:
                user = User.objects.get(id=user_id)
            except User.DoesNotExist:
                raise CommandError(f'User with ID {user_id} not found')

            result = PointsService.reconcile(PointsService.get_or_create_account(user))
            if result['drift']:
                self.stdout.write(self.style.ERROR(
                    f"User {user.username}: balance {result['balance']} != ledger {result['ledger_total']}"
                ))
            else:
                self.stdout.write(self.style.SUCCESS(
                    f"User {user.username}: balance {result['balance']} matches ledger"
                ))
            return

        self.stdout.write('Reconciling all points accounts...')
        mismatches = list(PointsService.find_unreconciled(PointsAccount.objects.select_related('user')))

        for result in mismatches:
            self.stdout.write(self.style.ERROR(
                f"User {result['user_id']}: balance {result['balance']} != ledger {result['ledger_total']} "
                f"(drift {result['drift']:+d})"
            ))

        if mismatches:
            self.stdout.write(self.style.WARNING(f'{len(mismatches)} account(s) out of balance'))
        else:
            self.stdout.write(self.style.SUCCESS('All points accounts reconcile with the ledger'))
