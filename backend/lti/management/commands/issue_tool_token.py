from django.core.management.base import BaseCommand, CommandError
from lti.models import DeveloperKey
from lti.tokens import ToolTokenHelper, TokenError


class Command(BaseCommand):
    help = 'Issue an LTI service access token for a developer key'

    def add_arguments(self, parser):
        parser.add_argument('--client-id', type=str, required=True, help='developer key client id')
        parser.add_argument('--scope', action='append', dest='scopes', help='scope to request; repeatable, defaults to all granted scopes')
        parser.add_argument('--exp-seconds', type=int, default=None, help='token lifetime')

    def handle(self, *args, **options):
        try:
            key = DeveloperKey.objects.get(client_id=options['client_id'], active=True)
        except DeveloperKey.DoesNotExist:
            raise CommandError(f"No active developer key with client id {options['client_id']}")

        requested = options.get('scopes') or list(key.scopes)
        denied = [s for s in requested if not key.grants(s)]
        if denied:
            raise CommandError(f"Scopes not granted to {key.name}: {', '.join(denied)}")

        try:
            token = ToolTokenHelper.create_token(key.client_id, scopes=requested, exp_seconds=options['exp_seconds'])
        except TokenError as e:
            raise CommandError(str(e))
        self.stdout.write(token)
