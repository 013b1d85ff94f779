import logging
from rest_framework.authentication import BaseAuthentication, get_authorization_header
from rest_framework.exceptions import AuthenticationFailed
from .models import DeveloperKey
from .tokens import ToolTokenHelper, TokenError

logger = logging.getLogger(__name__)


class ToolTokenAuthentication(BaseAuthentication):
    """
    Bearer token authentication for LTI tools.

    On success request.user is the tool's DeveloperKey and request.auth the
    decoded token payload.
    """
    keyword = 'Bearer'

    def authenticate(self, request):
        auth = get_authorization_header(request).split()
        if not auth or auth[0].lower() != self.keyword.lower().encode():
            return None
        if len(auth) != 2:
            raise AuthenticationFailed('Invalid bearer token header.')

        try:
            token = auth[1].decode()
            payload = ToolTokenHelper.validate_token(token)
        except (UnicodeError, TokenError) as e:
            logger.warning('Rejected tool token: %s', e)
            raise AuthenticationFailed('Invalid access token.')

        key = DeveloperKey.objects.filter(client_id=payload['sub'], active=True).first()
        if key is None:
            logger.warning('Rejected tool token for unknown client %s', payload['sub'])
            raise AuthenticationFailed('Unknown or inactive client.')
        return key, payload

    def authenticate_header(self, request):
        return f'{self.keyword} realm="lti"'
