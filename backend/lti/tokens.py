import hashlib
import time
import jwt
from cryptography.hazmat.primitives import serialization
from django.conf import settings
from .models import RevokedToken


class TokenError(Exception):
    pass


def _private_key():
    pem = getattr(settings, 'LTI_PRIVATE_KEY_PEM', None)
    if not pem:
        raise TokenError('LTI_PRIVATE_KEY_PEM not configured')
    return pem


def _public_key():
    pem = getattr(settings, 'LTI_PUBLIC_KEY_PEM', None)
    if pem:
        return pem
    # Fall back to the public half of the signing key
    private_pem = _private_key()
    if isinstance(private_pem, str):
        private_pem = private_pem.encode()
    key = serialization.load_pem_private_key(private_pem, password=None)
    return key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo
    )


def _issuer():
    return getattr(settings, 'LTI_TOKEN_ISSUER', 'https://lms.example.com')


def _audience():
    return getattr(settings, 'LTI_TOKEN_AUDIENCE', 'lti-services')


class ToolTokenHelper:
    """Issues and validates the bearer tokens tools present to the LTI service endpoints."""

    @staticmethod
    def create_token(client_id, scopes=None, exp_seconds=None, jti=None):
        now = int(time.time())
        if exp_seconds is None:
            exp_seconds = getattr(settings, 'LTI_TOKEN_TTL', 3600)
        payload = {
            'iss': _issuer(),
            'sub': client_id,
            'aud': _audience(),
            'scopes': ' '.join(scopes or []),
            'iat': now,
            'exp': now + exp_seconds,
            'jti': jti or hashlib.sha1(f"{client_id}{now}{time.perf_counter_ns()}".encode()).hexdigest()
        }
        return jwt.encode(payload, _private_key(), algorithm='RS256')

    @staticmethod
    def validate_token(token, check_revoked=True):
        try:
            payload = jwt.decode(
                token,
                _public_key(),
                algorithms=['RS256'],
                audience=_audience(),
                issuer=_issuer(),
                options={'require': ['exp', 'sub', 'jti']},
            )
        except jwt.PyJWTError as e:
            raise TokenError(str(e)) from e
        if check_revoked and RevokedToken.objects.filter(jti=payload['jti']).exists():
            raise TokenError('token_revoked')
        return payload

    @staticmethod
    def scopes(payload):
        return set((payload.get('scopes') or '').split())
