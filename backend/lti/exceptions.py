from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError
from rest_framework.views import exception_handler


LINK_MISMATCH_MESSAGE = 'The specified LTI link ID is not associated with the line item.'


class PreconditionFailed(APIException):
    status_code = status.HTTP_412_PRECONDITION_FAILED
    default_detail = 'Precondition failed.'
    default_code = 'precondition_failed'


class Unauthorized(APIException):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = 'Unauthorized.'
    default_code = 'unauthorized'


def _flatten(detail, prefix=''):
    if isinstance(detail, dict):
        messages = []
        for field, value in detail.items():
            name = field if field != 'non_field_errors' else ''
            messages.extend(_flatten(value, f"{prefix}{name}: " if name else prefix))
        return messages
    if isinstance(detail, list):
        messages = []
        for value in detail:
            messages.extend(_flatten(value, prefix))
        return messages
    return [f"{prefix}{detail}"]


def lti_exception_handler(exc, context):
    """Render API errors as {"errors": {"message": ...}}."""
    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, ValidationError):
        message = '; '.join(_flatten(exc.detail))
    elif isinstance(getattr(exc, 'detail', None), str):
        message = str(exc.detail)
    elif isinstance(response.data, dict) and 'detail' in response.data:
        message = str(response.data['detail'])
    else:
        message = '; '.join(_flatten(response.data))

    response.data = {'errors': {'message': message}}
    return response
