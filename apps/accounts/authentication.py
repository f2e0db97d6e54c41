"""
Bearer credential authentication.

Reads ``Authorization: Bearer <credential>`` and hands the credential to
the configured identity verifier. No credential means the request stays
anonymous (answered with 401 by guarded views); a credential the verifier
rejects is answered with 403.
"""
import logging

from rest_framework import exceptions
from rest_framework.authentication import BaseAuthentication, get_authorization_header

from .verifiers import InvalidCredentialError, get_identity_verifier

logger = logging.getLogger(__name__)


class ForbiddenAccess(exceptions.PermissionDenied):
    default_detail = 'forbidden access'
    default_code = 'forbidden_access'


class BearerIdentityAuthentication(BaseAuthentication):
    keyword = 'Bearer'

    def authenticate(self, request):
        parts = get_authorization_header(request).split()

        if not parts or parts[0].lower() != self.keyword.lower().encode():
            return None
        if len(parts) != 2:
            return None

        try:
            credential = parts[1].decode()
        except UnicodeError:
            raise ForbiddenAccess()

        try:
            identity = get_identity_verifier().verify(credential)
        except InvalidCredentialError as e:
            logger.info("Rejected bearer credential: %s", e)
            raise ForbiddenAccess()

        return identity, credential

    def authenticate_header(self, request):
        return self.keyword
