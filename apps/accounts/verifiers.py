"""
Identity verifiers.

A verifier turns the bearer credential of a request into a
``VerifiedIdentity`` or raises ``InvalidCredentialError``. Which verifier
is used is controlled by the ``IDENTITY_VERIFIER`` setting:

    FirebaseIdentityVerifier   - Firebase ID tokens issued to the frontend
    SimpleJWTIdentityVerifier  - locally signed JWTs (development, tests)
"""
import base64
import json
import logging
from dataclasses import dataclass, field
from functools import lru_cache

import firebase_admin
from firebase_admin import auth as firebase_auth, credentials
from firebase_admin.exceptions import FirebaseError
from django.conf import settings
from django.utils.module_loading import import_string
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import AccessToken

logger = logging.getLogger(__name__)


class InvalidCredentialError(Exception):
    """Raised when a credential is malformed, expired or otherwise rejected."""
    pass


@dataclass(frozen=True)
class VerifiedIdentity:
    """Identity attached to ``request.user`` once the credential checks out."""

    email: str
    claims: dict = field(default_factory=dict, compare=False)

    is_authenticated = True
    is_anonymous = False

    def __str__(self):
        return self.email


class BaseIdentityVerifier:

    def verify(self, credential: str) -> VerifiedIdentity:
        raise NotImplementedError

    def _identity_from_claims(self, claims) -> VerifiedIdentity:
        email = claims.get('email')
        if not email:
            raise InvalidCredentialError("Credential carries no email claim")
        return VerifiedIdentity(email=email, claims=dict(claims))


class FirebaseIdentityVerifier(BaseIdentityVerifier):
    """Verify Firebase ID tokens with the Admin SDK."""

    def __init__(self):
        self._app = None

    def _get_app(self):
        if self._app is None:
            try:
                self._app = firebase_admin.get_app()
            except ValueError:
                # Default app not initialized yet
                service_account = json.loads(
                    base64.b64decode(settings.FB_ADMIN_SERVICE_KEY).decode('utf-8')
                )
                self._app = firebase_admin.initialize_app(
                    credentials.Certificate(service_account)
                )
        return self._app

    def verify(self, credential: str) -> VerifiedIdentity:
        # Misconfiguration of the service key is a server error, not a bad credential
        app = self._get_app()
        try:
            claims = firebase_auth.verify_id_token(credential, app=app)
        except (ValueError, FirebaseError) as e:
            raise InvalidCredentialError(str(e)) from e
        return self._identity_from_claims(claims)


class SimpleJWTIdentityVerifier(BaseIdentityVerifier):
    """Verify access tokens signed with this deployment's ``SECRET_KEY``."""

    def verify(self, credential: str) -> VerifiedIdentity:
        try:
            token = AccessToken(credential)
        except TokenError as e:
            raise InvalidCredentialError(str(e)) from e
        return self._identity_from_claims(token.payload)


def issue_access_token(email: str) -> str:
    """Mint a credential accepted by ``SimpleJWTIdentityVerifier``."""
    token = AccessToken()
    token['email'] = email
    return str(token)


@lru_cache(maxsize=None)
def _load_verifier(path):
    return import_string(path)()


def get_identity_verifier() -> BaseIdentityVerifier:
    """Return the configured verifier (one instance per dotted path)."""
    return _load_verifier(settings.IDENTITY_VERIFIER)
