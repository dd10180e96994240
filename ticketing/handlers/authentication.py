"""Authentication of the caller identity.

The auth gateway in front of this service verifies the caller and injects the
principal into a trusted header. The gateway must strip any client-supplied
copy of that header.
"""

from django.conf import settings
from rest_framework.authentication import BaseAuthentication
from rest_framework.exceptions import AuthenticationFailed
from rest_framework.request import Request

from ticketing.domain import Identity
from ticketing.services import CallerContext


class Principal(CallerContext):
    """Authenticated caller attached to ``request.user``."""

    is_authenticated = True
    is_anonymous = False

    def __init__(self, identity: Identity) -> None:
        self.identity = identity

    def current_caller(self) -> Identity:
        return self.identity

    def __str__(self) -> str:
        return self.identity.value


def principal_meta_key() -> str:
    header = settings.TICKETING["PRINCIPAL_HEADER"]
    return "HTTP_" + header.upper().replace("-", "_")


class TrustedHeaderAuthentication(BaseAuthentication):
    """Read the gateway-verified principal from the request headers."""

    def authenticate(self, request: Request) -> tuple[Principal, None] | None:
        raw = request.META.get(principal_meta_key(), "")
        if not raw:
            return None
        try:
            identity = Identity(raw.strip())
        except ValueError as exc:
            raise AuthenticationFailed("Invalid principal") from exc
        return Principal(identity), None

    def authenticate_header(self, request: Request) -> str:
        return settings.TICKETING["PRINCIPAL_HEADER"]
