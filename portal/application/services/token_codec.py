"""Token codec — issues and verifies signed, 24h bearer tokens."""

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from jose import JWTError, jwt

from portal.domain.principal import RoleTag, TokenClaims

TOKEN_LIFETIME = timedelta(hours=24)


class TokenError(Exception):
    """Base for the two ways verification can fail."""


class InvalidSignature(TokenError):
    """Tampered, garbled, or signed with another secret."""


class Expired(TokenError):
    """Signature checks out but ``exp`` is in the past."""


class TokenCodec:
    """Signs claims with a secret handed in at construction.

    Changing the secret invalidates every token issued under the old one.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        clock: Optional[Callable[[], datetime]] = None,
    ):
        if not secret:
            raise ValueError("token signing secret must not be empty")
        self._secret = secret
        self._algorithm = algorithm
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def issue(self, principal_id: str, login_identifier: str, role: RoleTag) -> str:
        now = self._clock()
        payload = {
            "sub": str(principal_id),
            "login": login_identifier,
            "role": RoleTag(role).value,
            "iat": int(now.timestamp()),
            "exp": int((now + TOKEN_LIFETIME).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenClaims:
        try:
            # exp is checked below against the injected clock
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"verify_exp": False},
            )
        except JWTError as exc:
            raise InvalidSignature(str(exc)) from exc

        try:
            claims = TokenClaims(
                principal_id=str(payload["sub"]),
                login_identifier=str(payload["login"]),
                role=RoleTag(payload["role"]),
                issued_at=datetime.fromtimestamp(int(payload["iat"]), tz=timezone.utc),
                expires_at=datetime.fromtimestamp(int(payload["exp"]), tz=timezone.utc),
            )
        except (KeyError, TypeError, ValueError, OverflowError, OSError) as exc:
            raise InvalidSignature(f"malformed claims: {exc}") from exc

        if claims.expires_at <= self._clock():
            raise Expired(f"token expired at {claims.expires_at.isoformat()}")
        return claims
