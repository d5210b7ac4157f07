"""
Token service for JWT issuance and verification.

Tokens are HS256-signed identity assertions that always expire. There is no
server-side revocation: a token stays valid until its expiry even if the
identity it names has been removed.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

from src.errors import InvalidTokenError, MissingTokenError


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """
    Extract the token from an Authorization header.

    Args:
        authorization: Raw header value, e.g. "Bearer <token>"

    Returns:
        The token, or None if the header is absent, has no token part, or
        uses a scheme other than Bearer
    """
    if not authorization:
        return None

    parts = authorization.split()

    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None

    return parts[1]


class TokenService:
    """Handle JWT issuance and verification."""

    def __init__(self, secret: str, algorithm: str = "HS256",
                 expires_in: timedelta = timedelta(hours=24)):
        """
        Initialize the token service.

        Args:
            secret: Shared signing secret
            algorithm: JWT signing algorithm (default: "HS256")
            expires_in: Token lifetime (default: 24 hours)

        Raises:
            ValueError: If the secret is empty or the lifetime is not positive
        """
        if not secret:
            raise ValueError("A signing secret is required")
        if expires_in <= timedelta(0):
            raise ValueError("Token lifetime must be positive")
        self.secret = secret
        self.algorithm = algorithm
        self.expires_in = expires_in

    def issue(self, claims: Dict[str, Any]) -> str:
        """
        Sign a claims payload with issue and expiry times attached.

        Args:
            claims: Identity claims (id, username, role)

        Returns:
            Encoded JWT string
        """
        now = datetime.now(timezone.utc)
        payload = dict(claims)
        payload.update({
            "iat": int(now.timestamp()),
            "exp": int((now + self.expires_in).timestamp()),
        })
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: Optional[str]) -> Dict[str, Any]:
        """
        Decode and validate a token.

        Args:
            token: Encoded JWT, or None when the request carried none

        Returns:
            The decoded claims

        Raises:
            MissingTokenError: If no token was supplied
            InvalidTokenError: If the token is malformed, badly signed, or expired
        """
        if not token:
            raise MissingTokenError()

        try:
            return jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError as exc:
            raise InvalidTokenError("Invalid or expired token") from exc
        except jwt.InvalidTokenError as exc:
            raise InvalidTokenError("Invalid or expired token") from exc
