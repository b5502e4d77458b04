"""
JWT Service
Issues and verifies signed access tokens.

The account service only ever calls sign(); verify() is used by the API
layer to resolve the bearer token of incoming requests.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from jose import JWTError, jwt

from podcast_api.core.config import settings
from podcast_api.schemas.user import TokenPayload


# Algorithm used for signing tokens (HS256 = HMAC with SHA-256)
ALGORITHM = "HS256"


class JwtService:
    """
    Token signer bound to a secret.

    Example:
        token = JwtService().sign(user.id)
        # Use in header: Authorization: Bearer {token}
    """

    def __init__(self, secret_key: Optional[str] = None, expiration: Optional[int] = None):
        self.secret_key = secret_key or settings.SECRET_KEY
        self.expiration = expiration if expiration is not None else settings.JWT_EXPIRATION

    def sign(self, user_id: Any) -> str:
        expire = datetime.now(timezone.utc) + timedelta(seconds=self.expiration)
        payload = {
            "sub": str(user_id),
            "exp": expire,
            "type": "access"
        }
        return jwt.encode(payload, self.secret_key, algorithm=ALGORITHM)

    def verify(self, token: str) -> Optional[TokenPayload]:
        """
        Verify and decode a token.

        Returns:
            TokenPayload if the signature, expiry and type are valid, None otherwise
        """
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[ALGORITHM])
        except JWTError:
            return None

        user_id = payload.get("sub")
        token_type = payload.get("type")
        exp = payload.get("exp")
        if not user_id or not exp or token_type != "access":
            return None

        return TokenPayload(sub=user_id, exp=exp, type=token_type)
