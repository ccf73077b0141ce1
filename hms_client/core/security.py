from datetime import datetime, timezone
from typing import Dict, Optional, Protocol
from pathlib import Path
from jose import JWTError, jwt
from pydantic import BaseModel
import json
import logging

from .config import settings

logger = logging.getLogger(__name__)


class TokenPayload(BaseModel):
    sub: Optional[str] = None
    email: Optional[str] = None
    exp: Optional[int] = None


# Token storage
class TokenStore(Protocol):
    def get(self) -> Optional[str]: ...

    def set(self, token: str) -> None: ...

    def clear(self) -> None: ...


class InMemoryTokenStore:
    def __init__(self, token: Optional[str] = None):
        self._token = token

    def get(self) -> Optional[str]:
        return self._token

    def set(self, token: str) -> None:
        self._token = token

    def clear(self) -> None:
        self._token = None


class FileTokenStore:
    """Keeps the token in a small JSON file, keyed like browser local storage."""

    def __init__(self, path: str, key: str = settings.TOKEN_STORAGE_KEY):
        self.path = Path(path).expanduser()
        self.key = key

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text())
        except (OSError, ValueError) as e:
            logger.error(f"Unreadable token storage {self.path}: {str(e)}")
            return {}
        if not isinstance(data, dict):
            logger.error(f"Token storage {self.path} does not hold an object")
            return {}
        return data

    def _write(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data))

    def get(self) -> Optional[str]:
        return self._read().get(self.key)

    def set(self, token: str) -> None:
        data = self._read()
        data[self.key] = token
        self._write(data)

    def clear(self) -> None:
        data = self._read()
        if data.pop(self.key, None) is not None:
            self._write(data)


# Token utilities
def read_token_payload(token: str) -> Optional[TokenPayload]:
    """Decode JWT claims without verification. Returns None for opaque tokens."""
    try:
        claims = jwt.get_unverified_claims(token)
    except JWTError:
        return None
    return TokenPayload(
        sub=str(claims["sub"]) if claims.get("sub") is not None else None,
        email=claims.get("email"),
        exp=claims.get("exp"),
    )


def is_token_expired(token: str, now: Optional[datetime] = None) -> bool:
    payload = read_token_payload(token)
    if not payload or payload.exp is None:
        return False
    now = now or datetime.now(timezone.utc)
    return payload.exp <= int(now.timestamp())


class SessionContext:
    """Explicit holder of the login state shared by the views."""

    def __init__(self, token_store: TokenStore):
        self.token_store = token_store

    @property
    def token(self) -> Optional[str]:
        return self.token_store.get()

    def is_authenticated(self) -> bool:
        token = self.token
        if not token:
            return False
        if is_token_expired(token):
            logger.info("Stored token has expired")
            return False
        return True

    def sign_in(self, token: str) -> None:
        self.token_store.set(token)

    def sign_out(self) -> None:
        self.token_store.clear()


def create_token_store() -> TokenStore:
    if settings.uses_persistent_tokens:
        return FileTokenStore(settings.TOKEN_FILE, settings.TOKEN_STORAGE_KEY)
    return InMemoryTokenStore()
