"""
Utilitaires partages entre les routers API.
"""
import logging
from typing import Optional
from uuid import UUID

from fastapi import Request, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from slowapi import Limiter
from slowapi.util import get_remote_address
from jose import JWTError, jwt as jose_jwt

from app.core.settings import get_settings

logger = logging.getLogger(__name__)

_bearer_scheme = HTTPBearer(auto_error=False)


async def security(request: Request) -> HTTPAuthorizationCredentials:
    """Extrait le JWT du header Authorization: Bearer <token>."""
    creds = await _bearer_scheme(request)
    if creds:
        return creds

    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not authenticated",
        headers={"WWW-Authenticate": "Bearer"},
    )


def _get_user_or_ip(request: Request) -> str:
    """Key function pour le rate limiter : retourne le user_id JWT si present, sinon l'IP."""
    auth_header = request.headers.get("Authorization", "")
    if auth_header.startswith("Bearer "):
        try:
            settings = get_settings()
            payload = jose_jwt.decode(
                auth_header[7:], settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM]
            )
            user_id = payload.get("sub")
            if user_id:
                return f"user:{user_id}"
        except JWTError:
            pass
    return get_remote_address(request)


limiter = Limiter(
    key_func=_get_user_or_ip,
    default_limits=["100/minute"],
    headers_enabled=True,
    enabled=get_settings().RATE_LIMIT_ENABLED,
)


def parse_uuid(raw: str) -> Optional[UUID]:
    """Identifiant opaque du chemin ; None s'il n'est pas un UUID (traite comme introuvable)."""
    try:
        return UUID(raw)
    except (ValueError, TypeError):
        return None


def not_found(entity: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{entity} not found")
