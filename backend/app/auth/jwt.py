"""
Vérification des tokens JWT émis par le fournisseur de session
"""
from datetime import datetime, timedelta
from typing import Optional, Dict, Any
from jose import JWTError, jwt
from fastapi import HTTPException, status
from pydantic import BaseModel

from app.core.settings import get_settings

settings = get_settings()


class TokenData(BaseModel):
    """Données contenues dans un token"""
    user_id: str
    email: Optional[str] = None
    exp: Optional[datetime] = None


class JWTManager:
    """Gestionnaire des tokens JWT"""

    def __init__(self):
        self.secret_key = settings.JWT_SECRET_KEY
        self.algorithm = settings.JWT_ALGORITHM

    def create_access_token(self, data: Dict[str, Any], expires_minutes: int = 30) -> str:
        """Crée un access token JWT (outillage de dev et tests)"""
        to_encode = data.copy()
        expire = datetime.utcnow() + timedelta(minutes=expires_minutes)
        to_encode.update({"exp": expire, "type": "access"})

        encoded_jwt = jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)
        return encoded_jwt

    def verify_token(self, token: str, token_type: str = "access") -> TokenData:
        """Vérifie et décode un token JWT"""
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])

            # Vérifier le type de token
            if payload.get("type", token_type) != token_type:
                raise HTTPException(
                    status_code=status.HTTP_401_UNAUTHORIZED,
                    detail=f"Invalid token type. Expected {token_type}"
                )

            user_id: str = payload.get("sub")
            if user_id is None:
                raise HTTPException(
                    status_code=status.HTTP_401_UNAUTHORIZED,
                    detail="Invalid token payload"
                )

            exp = payload.get("exp")
            return TokenData(
                user_id=str(user_id),
                email=payload.get("email"),
                exp=datetime.fromtimestamp(exp) if exp else None,
            )

        except JWTError:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Could not validate credentials"
            )


# Instance globale
jwt_manager = JWTManager()


def get_current_user_id(token: str) -> str:
    """Extrait l'ID utilisateur du token (pour dependency injection)"""
    token_data = jwt_manager.verify_token(token)
    return token_data.user_id
