import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional, TypedDict

from jose import jwt, JWTError, ExpiredSignatureError

from restaurant_api.core.errors import UnauthorizedError

# ==========================================================
# 🔧 Configuration : paramètres de génération/validation JWT
# ==========================================================

@dataclass(frozen=True)
class JWTSettings:
    """
    Configuration des tokens JWT.

    - `secret` : clé secrète pour signer/valider les tokens
    - `issuer` : émetteur (vérifié au décodage)
    - `algorithm` : algo de signature (HS256)
    - `access_ttl` : durée de vie d'un access token (24h par défaut)
    """
    secret: str
    issuer: str = "restaurant-api"
    algorithm: str = "HS256"
    access_ttl: timedelta = timedelta(hours=24)


# ==========================================================
# 🧱 Types
# ==========================================================

class TokenClaims(TypedDict, total=False):
    iss: str
    sub: str            # identifiant utilisateur
    email: str
    role: str           # "admin" | "user"
    typ: str            # "access"
    jti: str
    iat: int
    exp: int


# ==========================================================
# 🧩 Fonctions utilitaires
# ==========================================================

def _now() -> datetime:
    """Renvoie l'heure UTC actuelle."""
    return datetime.now(timezone.utc)

def new_jti() -> str:
    """Crée un identifiant unique pour un token."""
    return str(uuid.uuid4())


# ==========================================================
# 🎟️ Génération
# ==========================================================

def create_access_token(
    *,
    user_id: int,
    email: str,
    role: str,
    settings: JWTSettings,
    now: Optional[datetime] = None,
) -> str:
    """
    Crée un access token JWT signé embarquant id, email, rôle et expiration.
    """
    now = now or _now()
    payload: TokenClaims = {
        "iss": settings.issuer,
        "sub": str(user_id),
        "email": email,
        "role": role,
        "typ": "access",
        "jti": new_jti(),
        "iat": int(now.timestamp()),
        "exp": int((now + settings.access_ttl).timestamp()),
    }
    return jwt.encode(payload, settings.secret, algorithm=settings.algorithm)


# ==========================================================
# 🔍 Décodage / Validation
# ==========================================================

def decode_token(token: str, settings: JWTSettings) -> TokenClaims:
    """
    Décode et valide un token JWT (signature, émetteur, expiration, type).
    Lève UnauthorizedError sinon.
    """
    try:
        decoded = jwt.decode(
            token,
            settings.secret,
            algorithms=[settings.algorithm],
            issuer=settings.issuer,
            options={"verify_aud": False},
        )
    except ExpiredSignatureError:
        raise UnauthorizedError("Invalid or expired token", "Token has expired")
    except JWTError as e:
        raise UnauthorizedError("Invalid or expired token", str(e))

    if decoded.get("typ") != "access":
        raise UnauthorizedError("Invalid or expired token", "Invalid token type")
    if not str(decoded.get("sub", "")).isdigit():
        raise UnauthorizedError("Invalid or expired token", "Invalid subject")
    return decoded  # type: ignore[return-value]
