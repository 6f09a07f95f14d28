"""Erreurs de l'API, chacune liée à son code HTTP."""

from fastapi import HTTPException, status


class NotFound(HTTPException):
    """Enregistrement référencé introuvable."""

    def __init__(self, detail: str = "Not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class InvalidCredentials(HTTPException):
    """Mot de passe ne correspondant pas au hash enregistré."""

    def __init__(self, detail: str = "invalid credentials"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class Unauthenticated(HTTPException):
    """Token absent, ou refresh token invalide."""

    def __init__(self, detail: str = "unauthenticated"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class Forbidden(HTTPException):
    """Token présent mais rejeté (signature, expiration, format)."""

    def __init__(self, detail: str = "unauthenticated"):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class ServerError(HTTPException):
    """Échec inattendu du stockage ou du hachage. Le message brut est renvoyé."""

    def __init__(self, detail: str = "server error"):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)
