from pydantic import BaseModel, Field

# --- 1. ENTRÉE : INSCRIPTION ---
class UserCreate(BaseModel):
    username: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    password: str = Field(..., min_length=1)

# --- 2. SORTIE : PROJECTION PUBLIQUE (jamais le mot de passe ni le hash) ---
class UserResponse(BaseModel):
    id: str
    username: str
    email: str

    class Config:
        from_attributes = True

# --- 3. CONNEXION ---
class LoginRequest(BaseModel):
    email: str
    password: str

class TokenPair(BaseModel):
    accessToken: str
    refreshToken: str

class AccessToken(BaseModel):
    accessToken: str
