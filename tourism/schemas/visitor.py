from pydantic import BaseModel, Field
from typing import Optional

class VisitorCreate(BaseModel):
    name: str = Field(..., min_length=1)
    address: Optional[str] = None

# Mise à jour partielle : seuls les champs envoyés sont fusionnés
class VisitorUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    address: Optional[str] = None

class VisitorResponse(BaseModel):
    id: str
    name: str
    address: Optional[str] = None

    class Config:
        from_attributes = True
