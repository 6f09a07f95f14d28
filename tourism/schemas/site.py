from pydantic import BaseModel, Field
from typing import Optional

class SiteCreate(BaseModel):
    name: str = Field(..., min_length=1)
    place: Optional[str] = None
    tarif: float = Field(..., ge=0, description="Tarif par jour (Ariary)")

class SiteUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    place: Optional[str] = None
    tarif: Optional[float] = Field(None, ge=0)

class SiteResponse(BaseModel):
    id: str
    name: str
    place: Optional[str] = None
    tarif: float

    class Config:
        from_attributes = True

# Ligne du rapport global : montant total et nombre de visites par site
class SiteReport(BaseModel):
    id: str
    name: str
    nbVisits: int
    total: float
