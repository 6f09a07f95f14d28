from pydantic import BaseModel, Field
from typing import List, Optional

from .visitor import VisitorResponse

class VisitCreate(BaseModel):
    visitor_id: str
    site_id: str
    duration: int = Field(..., ge=1, description="Durée en jours")
    date_visit: Optional[str] = None

class VisitUpdate(BaseModel):
    visitor_id: Optional[str] = None
    site_id: Optional[str] = None
    duration: Optional[int] = Field(None, ge=1)
    date_visit: Optional[str] = None

class VisitResponse(BaseModel):
    id: str
    visitor_id: str
    site_id: str
    duration: int
    date_visit: Optional[str] = None

    class Config:
        from_attributes = True

# --- DÉTAIL DES VISITES D'UN SITE ---
class VisitLine(BaseModel):
    visitor: Optional[VisitorResponse]
    date: Optional[str]
    tarif: float
    duration: int
    amount: float

class SiteVisitsReport(BaseModel):
    data: List[VisitLine]
    total: float
