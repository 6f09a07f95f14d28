from .user import UserCreate, UserResponse, LoginRequest, TokenPair, AccessToken
from .visitor import VisitorCreate, VisitorUpdate, VisitorResponse
from .site import SiteCreate, SiteUpdate, SiteResponse, SiteReport
from .visit import VisitCreate, VisitUpdate, VisitResponse, VisitLine, SiteVisitsReport
