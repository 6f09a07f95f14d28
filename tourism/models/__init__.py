from tourism.models.user import User
from tourism.models.visitor import Visitor
from tourism.models.site import Site
from tourism.models.visit import Visit
from tourism.models.counter import Counter

__all__ = ["User", "Visitor", "Site", "Visit", "Counter"]
