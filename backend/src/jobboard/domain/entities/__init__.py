"""Domain Entities - Core business objects"""

from .user import User
from .company import Company
from .vacancy import Vacancy
from .application import Application
from .resume import Resume
__all__ = ["User", "Company", "Vacancy", "Application", "Resume"]
