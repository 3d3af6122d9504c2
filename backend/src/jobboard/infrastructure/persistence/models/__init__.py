"""ORM Models Package"""

from .application import ApplicationModel
from .company import CompanyModel
from .resume import ResumeModel
from .user import UserModel
from .vacancy import VacancyModel

__all__ = [
    "ApplicationModel",
    "CompanyModel",
    "ResumeModel",
    "UserModel",
    "VacancyModel",
]
