"""Value Objects - Immutable objects defined by their attributes"""

from .email import Email
from .salary_range import SalaryRange
__all__ = [
    "Email",
    "SalaryRange",
]
