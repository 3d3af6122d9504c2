"""
Domain Enums
Business enumerations for the job board
"""
from enum import Enum


class UserRole(str, Enum):
    """Role of a user account"""
    JOB_SEEKER = "JOB_SEEKER"
    EMPLOYER = "EMPLOYER"


class ApplicationStatus(str, Enum):
    """Status of an application to a vacancy"""
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"