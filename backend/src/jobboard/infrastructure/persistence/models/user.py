"""
User ORM Model
SQLAlchemy model for persistence
"""
import uuid
from sqlalchemy import Column, String, DateTime
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from jobboard.core.database import Base


class UserModel(Base):
    """User table ORM model"""

    __tablename__ = "users"

    # Primary Key
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)

    # Authentication
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)

    # Personal Information
    name = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=True)

    # JOB_SEEKER or EMPLOYER
    role = Column(String(20), nullable=False, default="JOB_SEEKER", server_default="JOB_SEEKER")

    # Owned rows
    companies = relationship(
        "CompanyModel", back_populates="employer",
        cascade="all, delete-orphan", passive_deletes=True
    )
    applications = relationship(
        "ApplicationModel", back_populates="user",
        cascade="all, delete-orphan", passive_deletes=True
    )
    resumes = relationship(
        "ResumeModel", back_populates="user",
        cascade="all, delete-orphan", passive_deletes=True
    )

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    def __repr__(self):
        return f"<UserModel {self.email}>"
