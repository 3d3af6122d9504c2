"""
Vacancy ORM Model
SQLAlchemy model for job postings
"""
import uuid
from sqlalchemy import Column, String, Integer, Boolean, DateTime, Text, JSON, ForeignKey
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from jobboard.core.database import Base


class VacancyModel(Base):
    """Vacancy table ORM model"""

    __tablename__ = "vacancies"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)

    company_id = Column(
        UUID(as_uuid=True),
        ForeignKey("companies.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    # Posting
    title = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=True)
    location = Column(String(255), nullable=True)
    skills = Column(JSON, nullable=False, default=list)

    # Salary (a single salary is stored as min == max)
    salary_min = Column(Integer, nullable=True)
    salary_max = Column(Integer, nullable=True)

    # Employment modes
    fulltime = Column(Boolean, nullable=False, default=False)
    parttime = Column(Boolean, nullable=False, default=False)
    remote = Column(Boolean, nullable=False, default=False)

    company = relationship("CompanyModel", back_populates="vacancies")
    applications = relationship(
        "ApplicationModel", back_populates="vacancy",
        cascade="all, delete-orphan", passive_deletes=True
    )

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    def __repr__(self):
        return f"<VacancyModel {self.title}>"
