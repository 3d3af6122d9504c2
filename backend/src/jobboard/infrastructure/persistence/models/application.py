"""
Application ORM Model
SQLAlchemy model for applications to vacancies
"""
import uuid
from sqlalchemy import Column, String, DateTime, Text, ForeignKey, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from jobboard.core.database import Base


class ApplicationModel(Base):
    """Application table ORM model"""

    __tablename__ = "applications"
    __table_args__ = (
        UniqueConstraint("user_id", "vacancy_id", name="uq_applications_user_vacancy"),
    )

    # Primary Key
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)

    # Foreign Keys
    user_id = Column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    vacancy_id = Column(
        UUID(as_uuid=True),
        ForeignKey("vacancies.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    # Application Details
    status = Column(String(20), nullable=False, default="PENDING", index=True)
    cover_letter = Column(Text, nullable=True)

    user = relationship("UserModel", back_populates="applications")
    vacancy = relationship("VacancyModel", back_populates="applications")

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    def __repr__(self):
        return f"<ApplicationModel {self.id} - {self.status}>"
