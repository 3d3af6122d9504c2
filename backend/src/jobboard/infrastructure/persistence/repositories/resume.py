"""
Resume Repository Implementation
"""
from typing import Optional, List
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from loguru import logger

from jobboard.domain.entities import Resume
from jobboard.application.repositories.interfaces import IResumeRepository
from jobboard.infrastructure.persistence.models import ResumeModel
from jobboard.core.exceptions import RepositoryException
from .mappers import resume_to_entity


class SQLAlchemyResumeRepository(IResumeRepository):
    """SQLAlchemy implementation of resume repository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, resume_id: UUID) -> Optional[Resume]:
        try:
            result = await self.session.execute(
                select(ResumeModel).where(ResumeModel.id == resume_id)
            )
            model = result.scalar_one_or_none()
            return resume_to_entity(model) if model else None

        except Exception as e:
            logger.error(f"Failed to get resume {resume_id}: {str(e)}")
            raise RepositoryException(f"Failed to get resume: {str(e)}")

    async def list_all(self) -> List[Resume]:
        try:
            result = await self.session.execute(
                select(ResumeModel).order_by(ResumeModel.created_at)
            )
            return [resume_to_entity(m) for m in result.scalars().all()]

        except Exception as e:
            logger.error(f"Failed to list resumes: {str(e)}")
            raise RepositoryException(f"Failed to list resumes: {str(e)}")

    async def create(self, resume: Resume) -> Resume:
        try:
            model = ResumeModel(
                id=resume.id,
                user_id=resume.user_id,
                title=resume.title,
                description=resume.description,
                skills=list(resume.skills),
            )
            self.session.add(model)
            await self.session.flush()
            await self.session.refresh(model)

            return resume_to_entity(model)

        except Exception as e:
            logger.error(f"Failed to create resume for user {resume.user_id}: {str(e)}")
            raise RepositoryException(f"Failed to create resume: {str(e)}")

    async def update(self, resume: Resume) -> Resume:
        try:
            result = await self.session.execute(
                select(ResumeModel).where(ResumeModel.id == resume.id)
            )
            model = result.scalar_one_or_none()

            if not model:
                raise RepositoryException(f"Resume not found: {resume.id}")

            model.title = resume.title
            model.description = resume.description
            model.skills = list(resume.skills)

            await self.session.flush()
            await self.session.refresh(model)

            return resume_to_entity(model)

        except RepositoryException:
            raise
        except Exception as e:
            logger.error(f"Failed to update resume {resume.id}: {str(e)}")
            raise RepositoryException(f"Failed to update resume: {str(e)}")

    async def delete(self, resume_id: UUID) -> bool:
        try:
            result = await self.session.execute(
                select(ResumeModel).where(ResumeModel.id == resume_id)
            )
            model = result.scalar_one_or_none()

            if model:
                await self.session.delete(model)
                await self.session.flush()
                return True
            return False

        except Exception as e:
            logger.error(f"Failed to delete resume {resume_id}: {str(e)}")
            raise RepositoryException(f"Failed to delete resume: {str(e)}")
