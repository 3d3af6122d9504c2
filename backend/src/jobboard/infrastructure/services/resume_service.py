"""
ResumeService Implementation
"""
from dataclasses import replace
from datetime import datetime
from typing import List, Optional
from uuid import UUID, uuid4

from loguru import logger

from jobboard.application.repositories.interfaces import IResumeRepository, IUserRepository
from jobboard.application.services.resume import IResumeService
from jobboard.core.exceptions import (
    AuthorizationException,
    ReferenceNotFoundException,
    ResourceNotFoundException,
    ValidationException,
)
from jobboard.domain.entities import Resume
from jobboard.domain.patches import ResumePatch


def _clean_skills(skills: Optional[List[str]]) -> List[str]:
    # order is significant for resumes, duplicates are kept
    return [s.strip() for s in skills or [] if s and s.strip()]


class ResumeService(IResumeService):
    """Resume service"""

    def __init__(
        self,
        resume_repository: IResumeRepository,
        user_repository: IUserRepository,
    ):
        self.resume_repo = resume_repository
        self.user_repo = user_repository

    async def list_resumes(self) -> List[Resume]:
        return await self.resume_repo.list_all()

    async def get_resume(self, resume_id: UUID) -> Resume:
        resume = await self.resume_repo.get_by_id(resume_id)
        if not resume:
            raise ResourceNotFoundException("Resume", str(resume_id))
        return resume

    async def create_resume(
        self,
        owner_id: UUID,
        title: str,
        description: Optional[str] = None,
        skills: Optional[List[str]] = None
    ) -> Resume:
        if not title or not title.strip():
            raise ValidationException("title", "cannot be empty")
        if not await self.user_repo.get_by_id(owner_id):
            raise ReferenceNotFoundException("User", str(owner_id))

        now = datetime.utcnow()
        resume = await self.resume_repo.create(
            Resume(
                id=uuid4(),
                user_id=owner_id,
                title=title.strip(),
                description=description,
                skills=_clean_skills(skills),
                created_at=now,
                updated_at=now,
            )
        )
        logger.info(f"Resume {resume.id} created for user {owner_id}")
        return resume

    async def update_resume(
        self,
        resume_id: UUID,
        caller_id: UUID,
        patch: ResumePatch
    ) -> Resume:
        resume = await self._get_owned(resume_id, caller_id)

        if patch.is_empty():
            return resume

        changes = patch.changes()
        if "title" in changes:
            if not changes["title"].strip():
                raise ValidationException("title", "cannot be empty")
            changes["title"] = changes["title"].strip()
        if "skills" in changes:
            changes["skills"] = _clean_skills(changes["skills"])

        return await self.resume_repo.update(
            replace(resume, updated_at=datetime.utcnow(), **changes)
        )

    async def delete_resume(self, resume_id: UUID, caller_id: UUID) -> None:
        await self._get_owned(resume_id, caller_id)
        await self.resume_repo.delete(resume_id)
        logger.info(f"Resume {resume_id} deleted")

    async def _get_owned(self, resume_id: UUID, caller_id: UUID) -> Resume:
        resume = await self.get_resume(resume_id)
        if not resume.is_owned_by(caller_id):
            raise AuthorizationException("You do not own this resume")
        return resume
