"""
Resume Service Interface
"""
from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from jobboard.domain.entities import Resume
from jobboard.domain.patches import ResumePatch


class IResumeService(ABC):
    """Resume service interface"""

    @abstractmethod
    async def list_resumes(self) -> List[Resume]:
        pass

    @abstractmethod
    async def get_resume(self, resume_id: UUID) -> Resume:
        pass

    @abstractmethod
    async def create_resume(
        self,
        owner_id: UUID,
        title: str,
        description: Optional[str] = None,
        skills: Optional[List[str]] = None
    ) -> Resume:
        pass

    @abstractmethod
    async def update_resume(
        self,
        resume_id: UUID,
        caller_id: UUID,
        patch: ResumePatch
    ) -> Resume:
        pass

    @abstractmethod
    async def delete_resume(self, resume_id: UUID, caller_id: UUID) -> None:
        pass
