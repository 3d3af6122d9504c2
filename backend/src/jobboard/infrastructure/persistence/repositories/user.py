"""
User Repository Implementation
SQLAlchemy-based user repository
"""
from typing import Optional, List
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from loguru import logger

from jobboard.domain.entities import User
from jobboard.domain.enums import UserRole
from jobboard.application.repositories.interfaces import IUserRepository
from jobboard.infrastructure.persistence.models import UserModel, ApplicationModel
from jobboard.core.exceptions import RepositoryException, DuplicateResourceException
from .mappers import user_to_entity, user_to_model


class SQLAlchemyUserRepository(IUserRepository):
    """SQLAlchemy implementation of user repository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _get_model(self, user_id: UUID) -> UserModel:
        result = await self.session.execute(
            select(UserModel).where(UserModel.id == user_id)
        )
        model = result.scalar_one_or_none()
        if not model:
            raise RepositoryException(f"User not found: {user_id}")
        return model

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        try:
            result = await self.session.execute(
                select(UserModel).where(UserModel.id == user_id)
            )
            model = result.scalar_one_or_none()

            if model:
                return user_to_entity(model)
            return None

        except Exception as e:
            logger.error(f"Failed to get user by ID {user_id}: {str(e)}")
            raise RepositoryException(f"Failed to get user: {str(e)}")

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email"""
        try:
            result = await self.session.execute(
                select(UserModel).where(UserModel.email == email)
            )
            model = result.scalar_one_or_none()

            if model:
                return user_to_entity(model)
            return None

        except Exception as e:
            logger.error(f"Failed to get user by email {email}: {str(e)}")
            raise RepositoryException(f"Failed to get user: {str(e)}")

    async def get_profile(self, user_id: UUID) -> Optional[User]:
        """Get user with companies, applications (with vacancy) and resumes"""
        try:
            result = await self.session.execute(
                select(UserModel)
                .options(
                    selectinload(UserModel.companies),
                    selectinload(UserModel.applications).selectinload(ApplicationModel.vacancy),
                    selectinload(UserModel.resumes),
                )
                .where(UserModel.id == user_id)
            )
            model = result.scalar_one_or_none()

            if model:
                return user_to_entity(model, profile=True)
            return None

        except Exception as e:
            logger.error(f"Failed to get profile for user {user_id}: {str(e)}")
            raise RepositoryException(f"Failed to get user profile: {str(e)}")

    async def list_all(self) -> List[User]:
        try:
            result = await self.session.execute(
                select(UserModel).order_by(UserModel.created_at)
            )
            return [user_to_entity(m) for m in result.scalars().all()]

        except Exception as e:
            logger.error(f"Failed to list users: {str(e)}")
            raise RepositoryException(f"Failed to list users: {str(e)}")

    async def create(self, user: User) -> User:
        """Create new user"""
        try:
            model = user_to_model(user)
            self.session.add(model)
            await self.session.flush()
            await self.session.refresh(model)

            return user_to_entity(model)

        except IntegrityError:
            raise DuplicateResourceException("User", "email", str(user.email))
        except Exception as e:
            logger.error(f"Failed to create user {user.email}: {str(e)}")
            raise RepositoryException(f"Failed to create user: {str(e)}")

    async def update(self, user: User) -> User:
        """Update existing user"""
        try:
            model = await self._get_model(user.id)

            model.email = str(user.email)
            model.name = user.name
            model.phone = user.phone
            model.password_hash = user.password_hash
            model.role = user.role.value

            await self.session.flush()
            await self.session.refresh(model)

            return user_to_entity(model)

        except IntegrityError:
            raise DuplicateResourceException("User", "email", str(user.email))
        except RepositoryException:
            raise
        except Exception as e:
            logger.error(f"Failed to update user {user.id}: {str(e)}")
            raise RepositoryException(f"Failed to update user: {str(e)}")

    async def set_role(self, user_id: UUID, role: UserRole) -> User:
        try:
            model = await self._get_model(user_id)
            model.role = role.value

            await self.session.flush()
            await self.session.refresh(model)

            logger.info(f"Set role {role.value} for user {user_id}")
            return user_to_entity(model)

        except RepositoryException:
            raise
        except Exception as e:
            logger.error(f"Failed to set role for user {user_id}: {str(e)}")
            raise RepositoryException(f"Failed to set user role: {str(e)}")

    async def exists_by_email(self, email: str) -> bool:
        try:
            result = await self.session.execute(
                select(UserModel.id).where(UserModel.email == email)
            )
            return result.scalar_one_or_none() is not None

        except Exception as e:
            logger.error(f"Failed to check user existence {email}: {str(e)}")
            raise RepositoryException(f"Failed to check user existence: {str(e)}")
