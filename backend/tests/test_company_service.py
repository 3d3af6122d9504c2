"""
Tests for CompanyService
"""
import pytest
from unittest.mock import AsyncMock, Mock
from uuid import uuid4

from jobboard.core.exceptions import (
    AuthorizationException,
    EmployerNotFoundException,
    ReferenceNotFoundException,
    ResourceNotFoundException,
)
from jobboard.domain.enums import UserRole
from jobboard.domain.patches import CompanyPatch
from jobboard.infrastructure.services.company_service import CompanyService

from conftest import make_company, make_user


class TestCompanyService:

    @pytest.fixture
    def company_repo(self):
        repo = Mock()
        repo.create = AsyncMock(side_effect=lambda company: company)
        repo.update = AsyncMock(side_effect=lambda company: company)
        repo.delete = AsyncMock(return_value=True)
        repo.get_by_id = AsyncMock(return_value=None)
        repo.get_with_relations = AsyncMock(return_value=None)
        return repo

    @pytest.fixture
    def user_repo(self):
        repo = Mock()
        repo.get_by_id = AsyncMock(return_value=None)
        repo.set_role = AsyncMock()
        return repo

    @pytest.fixture
    def company_service(self, company_repo, user_repo):
        return CompanyService(company_repo, user_repo)

    @pytest.mark.asyncio
    async def test_unknown_employer(self, company_service, company_repo):
        with pytest.raises(EmployerNotFoundException) as exc_info:
            await company_service.create_company(uuid4(), "Acme")

        assert isinstance(exc_info.value, ReferenceNotFoundException)
        assert str(exc_info.value) == "Employer not found"
        company_repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_job_seeker_is_promoted(self, company_service, user_repo):
        alice = make_user()
        user_repo.get_by_id = AsyncMock(return_value=alice)

        company = await company_service.create_company(alice.id, "Acme", location="Berlin")

        assert company.employer_id == alice.id
        assert company.location == "Berlin"
        user_repo.set_role.assert_awaited_once_with(alice.id, UserRole.EMPLOYER)

    @pytest.mark.asyncio
    async def test_existing_employer_not_promoted_again(self, company_service, user_repo):
        boss = make_user(role=UserRole.EMPLOYER)
        user_repo.get_by_id = AsyncMock(return_value=boss)

        await company_service.create_company(boss.id, "Acme")

        user_repo.set_role.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_get_missing_company(self, company_service):
        with pytest.raises(ResourceNotFoundException):
            await company_service.get_company(uuid4())

    @pytest.mark.asyncio
    async def test_update_by_non_owner(self, company_service, company_repo):
        company_repo.get_by_id = AsyncMock(return_value=make_company(uuid4()))

        with pytest.raises(AuthorizationException):
            await company_service.update_company(uuid4(), uuid4(), CompanyPatch(name="Evil"))
        company_repo.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_keeps_unsupplied_fields(self, company_service, company_repo):
        owner_id = uuid4()
        acme = make_company(owner_id, description="Rockets", location="Berlin")
        company_repo.get_by_id = AsyncMock(return_value=acme)

        updated = await company_service.update_company(
            acme.id, owner_id, CompanyPatch(location="Paris")
        )

        assert updated.location == "Paris"
        assert updated.description == "Rockets"
        assert updated.name == "Acme"

    @pytest.mark.asyncio
    async def test_update_clears_description(self, company_service, company_repo):
        owner_id = uuid4()
        acme = make_company(owner_id, description="Rockets", location="Berlin")
        company_repo.get_by_id = AsyncMock(return_value=acme)

        updated = await company_service.update_company(
            acme.id, owner_id, CompanyPatch(description=None)
        )

        assert updated.description is None
        assert updated.location == "Berlin"

    @pytest.mark.asyncio
    async def test_null_name_is_noop(self, company_service, company_repo):
        owner_id = uuid4()
        acme = make_company(owner_id)
        company_repo.get_by_id = AsyncMock(return_value=acme)

        assert await company_service.update_company(
            acme.id, owner_id, CompanyPatch(name=None)
        ) == acme
        company_repo.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_handover_promotes_new_owner(self, company_service, company_repo, user_repo):
        owner_id = uuid4()
        bob = make_user(name="Bob", email="bob@example.com")
        acme = make_company(owner_id)
        company_repo.get_by_id = AsyncMock(return_value=acme)
        user_repo.get_by_id = AsyncMock(return_value=bob)

        updated = await company_service.update_company(
            acme.id, owner_id, CompanyPatch(employer_id=bob.id)
        )

        assert updated.employer_id == bob.id
        user_repo.set_role.assert_awaited_once_with(bob.id, UserRole.EMPLOYER)

    @pytest.mark.asyncio
    async def test_handover_to_unknown_user(self, company_service, company_repo):
        owner_id = uuid4()
        acme = make_company(owner_id)
        company_repo.get_by_id = AsyncMock(return_value=acme)

        with pytest.raises(EmployerNotFoundException):
            await company_service.update_company(
                acme.id, owner_id, CompanyPatch(employer_id=uuid4())
            )

    @pytest.mark.asyncio
    async def test_delete_missing(self, company_service, company_repo):
        with pytest.raises(ResourceNotFoundException):
            await company_service.delete_company(uuid4(), uuid4())
        company_repo.delete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delete_by_owner(self, company_service, company_repo):
        owner_id = uuid4()
        acme = make_company(owner_id)
        company_repo.get_by_id = AsyncMock(return_value=acme)

        await company_service.delete_company(acme.id, owner_id)

        company_repo.delete.assert_awaited_once_with(acme.id)
