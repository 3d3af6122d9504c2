"""
HTTP tests: the FastAPI app with in-memory repositories behind the container
"""
import pytest
from unittest.mock import AsyncMock, Mock

from fastapi.testclient import TestClient

from jobboard.core.exceptions import RepositoryException
from jobboard.main import create_app
from jobboard.presentation.api.v1 import container

from conftest import (
    InMemoryApplicationRepository,
    InMemoryCompanyRepository,
    InMemoryResumeRepository,
    InMemoryUserRepository,
    InMemoryVacancyRepository,
)


@pytest.fixture
def client(store, password_hasher):
    app = create_app()
    app.dependency_overrides[container.get_user_repository] = lambda: InMemoryUserRepository(store)
    app.dependency_overrides[container.get_company_repository] = (
        lambda: InMemoryCompanyRepository(store)
    )
    app.dependency_overrides[container.get_vacancy_repository] = (
        lambda: InMemoryVacancyRepository(store)
    )
    app.dependency_overrides[container.get_application_repository] = (
        lambda: InMemoryApplicationRepository(store)
    )
    app.dependency_overrides[container.get_resume_repository] = (
        lambda: InMemoryResumeRepository(store)
    )
    app.dependency_overrides[container.get_password_hasher] = lambda: password_hasher
    # No context manager: the lifespan (and its real database) is never started
    return TestClient(app)


def register(client, name, email, password="s3cret"):
    response = client.post("/users", json={"name": name, "email": email, "password": password})
    assert response.status_code == 201, response.text
    return response.json()


def login(client, email, password="s3cret"):
    response = client.post("/users/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}


class TestUsers:

    def test_register_never_returns_password(self, client):
        body = register(client, "Alice", "alice@example.com")

        assert body["email"] == "alice@example.com"
        assert body["role"] == "JOB_SEEKER"
        assert "password" not in body
        assert "passwordHash" not in body
        assert "createdAt" in body

    def test_duplicate_registration(self, client):
        register(client, "Alice", "alice@example.com")
        response = client.post(
            "/users", json={"name": "Alice", "email": "alice@example.com", "password": "x"}
        )
        assert response.status_code == 400
        assert "already exists" in response.json()["error"]

    def test_login_response_shape(self, client):
        register(client, "Alice", "alice@example.com")

        response = client.post(
            "/users/login", json={"email": "alice@example.com", "password": "s3cret"}
        )
        body = response.json()

        assert body["message"] == "Login successful"
        assert body["token"]
        assert body["user"]["name"] == "Alice"

    def test_login_failures(self, client):
        register(client, "Alice", "alice@example.com")

        wrong = client.post("/users/login", json={"email": "alice@example.com", "password": "x"})
        unknown = client.post("/users/login", json={"email": "nobody@example.com", "password": "x"})

        assert wrong.status_code == 400
        assert wrong.json() == {"error": "Invalid password"}
        assert unknown.status_code == 400
        assert unknown.json() == {"error": "User not found"}

    def test_me_requires_token(self, client):
        response = client.get("/users/me")
        assert response.status_code == 401
        assert response.json() == {"error": "Access token is missing"}

    def test_me_rejects_garbage_token(self, client):
        response = client.get("/users/me", headers={"Authorization": "Bearer nonsense"})
        assert response.status_code == 401

    def test_cannot_update_someone_else(self, client):
        register(client, "Alice", "alice@example.com")
        bob = register(client, "Bob", "bob@example.com")
        headers = login(client, "alice@example.com")

        response = client.put(f"/users/{bob['id']}", json={"name": "Bobby"}, headers=headers)

        assert response.status_code == 403

    def test_update_self_ignores_role(self, client):
        alice = register(client, "Alice", "alice@example.com")
        headers = login(client, "alice@example.com")

        response = client.put(
            f"/users/{alice['id']}", json={"phone": "+123", "role": "EMPLOYER"}, headers=headers
        )

        assert response.status_code == 200
        assert response.json()["phone"] == "+123"
        assert response.json()["role"] == "JOB_SEEKER"

    def test_malformed_id_is_400(self, client):
        register(client, "Alice", "alice@example.com")
        headers = login(client, "alice@example.com")

        response = client.put("/users/42", json={"name": "X"}, headers=headers)

        assert response.status_code == 400
        assert "error" in response.json()

    def test_register_unicode_email(self, client):
        body = register(client, "José", "José@example.com")

        assert body["email"] == "josé@example.com"
        assert login(client, "josé@example.com")

    def test_null_clears_phone(self, client):
        alice = client.post(
            "/users",
            json={"name": "Alice", "email": "alice@example.com", "password": "s3cret",
                  "phone": "+123"},
        ).json()
        headers = login(client, "alice@example.com")

        response = client.put(f"/users/{alice['id']}", json={"phone": None}, headers=headers)

        assert response.status_code == 200
        assert response.json()["phone"] is None
        assert response.json()["name"] == "Alice"


class TestHiringScenario:
    """Alice opens Acme, posts a vacancy, Bob applies, Alice approves"""

    def test_end_to_end(self, client):
        alice = register(client, "Alice", "alice@example.com")
        bob = register(client, "Bob", "bob@example.com")
        alice_headers = login(client, "alice@example.com")
        bob_headers = login(client, "bob@example.com")

        company = client.post(
            "/companies",
            json={"name": "Acme", "location": "Berlin"},
            headers=alice_headers,
        )
        assert company.status_code == 201
        assert company.json()["employerId"] == alice["id"]

        me = client.get("/users/me", headers=alice_headers).json()
        assert me["role"] == "EMPLOYER"
        assert [c["name"] for c in me["companies"]] == ["Acme"]

        vacancy = client.post(
            "/vacancies",
            json={
                "companyId": company.json()["id"],
                "title": "Backend Developer",
                "description": "Python and SQL",
                "salary": 5000,
                "skills": ["Python", "SQL", "Python"],
                "remote": True,
            },
            headers=alice_headers,
        )
        assert vacancy.status_code == 201
        vacancy_id = vacancy.json()["id"]
        assert vacancy.json()["salaryMin"] == vacancy.json()["salaryMax"] == 5000
        assert vacancy.json()["skills"] == ["Python", "SQL"]
        assert vacancy.json()["company"]["name"] == "Acme"

        application = client.post(
            "/applications",
            json={"vacancyId": vacancy_id, "coverLetter": "Hire me"},
            headers=bob_headers,
        )
        assert application.status_code == 201
        assert application.json()["status"] == "PENDING"
        assert application.json()["userId"] == bob["id"]

        listed = client.get(f"/applications/vacancy/{vacancy_id}", headers=alice_headers)
        assert listed.status_code == 200
        assert len(listed.json()) == 1
        assert listed.json()[0]["user"]["name"] == "Bob"
        assert listed.json()[0]["status"] == "PENDING"

        forbidden = client.patch(
            f"/applications/{application.json()['id']}",
            json={"status": "APPROVED"},
            headers=bob_headers,
        )
        assert forbidden.status_code == 403

        approved = client.patch(
            f"/applications/{application.json()['id']}",
            json={"status": "APPROVED"},
            headers=alice_headers,
        )
        assert approved.status_code == 200
        assert approved.json()["status"] == "APPROVED"

        again = client.patch(
            f"/applications/{application.json()['id']}",
            json={"status": "REJECTED"},
            headers=alice_headers,
        )
        assert again.status_code == 400

        mine = client.get(f"/applications/user/{bob['id']}", headers=bob_headers).json()
        assert [a["status"] for a in mine] == ["APPROVED"]
        assert mine[0]["vacancy"]["title"] == "Backend Developer"

    def test_vacancy_for_unknown_company(self, client):
        register(client, "Alice", "alice@example.com")
        headers = login(client, "alice@example.com")

        response = client.post(
            "/vacancies",
            json={"companyId": "00000000-0000-0000-0000-000000000000", "title": "Ghost"},
            headers=headers,
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Company not found"}

    def test_apply_to_unknown_vacancy(self, client):
        register(client, "Bob", "bob@example.com")
        headers = login(client, "bob@example.com")

        response = client.post(
            "/applications",
            json={"vacancyId": "00000000-0000-0000-0000-000000000000"},
            headers=headers,
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Vacancy not found"}

    def test_company_delete_cascades(self, client, store):
        register(client, "Alice", "alice@example.com")
        headers = login(client, "alice@example.com")
        company_id = client.post("/companies", json={"name": "Acme"}, headers=headers).json()["id"]
        client.post(
            "/vacancies", json={"companyId": company_id, "title": "Backend Developer"},
            headers=headers,
        )

        response = client.delete(f"/companies/{company_id}", headers=headers)

        assert response.status_code == 200
        assert response.json() == {"message": "Company deleted successfully"}
        assert client.get("/vacancies").json() == []
        assert client.get(f"/companies/{company_id}").status_code == 404


class TestVacancySearch:

    @pytest.fixture
    def posted(self, client):
        register(client, "Alice", "alice@example.com")
        headers = login(client, "alice@example.com")
        company_id = client.post("/companies", json={"name": "Acme"}, headers=headers).json()["id"]
        for title, description in (
            ("Backend Developer", None),
            ("Designer", "Pairs with the DEVELOPER team"),
            ("Accountant", "Numbers"),
        ):
            client.post(
                "/vacancies",
                json={"companyId": company_id, "title": title, "description": description},
                headers=headers,
            )

    def test_search_matches_title_or_description(self, client, posted):
        response = client.get("/vacancies/search", params={"query": "developer"})

        assert response.status_code == 200
        assert sorted(v["title"] for v in response.json()) == ["Backend Developer", "Designer"]

    def test_search_without_match(self, client, posted):
        assert client.get("/vacancies/search", params={"query": "astronaut"}).json() == []

    def test_blank_search(self, client, posted):
        response = client.get("/vacancies/search", params={"query": " "})

        assert response.status_code == 400
        assert response.json()["error"].startswith("query:")

    def test_missing_vacancy(self, client):
        response = client.get("/vacancies/00000000-0000-0000-0000-000000000000")
        assert response.status_code == 404


class TestVacancyUpdates:

    @pytest.fixture
    def vacancy(self, client):
        register(client, "Alice", "alice@example.com")
        headers = login(client, "alice@example.com")
        company_id = client.post("/companies", json={"name": "Acme"}, headers=headers).json()["id"]
        created = client.post(
            "/vacancies",
            json={
                "companyId": company_id,
                "title": "Backend Developer",
                "description": "APIs",
                "salaryMin": 1000,
                "salaryMax": 2000,
            },
            headers=headers,
        )
        assert created.status_code == 201, created.text
        return created.json()["id"], headers

    def test_salary_with_bounds_is_rejected(self, client, vacancy):
        vacancy_id, headers = vacancy

        response = client.put(
            f"/vacancies/{vacancy_id}", json={"salary": 5, "salaryMin": 100}, headers=headers
        )

        assert response.status_code == 400
        assert "salary" in response.json()["error"]
        assert client.get(f"/vacancies/{vacancy_id}").json()["salaryMin"] == 1000

    def test_inverted_bounds_are_rejected(self, client, vacancy):
        vacancy_id, headers = vacancy

        response = client.put(
            f"/vacancies/{vacancy_id}", json={"salaryMin": 900, "salaryMax": 100}, headers=headers
        )

        assert response.status_code == 400

    def test_single_salary(self, client, vacancy):
        vacancy_id, headers = vacancy

        response = client.put(f"/vacancies/{vacancy_id}", json={"salary": 1500}, headers=headers)

        assert response.status_code == 200
        assert response.json()["salaryMin"] == response.json()["salaryMax"] == 1500

    def test_null_clears_description(self, client, vacancy):
        vacancy_id, headers = vacancy

        response = client.put(
            f"/vacancies/{vacancy_id}", json={"description": None, "title": None}, headers=headers
        )

        assert response.status_code == 200
        assert response.json()["description"] is None
        assert response.json()["title"] == "Backend Developer"


class TestResumes:

    def test_resume_lifecycle(self, client):
        register(client, "Bob", "bob@example.com")
        bob_headers = login(client, "bob@example.com")
        register(client, "Eve", "eve@example.com")
        eve_headers = login(client, "eve@example.com")

        created = client.post(
            "/resumes",
            json={"title": "Python developer", "skills": ["Python", "SQL"]},
            headers=bob_headers,
        )
        assert created.status_code == 201
        resume_id = created.json()["id"]

        assert client.put(
            f"/resumes/{resume_id}", json={"title": "Stolen"}, headers=eve_headers
        ).status_code == 403

        updated = client.put(
            f"/resumes/{resume_id}", json={"description": "Five years"}, headers=bob_headers
        )
        assert updated.json()["title"] == "Python developer"
        assert updated.json()["description"] == "Five years"

        deleted = client.delete(f"/resumes/{resume_id}", headers=bob_headers)
        assert deleted.json() == {"message": "Resume deleted successfully"}
        assert client.get(f"/resumes/{resume_id}").status_code == 404

    def test_create_requires_token(self, client):
        response = client.post("/resumes", json={"title": "Anonymous"})
        assert response.status_code == 401


class TestServerErrors:
    """Store failures and unexpected errors never leak details"""

    def failing_client(self, client, error):
        repo = Mock()
        repo.list_all = AsyncMock(side_effect=error)
        client.app.dependency_overrides[container.get_company_repository] = lambda: repo
        return TestClient(client.app, raise_server_exceptions=False)

    def test_repository_failure(self, client):
        failing = self.failing_client(client, RepositoryException("connection refused"))

        response = failing.get("/companies")

        assert response.status_code == 500
        assert response.json() == {"error": "Something went wrong"}

    def test_unexpected_error(self, client):
        failing = self.failing_client(client, RuntimeError("boom"))

        response = failing.get("/companies")

        assert response.status_code == 500
        assert response.json() == {"error": "Something went wrong"}
