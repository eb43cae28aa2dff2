"""Project Tests

Project CRUD, progress completion, range queries and list filters.
"""

from datetime import date, timedelta

import pytest

from app.models.project_db.project_db import Project
from app.services.choices import ProjectCategory, ProjectStatus


def _create_project(client, **overrides):
    payload = {
        "name": "Lab Portal",
        "description": "Website for the lab",
        "status": "ONGOING",
        "category": "DEVELOPMENT",
        "isPublic": True,
        "budget": 5000,
        "progress": 40,
        "techStack": "FastAPI,SQLAlchemy",
        "repositoryUrl": "https://git.example.com/lab/portal",
        "demoUrl": "https://portal.example.com",
    }
    payload.update(overrides)
    response = client.post("/api/projects", json=payload)
    assert response.status_code == 200, response.text
    return response.json()


def _seed_project(db, **fields):
    project = Project(**fields)
    db.add(project)
    db.commit()
    db.refresh(project)
    return project


class TestProjectCreation:
    """POST /api/projects"""

    def test_create(self, client):
        project = _create_project(client)

        assert project["name"] == "Lab Portal"
        assert project["budget"] == 5000
        assert project["repositoryUrl"] == "https://git.example.com/lab/portal"
        assert project["demoUrl"] == "https://portal.example.com"
        assert project["documentationUrl"] == "https://portal.example.com"

    def test_defaults(self, client):
        response = client.post("/api/projects", json={"name": "Bare"})

        data = response.json()
        assert data["budget"] == 0
        assert data["progress"] == 0
        assert data["isPublic"] is False
        assert data["featured"] is False
        assert data["displayOrder"] == 0

    def test_future_dates(self, client, future_date):
        project = _create_project(client, startDate=future_date, endDate=future_date)
        assert project["startDate"] == future_date

    def test_past_start_date_rejected(self, client):
        yesterday = (date.today() - timedelta(days=1)).isoformat()
        response = client.post("/api/projects", json={"name": "Late", "startDate": yesterday})
        assert response.status_code == 422

    def test_negative_budget_rejected(self, client):
        response = client.post("/api/projects", json={"name": "Broke", "budget": -1})
        assert response.status_code == 422

    def test_progress_over_100_rejected(self, client):
        response = client.post("/api/projects", json={"name": "Eager", "progress": 101})
        assert response.status_code == 422


class TestProjectUpdate:
    """PUT /api/projects/{id} replaces the project"""

    def test_missing_budget(self, client):
        project = _create_project(client)

        response = client.put(f"/api/projects/{project['id']}", json={"name": "No budget"})
        assert response.status_code == 422

    def test_full_overwrite(self, client):
        project = _create_project(client)

        response = client.put(f"/api/projects/{project['id']}", json={"name": "Renamed", "budget": 10})

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Renamed"
        assert data["budget"] == 10
        assert data["description"] is None
        assert data["status"] is None

    def test_past_dates_allowed_on_update(self, client):
        project = _create_project(client)
        last_year = (date.today() - timedelta(days=365)).isoformat()

        response = client.put(
            f"/api/projects/{project['id']}",
            json={"name": "Old", "budget": 0, "startDate": last_year},
        )
        assert response.status_code == 200

    def test_missing_project(self, client):
        assert client.put("/api/projects/999", json={"budget": 1}).status_code == 404


class TestProjectProgress:
    """PATCH /api/projects/{id}/progress"""

    def test_partial_progress(self, client):
        project = _create_project(client)

        data = client.patch(f"/api/projects/{project['id']}/progress", params={"progress": 60}).json()

        assert data["progress"] == 60
        assert data["status"] == "ONGOING"

    @pytest.mark.parametrize("prior_status", ["ONGOING", "PLANNING", "SUSPENDED", "CANCELLED", None])
    def test_complete_progress_completes(self, client, prior_status):
        project = _create_project(client)
        url = f"/api/projects/{project['id']}"
        if prior_status is None:
            # full overwrite without a status clears it
            assert client.put(url, json={"name": "Lab Portal", "budget": 1}).json()["status"] is None
        else:
            client.patch(f"{url}/status", params={"status": prior_status})

        data = client.patch(f"{url}/progress", params={"progress": 100}).json()

        assert data["progress"] == 100
        assert data["status"] == "COMPLETED"

    def test_out_of_range(self, client):
        project = _create_project(client)
        response = client.patch(f"/api/projects/{project['id']}/progress", params={"progress": 150})
        assert response.status_code == 422

    def test_status_and_display_order(self, client):
        project = _create_project(client)
        url = f"/api/projects/{project['id']}"

        assert client.patch(f"{url}/status", params={"status": "SUSPENDED"}).json()["status"] == "SUSPENDED"
        assert client.patch(f"{url}/display-order", params={"displayOrder": 2}).status_code == 200
        assert client.get(url).json()["displayOrder"] == 2


class TestProjectQueries:
    """List filters, public lists and range queries"""

    def _seed(self, db):
        _seed_project(db, name="Alpha", category=ProjectCategory.RESEARCH, status=ProjectStatus.ONGOING,
                      is_public=True, featured=True, budget=100.0, progress=20,
                      start_date=date(2025, 3, 1))
        _seed_project(db, name="Alpha Dev", category=ProjectCategory.DEVELOPMENT, status=ProjectStatus.COMPLETED,
                      is_public=True, featured=False, budget=900.0, progress=100,
                      start_date=date(2025, 9, 1))
        _seed_project(db, name="Beta", category=ProjectCategory.RESEARCH, status=ProjectStatus.ONGOING,
                      is_public=False, featured=True, budget=None, progress=50,
                      start_date=date(2026, 1, 1))

    def test_keyword_with_category_uses_keyword(self, client, db):
        self._seed(db)

        data = client.get("/api/projects", params={"keyword": "Alpha", "category": "RESEARCH"}).json()

        assert data["total"] == 2
        assert {p["name"] for p in data["content"]} == {"Alpha", "Alpha Dev"}

    def test_keyword_and_status(self, client, db):
        self._seed(db)
        data = client.get("/api/projects", params={"keyword": "alpha", "status": "COMPLETED"}).json()
        assert [p["name"] for p in data["content"]] == ["Alpha Dev"]

    def test_category_only(self, client, db):
        self._seed(db)
        data = client.get("/api/projects", params={"category": "RESEARCH"}).json()
        assert {p["name"] for p in data["content"]} == {"Alpha", "Beta"}

    def test_null_budget_reads_as_zero(self, client, db):
        self._seed(db)
        data = client.get("/api/projects", params={"keyword": "Beta"}).json()
        assert data["content"][0]["budget"] == 0

    def test_public_lists(self, client, db):
        self._seed(db)

        assert {p["name"] for p in client.get("/api/projects/public").json()} == {"Alpha", "Alpha Dev"}
        assert [p["name"] for p in client.get("/api/projects/featured").json()] == ["Alpha"]
        assert [p["name"] for p in client.get("/api/projects/ongoing").json()] == ["Alpha"]
        assert [p["name"] for p in client.get("/api/projects/completed").json()] == ["Alpha Dev"]

    def test_by_status_and_category(self, client, db):
        self._seed(db)

        assert len(client.get("/api/projects/status/ONGOING").json()) == 2
        # category list only shows public projects
        assert [p["name"] for p in client.get("/api/projects/category/RESEARCH").json()] == ["Alpha"]

    def test_search(self, client, db):
        self._seed(db)
        names = {p["name"] for p in client.get("/api/projects/search", params={"keyword": "alpha"}).json()}
        assert names == {"Alpha", "Alpha Dev"}

    def test_ranges(self, client, db):
        self._seed(db)

        by_date = client.get("/api/projects/date-range", params={"startDate": "2025-01-01", "endDate": "2025-12-31"})
        by_budget = client.get("/api/projects/budget-range", params={"minBudget": 50, "maxBudget": 500})
        by_progress = client.get("/api/projects/progress-range", params={"minProgress": 40, "maxProgress": 100})

        assert [p["name"] for p in by_date.json()] == ["Alpha", "Alpha Dev"]
        assert [p["name"] for p in by_budget.json()] == ["Alpha"]
        assert [p["name"] for p in by_progress.json()] == ["Beta", "Alpha Dev"]

    def test_delete(self, client, db):
        self._seed(db)
        project_id = client.get("/api/projects", params={"keyword": "Beta"}).json()["content"][0]["id"]

        assert client.delete(f"/api/projects/{project_id}").status_code == 200
        assert client.get(f"/api/projects/{project_id}").status_code == 404


class TestProjectStatistics:
    """GET /api/projects/statistics"""

    def test_zero_filled(self, client):
        _create_project(client)

        data = client.get("/api/projects/statistics").json()

        assert data["totalProjects"] == 1
        assert data["statusCounts"] == {
            "PLANNING": 0, "ONGOING": 1, "COMPLETED": 0, "SUSPENDED": 0, "CANCELLED": 0,
        }
        assert data["categoryCounts"]["DEVELOPMENT"] == 1
        assert data["categoryCounts"]["RESEARCH"] == 0
