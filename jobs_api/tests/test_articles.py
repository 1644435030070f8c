"""Tests for the articles feed endpoints.

Covers list/get, trend variants, id validation and error cases.
"""

import json

from httpx import ASGITransport, AsyncClient

from jobs_api.models.article import JobImpactRecord
from jobs_api.services.database import StorageError


def _record(record_id: int, **overrides) -> JobImpactRecord:
    data = {
        "id": record_id,
        "title": f"'Automation wave {record_id}'",
        "url": "https://www.example.com/story",
        "jobs_at_risk": 140,
        "jobs_replaced": 140,
        "new_ai_jobs": 100,
        "affected_industry": '["Logistics"]',
        "funding_data": "250m",
    }
    data.update(overrides)
    return JobImpactRecord(**data)


async def _get(path: str, **kwargs):
    from jobs_api.main import app

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as client:
        return await client.get(path, **kwargs)


async def test_list_articles(mock_settings, mocker):
    """Articles list returns transformed records in gateway order."""
    mock_fetch = mocker.patch(
        "jobs_api.routers.articles.fetch_many",
        return_value=[_record(2), _record(1)],
    )

    response = await _get("/api/articles")

    assert response.status_code == 200
    data = response.json()
    assert [a["id"] for a in data] == [2, 1]
    assert data[0]["title"] == "Automation wave 2"
    assert data[0]["source"] == "Example"
    assert data[0]["category"] == "Logistics"
    assert data[0]["insights"]["costSavings"] == "$250M"
    mock_fetch.assert_called_once_with(12)


async def test_list_articles_uses_replacement_trend(mock_settings, mocker):
    """The feed compares new AI jobs against jobs replaced."""
    mocker.patch("jobs_api.routers.articles.fetch_many", return_value=[_record(1)])

    response = await _get("/api/articles")

    assert response.json()[0]["insights"]["trend"] == "negative"


async def test_list_articles_with_limit(mock_settings, mocker):
    """An explicit limit overrides the configured default."""
    mock_fetch = mocker.patch("jobs_api.routers.articles.fetch_many", return_value=[])

    response = await _get("/api/articles", params={"limit": 3})

    assert response.status_code == 200
    assert response.json() == []
    mock_fetch.assert_called_once_with(3)


async def test_list_articles_rejects_bad_limit(mock_settings, mocker):
    mock_fetch = mocker.patch("jobs_api.routers.articles.fetch_many")

    response = await _get("/api/articles", params={"limit": 0})

    assert response.status_code == 422
    mock_fetch.assert_not_called()


async def test_list_articles_storage_error(mock_settings, mocker):
    """Database failures surface as a generic 500."""
    mocker.patch(
        "jobs_api.routers.articles.fetch_many",
        side_effect=StorageError("Failed to fetch records"),
    )

    response = await _get("/api/articles")

    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to fetch articles from database"


async def test_list_articles_method_not_allowed(mock_settings):
    from jobs_api.main import app

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as client:
        response = await client.post("/api/articles")

    assert response.status_code == 405


async def test_get_article_by_id(mock_settings, mocker):
    """Getting a single article uses the risk-based trend."""
    mock_fetch = mocker.patch(
        "jobs_api.routers.articles.fetch_one", return_value=_record(5)
    )

    response = await _get("/api/articles/5")

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == 5
    assert data["insights"]["trend"] == "neutral"
    assert data["insights"]["jobsAffected"] == 140
    assert "skillsReplaced" not in data["insights"]
    mock_fetch.assert_called_once_with(5)


async def test_get_article_invalid_id(mock_settings, mocker):
    """Non-integer IDs are rejected without touching the database."""
    mock_fetch = mocker.patch("jobs_api.routers.articles.fetch_one")

    response = await _get("/api/articles/abc")

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid article ID"
    mock_fetch.assert_not_called()


async def test_get_article_not_found(mock_settings, mocker):
    mocker.patch("jobs_api.routers.articles.fetch_one", return_value=None)

    response = await _get("/api/articles/404")

    assert response.status_code == 404
    assert "not found" in response.json()["detail"].lower()


async def test_get_article_storage_error(mock_settings, mocker):
    mocker.patch(
        "jobs_api.routers.articles.fetch_one",
        side_effect=StorageError("Failed to fetch record"),
    )

    response = await _get("/api/articles/1")

    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to fetch article from database"


async def test_end_to_end_with_database(jobs_db):
    """A stored row comes back as a display article through the real gateway."""
    jobs_db(
        id=10,
        title='"Finance automation"',
        url="https://www.reuters.com/a",
        jobs_at_risk="50000",
        jobs_replaced=10000,
        new_ai_jobs=60000,
        skills_automated=json.dumps(["Data entry", "Reconciliation", "Invoicing"]),
        skills_remaining="Negotiation",
        affected_industry="Finance, Banking",
        funding_data='["$1.5 billion"]',
    )

    response = await _get("/api/articles/10")

    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "Finance automation"
    assert data["source"] == "Reuters"
    insights = data["insights"]
    assert insights["trend"] == "positive"
    assert insights["impactScore"] == 10
    assert len(insights["skillsReplaced"]) == 3
    assert insights["sectors"] == ["Finance", "Banking"]
    assert insights["costSavings"] == "$1.5B"
    assert insights["jobCreationRatio"] == 6.0
    assert 50 <= insights["companiesInvolved"] <= 149
