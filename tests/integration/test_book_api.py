"""Integration tests for the bookstore HTTP API.

The app runs in-process against a temporary XML file.
"""

import inspect
from decimal import Decimal

import httpx
import pytest
import pytest_asyncio

from bookstore.application.api import app, get_book_service
from bookstore.domain.services.book_service import BookService
from bookstore.domain.services.report_generator import ReportGenerator
from bookstore.infrastructure import XmlBookRepository, XmlFileStore

BOOK_PAYLOAD = {
    "isbn": "9876543210",
    "title": "Test Book",
    "authors": "Author One, Author Two",
    "year": 2022,
    "price": "29.99",
    "category": "Fiction",
    "cover": "Cover Image",
}


@pytest.fixture
def data_file(tmp_path):
    """Create an empty bookstore document."""
    path = tmp_path / "bookstore.xml"
    XmlFileStore(str(path)).initialize()
    return path


@pytest_asyncio.fixture
async def client(data_file):
    """Create an HTTP client whose service reads the temporary document."""
    def _service() -> BookService:
        return BookService(
            book_repository=XmlBookRepository(XmlFileStore(str(data_file))),
            report_generator=ReportGenerator(),
        )

    app.dependency_overrides[get_book_service] = _service
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


@pytest.mark.asyncio
async def test_add_then_get_book(client):
    """Test that a created book can be read back with the same values."""
    response = await client.post("/api/book", json=BOOK_PAYLOAD)

    assert response.status_code == 201
    assert response.headers["location"] == "/api/book/9876543210"
    assert response.json()["isbn"] == "9876543210"

    response = await client.get("/api/book/9876543210")

    assert response.status_code == 200
    body = response.json()
    assert body["title"] == "Test Book"
    assert body["authors"] == "Author One, Author Two"
    assert body["year"] == 2022
    assert body["price"] == "29.99"
    assert body["category"] == "Fiction"
    assert body["cover"] == "Cover Image"


@pytest.mark.asyncio
async def test_add_existing_book_returns_stored_copy(client):
    """Test that posting a known ISBN twice keeps the first values."""
    await client.post("/api/book", json=BOOK_PAYLOAD)

    response = await client.post("/api/book", json={**BOOK_PAYLOAD, "title": "Other"})

    assert response.status_code == 201
    assert response.json()["title"] == "Test Book"
    report = (await client.get("/api/book/report")).text
    assert report.count("<td>9876543210</td>") == 1


@pytest.mark.asyncio
async def test_add_invalid_isbn_is_bad_request(client):
    response = await client.post("/api/book", json={**BOOK_PAYLOAD, "isbn": "123"})

    assert response.status_code == 400
    assert response.json()["detail"] == "ISBN code is not valid."


@pytest.mark.asyncio
async def test_add_without_isbn_is_bad_request(client):
    payload = {key: value for key, value in BOOK_PAYLOAD.items() if key != "isbn"}

    response = await client.post("/api/book", json=payload)

    assert response.status_code == 400
    assert response.json()["detail"] == "A book cannot be tracked with no ISBN code."


@pytest.mark.asyncio
async def test_get_missing_book_is_not_found(client):
    response = await client.get("/api/book/9999999999")

    assert response.status_code == 404
    assert response.json()["detail"] == "The book does not exist."


@pytest.mark.asyncio
async def test_edit_book(client):
    """Test that PUT replaces every field, including authors."""
    await client.post("/api/book", json=BOOK_PAYLOAD)
    edited = {
        "isbn": "9876543210",
        "title": "Edited Title",
        "authors": "Edited Author, Another Author",
        "year": 2023,
        "price": "39.99",
        "category": "Non-Fiction",
        "cover": "Edited Cover Image",
    }

    response = await client.put("/api/book/9876543210", json=edited)

    assert response.status_code == 204
    body = (await client.get("/api/book/9876543210")).json()
    assert body["title"] == "Edited Title"
    assert body["authors"] == "Edited Author, Another Author"
    assert body["year"] == 2023
    assert body["category"] == "Non-Fiction"


@pytest.mark.asyncio
async def test_edit_missing_book_is_not_found(client, data_file):
    """Test that editing an absent book fails and leaves the file untouched."""
    before = data_file.read_bytes()

    response = await client.put("/api/book/9999999999", json=BOOK_PAYLOAD)

    assert response.status_code == 404
    assert data_file.read_bytes() == before


@pytest.mark.asyncio
async def test_delete_book(client):
    await client.post("/api/book", json=BOOK_PAYLOAD)

    response = await client.delete("/api/book/9876543210")

    assert response.status_code == 204
    assert (await client.get("/api/book/9876543210")).status_code == 404


@pytest.mark.asyncio
async def test_delete_missing_book_is_silent(client):
    response = await client.delete("/api/book/9999999999")

    assert response.status_code == 204


@pytest.mark.asyncio
async def test_report(client):
    """Test that the report is served as HTML with one row per book."""
    await client.post("/api/book", json=BOOK_PAYLOAD)
    await client.post("/api/book", json={**BOOK_PAYLOAD, "isbn": "1234567890", "title": "Second"})

    response = await client.get("/api/book/report")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "<html><body><h1>Bookstore Report</h1><table border='1'>" in response.text
    assert response.text.index("9876543210") < response.text.index("1234567890")
    assert response.text.count("<tr>") == 3


@pytest.mark.asyncio
async def test_storage_failure_is_internal_error(client, data_file):
    """Test that a corrupt document surfaces as a 500, not a domain error."""
    data_file.write_text("<bookstore>", encoding="utf-8")

    response = await client.get("/api/book/9876543210")

    assert response.status_code == 500


@pytest.mark.asyncio
async def test_price_keeps_every_digit(client):
    """Test that a price beyond float precision is returned exactly."""
    await client.post("/api/book", json={**BOOK_PAYLOAD, "price": "12345678901234567.89"})

    body = (await client.get("/api/book/9876543210")).json()

    assert body["price"] == "12345678901234567.89"
    assert Decimal(body["price"]) == Decimal("12345678901234567.89")


@pytest.mark.asyncio
async def test_control_character_is_rejected_and_document_stays_readable(client, data_file):
    """Test that text XML cannot hold is refused before it reaches the file."""
    before = data_file.read_bytes()

    response = await client.post("/api/book", json={**BOOK_PAYLOAD, "title": "bad\u0001title"})

    assert response.status_code == 422
    assert data_file.read_bytes() == before
    assert (await client.get("/api/book/report")).status_code == 200
    assert (await client.post("/api/book", json=BOOK_PAYLOAD)).status_code == 201


@pytest.mark.asyncio
async def test_edit_with_control_character_is_rejected(client):
    await client.post("/api/book", json=BOOK_PAYLOAD)

    response = await client.put(
        "/api/book/9876543210", json={**BOOK_PAYLOAD, "cover": "cover\u001f.jpg"}
    )

    assert response.status_code == 422
    assert (await client.get("/api/book/9876543210")).json()["cover"] == "Cover Image"


def test_book_routes_run_in_threadpool():
    """Test that file-backed routes are plain functions so the event loop is not blocked."""
    endpoints = [
        route.endpoint
        for route in app.routes
        if getattr(route, "path", "").startswith("/api/book")
    ]

    assert len(endpoints) == 5
    assert not any(inspect.iscoroutinefunction(endpoint) for endpoint in endpoints)
