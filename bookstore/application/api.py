"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

from .config import settings
from ..domain.entities.book import BookDTO
from ..domain.services.book_service import BookService
from ..domain.services.exceptions import BookServiceError
from ..domain.services.report_generator import ReportGenerator
from ..infrastructure.xml_book_repository import XmlBookRepository
from ..infrastructure.xml_file_store import XmlFileStore

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    data = settings.data_configuration
    if data.create_if_missing:
        XmlFileStore(data.file_path).initialize()
    logger.info(f"Serving bookstore document {data.file_path}")
    yield


# Create FastAPI app instance
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    debug=settings.debug,
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_book_service() -> BookService:
    """Build a book service over the configured XML file for one request."""
    store = XmlFileStore(settings.data_configuration.file_path)
    return BookService(
        book_repository=XmlBookRepository(store),
        report_generator=ReportGenerator(),
    )


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "app": settings.app_name,
        "version": settings.app_version,
        "data_file": settings.data_configuration.file_path,
    }


# Registered before the {isbn} routes so "report" is never read as an ISBN.
@app.get("/api/book/report", response_class=HTMLResponse)
def get_report(service: BookService = Depends(get_book_service)):
    """Render every stored book as an HTML table."""
    try:
        return HTMLResponse(content=service.generate_report())
    except Exception as e:
        logger.error(f"Error generating report: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@app.get("/api/book/{isbn}", response_model=BookDTO)
def get_book(isbn: str, service: BookService = Depends(get_book_service)):
    """Get a book by ISBN.

    Args:
        isbn: The ISBN code of the book.

    Returns:
        The stored book.
    """
    try:
        return service.get_book_by_isbn(isbn)
    except BookServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"Error getting book {isbn}: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@app.post("/api/book", response_model=BookDTO, status_code=status.HTTP_201_CREATED)
def add_book(
    book_dto: BookDTO,
    response: Response,
    service: BookService = Depends(get_book_service),
):
    """Track a new book.

    Posting an ISBN that is already stored returns the stored book unchanged.
    """
    try:
        book = service.add_book(book_dto)
    except BookServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"Error adding book {book_dto.isbn}: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")

    response.headers["Location"] = f"/api/book/{book.isbn}"
    return book


@app.put("/api/book/{isbn}", status_code=status.HTTP_204_NO_CONTENT)
def edit_book(
    isbn: str,
    book_dto: BookDTO,
    service: BookService = Depends(get_book_service),
):
    """Replace every field of an existing book."""
    try:
        service.edit_book(isbn, book_dto)
    except BookServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.error(f"Error editing book {isbn}: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@app.delete("/api/book/{isbn}", status_code=status.HTTP_204_NO_CONTENT)
def delete_book(isbn: str, service: BookService = Depends(get_book_service)):
    """Delete a book. Unknown ISBN codes are ignored."""
    try:
        service.delete_book(isbn)
    except Exception as e:
        logger.error(f"Error deleting book {isbn}: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")

    return Response(status_code=status.HTTP_204_NO_CONTENT)
