"""Book Routes — REST surface for /libros.

Invariants:
    - GET by id → 200 | 404; GET list → 200
    - POST → 201 with Location header | 400 on invalid body or unknown author
    - PUT → 204 | 404 | 400 on unknown author; DELETE → 204 | 404
"""

from fastapi import APIRouter, Depends, Request, Response, status

from biblioteca.db.context import LibraryContext
from biblioteca.infrastructure.database import get_library_context
from biblioteca.schemas.book import BookCreate, BookResponse, BookUpdate
from biblioteca.services.book_service import BookService

router = APIRouter(prefix="/libros", tags=["libros"])


def get_book_service(
    context: LibraryContext = Depends(get_library_context),
) -> BookService:
    return BookService(context)


@router.get("", response_model=list[BookResponse])
async def list_books(service: BookService = Depends(get_book_service)):
    """List every book."""
    return await service.list()


@router.get("/{book_id}", response_model=BookResponse)
async def get_book(
    book_id: int, service: BookService = Depends(get_book_service),
):
    """Get one book."""
    return await service.get(book_id)


@router.post(
    "", response_model=BookResponse, status_code=status.HTTP_201_CREATED,
)
async def create_book(
    body: BookCreate,
    request: Request,
    response: Response,
    service: BookService = Depends(get_book_service),
):
    """Create a book for an existing author."""
    book = await service.create(body)
    response.headers["Location"] = str(
        request.url_for("get_book", book_id=book.id),
    )
    return book


@router.put("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_book(
    book_id: int,
    body: BookUpdate,
    service: BookService = Depends(get_book_service),
):
    """Partially update a book."""
    await service.update(book_id, body)


@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_book(
    book_id: int, service: BookService = Depends(get_book_service),
):
    """Delete a book."""
    await service.delete(book_id)
