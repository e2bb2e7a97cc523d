"""Author Routes — REST surface for /autores.

Invariants:
    - GET by id → 200 | 404; GET list → 200
    - POST → 201 with Location header | 400 on invalid body
    - PUT/DELETE → 204 | 404
"""

from fastapi import APIRouter, Depends, Request, Response, status

from biblioteca.db.context import LibraryContext
from biblioteca.infrastructure.database import get_library_context
from biblioteca.schemas.author import AuthorCreate, AuthorResponse, AuthorUpdate
from biblioteca.services.author_service import AuthorService

router = APIRouter(prefix="/autores", tags=["autores"])


def get_author_service(
    context: LibraryContext = Depends(get_library_context),
) -> AuthorService:
    return AuthorService(context)


@router.get("", response_model=list[AuthorResponse])
async def list_authors(service: AuthorService = Depends(get_author_service)):
    """List every author."""
    return await service.list()


@router.get("/{author_id}", response_model=AuthorResponse)
async def get_author(
    author_id: int, service: AuthorService = Depends(get_author_service),
):
    """Get one author."""
    return await service.get(author_id)


@router.post(
    "", response_model=AuthorResponse, status_code=status.HTTP_201_CREATED,
)
async def create_author(
    body: AuthorCreate,
    request: Request,
    response: Response,
    service: AuthorService = Depends(get_author_service),
):
    """Create an author; the Location header points at the new resource."""
    author = await service.create(body)
    response.headers["Location"] = str(
        request.url_for("get_author", author_id=author.id),
    )
    return author


@router.put("/{author_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_author(
    author_id: int,
    body: AuthorUpdate,
    service: AuthorService = Depends(get_author_service),
):
    """Partially update an author."""
    await service.update(author_id, body)


@router.delete("/{author_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_author(
    author_id: int, service: AuthorService = Depends(get_author_service),
):
    """Delete an author and, by cascade, all of their books."""
    await service.delete(author_id)
