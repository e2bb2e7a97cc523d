"""Author Service — handler-level CRUD behaviour over a real (SQLite) unit-of-work.

Invariants:
    - Unknown ids raise ResourceNotFoundError for get/update/delete
    - Create assigns the generated id and stores every supplied field
    - Update never overwrites fields absent from the patch
    - Delete cascades to every book the author owns
"""

from datetime import date

import pytest
from sqlalchemy import select

from biblioteca.core.errors import IdentifierMismatchError, ResourceNotFoundError
from biblioteca.models.author import Author
from biblioteca.models.book import Book
from biblioteca.schemas.author import AuthorCreate, AuthorUpdate
from biblioteca.services.author_service import AuthorService


@pytest.fixture
def service(context):
    return AuthorService(context)


async def _fetch_author(session_factory, author_id):
    """Read through a fresh session so nothing comes from an identity map."""
    async with session_factory() as session:
        result = await session.execute(select(Author).where(Author.id == author_id))
        return result.scalar_one_or_none()


# ─── get ─────────────────────────────────────────────────────────

async def test_get_raises_not_found_when_author_does_not_exist(service):
    with pytest.raises(ResourceNotFoundError) as exc_info:
        await service.get(1)
    assert exc_info.value.http_status == 404
    assert exc_info.value.resource_type == "Author"


async def test_get_returns_author_when_author_exists(service, seed_author):
    author = await service.get(1)
    assert author.id == 1
    assert author.name == "Autor Test"
    assert author.nationality == "Argentina"


# ─── list ────────────────────────────────────────────────────────

async def test_list_is_empty_without_authors(service):
    assert list(await service.list()) == []


async def test_list_returns_single_author_after_one_insert(service, seed_author):
    authors = await service.list()
    assert len(authors) == 1
    assert authors[0].name == "Autor Test"


async def test_list_orders_by_id(service):
    for name in ("Borges", "Cortázar", "Sabato"):
        await service.create(AuthorCreate(name=name, nationality="Argentina"))
    authors = await service.list()
    assert [a.id for a in authors] == [1, 2, 3]


# ─── create ──────────────────────────────────────────────────────

async def test_create_returns_author_with_generated_id(service, test_session_factory):
    author = await service.create(AuthorCreate(
        name="Nuevo Autor", birth_date=date(1980, 1, 1), nationality="Argentina",
    ))
    assert author.id == 1
    assert author.name == "Nuevo Autor"

    stored = await _fetch_author(test_session_factory, author.id)
    assert stored.name == "Nuevo Autor"
    assert stored.birth_date == date(1980, 1, 1)
    assert stored.nationality == "Argentina"


async def test_create_allows_missing_birth_date(service):
    author = await service.create(AuthorCreate(name="Anónimo", nationality="España"))
    assert author.birth_date is None


# ─── update ──────────────────────────────────────────────────────

async def test_update_changes_only_supplied_fields(
    service, seed_author, test_session_factory,
):
    await service.update(seed_author.id, AuthorUpdate(name="Autor Actualizado"))

    stored = await _fetch_author(test_session_factory, seed_author.id)
    assert stored.name == "Autor Actualizado"
    assert stored.nationality == "Argentina"
    assert stored.birth_date == date(1980, 1, 1)


async def test_update_accepts_matching_id_echo(service, seed_author, test_session_factory):
    await service.update(
        seed_author.id, AuthorUpdate(id=seed_author.id, nationality="Uruguay"),
    )
    stored = await _fetch_author(test_session_factory, seed_author.id)
    assert stored.nationality == "Uruguay"
    assert stored.name == "Autor Test"


async def test_update_rejects_mismatched_id(service, seed_author, test_session_factory):
    with pytest.raises(IdentifierMismatchError):
        await service.update(seed_author.id, AuthorUpdate(id=99, name="Otro"))
    stored = await _fetch_author(test_session_factory, seed_author.id)
    assert stored.name == "Autor Test"


async def test_update_raises_not_found_for_unknown_author(service):
    with pytest.raises(ResourceNotFoundError):
        await service.update(42, AuthorUpdate(name="Nadie"))


async def test_update_unknown_author_reports_not_found_before_id_mismatch(service):
    with pytest.raises(ResourceNotFoundError):
        await service.update(999, AuthorUpdate(id=1, name="Nadie"))


async def test_get_with_id_beyond_integer_column_raises_not_found(service):
    with pytest.raises(ResourceNotFoundError):
        await service.get(2**63)


async def test_empty_patch_leaves_author_untouched(
    service, seed_author, test_session_factory,
):
    await service.update(seed_author.id, AuthorUpdate())
    stored = await _fetch_author(test_session_factory, seed_author.id)
    assert (stored.name, stored.nationality, stored.birth_date) == (
        "Autor Test", "Argentina", date(1980, 1, 1),
    )


# ─── delete ──────────────────────────────────────────────────────

async def test_delete_removes_author(service, seed_author, test_session_factory):
    await service.delete(seed_author.id)
    assert await _fetch_author(test_session_factory, seed_author.id) is None


async def test_delete_raises_not_found_for_unknown_author(service):
    with pytest.raises(ResourceNotFoundError):
        await service.delete(2)


async def test_delete_cascades_to_owned_books(
    service, seed_author, test_db, test_session_factory,
):
    for i in range(3):
        test_db.add(Book(
            title=f"Libro {i}", description="Descripción", author_id=seed_author.id,
        ))
    await test_db.commit()

    await service.delete(seed_author.id)

    async with test_session_factory() as session:
        result = await session.execute(
            select(Book).where(Book.author_id == seed_author.id),
        )
        assert result.scalars().all() == []


async def test_delete_keeps_books_of_other_authors(
    service, seed_author, test_db, test_session_factory,
):
    other = Author(name="Otro Autor", nationality="Chile")
    test_db.add(other)
    await test_db.commit()
    test_db.add_all([
        Book(title="Mío", description="d", author_id=seed_author.id),
        Book(title="Suyo", description="d", author_id=other.id),
    ])
    await test_db.commit()

    await service.delete(seed_author.id)

    async with test_session_factory() as session:
        result = await session.execute(select(Book))
        assert [b.title for b in result.scalars().all()] == ["Suyo"]
