"""
FastAPI router for the books bounded context.

All routes delegate to use cases. No business logic here.
Expected failures come back from the use cases as values and are
answered here; anything else propagates to the error translator.
"""

from fastapi import APIRouter, Depends, Query, Request, Response
from fastapi.responses import JSONResponse

from app.application.books.create_book import CreateBookUseCase
from app.application.books.delete_book import DeleteBookUseCase
from app.application.books.dtos import (
    CreateBookCommand,
    ListBooksQuery,
    SearchBooksQuery,
    UpdateBookCommand,
)
from app.application.books.get_book import GetBookUseCase
from app.application.books.list_books import ListBooksUseCase
from app.application.books.results import BookError, ErrorKind
from app.application.books.search_books import SearchBooksUseCase
from app.application.books.update_book import UpdateBookUseCase
from app.interfaces.books.dependencies import (
    get_create_book_use_case,
    get_delete_book_use_case,
    get_get_book_use_case,
    get_list_books_use_case,
    get_search_books_use_case,
    get_update_book_use_case,
)
from app.interfaces.books.schemas import (
    BookPayload,
    BookResponse,
    ErrorResponse,
    ProblemResponse,
    ValidationProblemResponse,
)
from app.shared.errors.handlers import VALIDATION_TITLE

router = APIRouter(
    prefix="/books",
    tags=["books"],
    responses={500: {"model": ErrorResponse}},
)


def _error_response(error: BookError) -> Response:
    """Answer an expected failure returned by a use case."""
    if error.kind is ErrorKind.VALIDATION:
        errors: dict[str, list[str]] = {}
        for violation in error.violations:
            errors.setdefault(violation.field, []).append(violation.message)
        body = ValidationProblemResponse(detail=VALIDATION_TITLE, errors=errors)
        return JSONResponse(status_code=400, content=body.model_dump())

    status_code = 404 if error.kind is ErrorKind.NOT_FOUND else 400
    if not error.message:
        return Response(status_code=status_code)
    return JSONResponse(
        status_code=status_code, content=ProblemResponse(detail=error.message).model_dump()
    )


@router.get(
    "",
    response_model=list[BookResponse],
    responses={400: {"model": ProblemResponse}, 404: {"model": ProblemResponse}},
    summary="List books",
    description="Return one page of books in insertion order.",
)
def list_books(
    page: int = Query(1, description="Page number, starting at 1"),
    page_size: int = Query(10, alias="pageSize", description="Books per page"),
    use_case: ListBooksUseCase = Depends(get_list_books_use_case),
):
    """Return a page of books."""
    result = use_case.execute(ListBooksQuery(page=page, page_size=page_size))
    if not result.ok:
        return _error_response(result.error)
    return [BookResponse.from_entity(book) for book in result.value]


@router.get(
    "/search",
    response_model=list[BookResponse],
    responses={400: {"model": ProblemResponse}},
    summary="Search books",
    description="Case-insensitive substring match on title or author.",
)
def search_books(
    query: str | None = Query(None, description="Text to look for"),
    use_case: SearchBooksUseCase = Depends(get_search_books_use_case),
):
    """Search books by title or author."""
    result = use_case.execute(SearchBooksQuery(query=query))
    if not result.ok:
        return _error_response(result.error)
    return [BookResponse.from_entity(book) for book in result.value]


@router.get(
    "/{book_id}",
    response_model=BookResponse,
    responses={404: {"description": "Book not found"}},
    summary="Get a book",
)
def get_book(
    book_id: int,
    use_case: GetBookUseCase = Depends(get_get_book_use_case),
):
    """Return the book with the given id."""
    result = use_case.execute(book_id)
    if not result.ok:
        return _error_response(result.error)
    return BookResponse.from_entity(result.value)


@router.post(
    "",
    response_model=BookResponse,
    status_code=201,
    responses={400: {"model": ValidationProblemResponse}},
    summary="Create a book",
    description="Store a new book. Any id in the body is ignored.",
)
def create_book(
    payload: BookPayload,
    request: Request,
    response: Response,
    use_case: CreateBookUseCase = Depends(get_create_book_use_case),
):
    """Create a book and point the Location header at it."""
    command = CreateBookCommand(
        title=payload.title,
        author=payload.author,
        publication_date=payload.publication_day(),
        price=payload.price,
    )
    result = use_case.execute(command)
    if not result.ok:
        return _error_response(result.error)

    book = result.value
    response.headers["Location"] = str(request.url_for("get_book", book_id=book.id))
    return BookResponse.from_entity(book)


@router.put(
    "/{book_id}",
    status_code=204,
    response_class=Response,
    responses={
        400: {"model": ValidationProblemResponse},
        404: {"description": "Book not found"},
    },
    summary="Replace a book",
    description="Overwrite title, author, publication date and price.",
)
def update_book(
    book_id: int,
    payload: BookPayload,
    use_case: UpdateBookUseCase = Depends(get_update_book_use_case),
):
    """Overwrite a book's fields. The body id must equal the path id."""
    command = UpdateBookCommand(
        book_id=book_id,
        payload_id=payload.id,
        title=payload.title,
        author=payload.author,
        publication_date=payload.publication_day(),
        price=payload.price,
    )
    result = use_case.execute(command)
    if not result.ok:
        return _error_response(result.error)
    return Response(status_code=204)


@router.delete(
    "/{book_id}",
    status_code=204,
    response_class=Response,
    responses={404: {"description": "Book not found"}},
    summary="Delete a book",
)
def delete_book(
    book_id: int,
    use_case: DeleteBookUseCase = Depends(get_delete_book_use_case),
):
    """Delete the book with the given id."""
    result = use_case.execute(book_id)
    if not result.ok:
        return _error_response(result.error)
    return Response(status_code=204)
