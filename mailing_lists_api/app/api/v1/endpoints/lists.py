"""
API endpoints for mailing lists and their members.

Successful reads answer with JSON.  Deletions answer with a plain text
confirmation, and every lookup failure or conflict answers with a
plain text message naming the missing or conflicting entity.  Note
that conflicts (body name mismatch, member already present) use 404
like the lookup failures.
"""

from typing import Any, List

from fastapi import APIRouter, Body, Depends, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import ValidationError

from mailing_lists_api.app.core.errors import MailingListError
from mailing_lists_api.app.core.storage import Store, get_store
from mailing_lists_api.app.services.mailing_list_service import MailingListService

router = APIRouter()


def _error_response(exc: MailingListError) -> PlainTextResponse:
    return PlainTextResponse(exc.message, status_code=exc.status_code)


@router.get("", response_model=List[str], summary="List mailing list names")
async def list_names(store: Store = Depends(get_store)) -> List[str]:
    """Return the names of all mailing lists, or an empty array."""
    return await MailingListService.list_names(store)


@router.get("/{name}", summary="Get a mailing list")
async def get_list(name: str, store: Store = Depends(get_store)) -> Any:
    """Retrieve a mailing list by name.

    Returns 404 with a text message if no list has that name.
    """
    try:
        return await MailingListService.get_list(store, name)
    except MailingListError as e:
        return _error_response(e)


@router.get("/{name}/members", summary="Get the members of a mailing list")
async def get_members(name: str, store: Store = Depends(get_store)) -> Any:
    try:
        return await MailingListService.get_members(store, name)
    except MailingListError as e:
        return _error_response(e)


@router.delete(
    "/{name}",
    response_class=PlainTextResponse,
    summary="Delete a mailing list",
)
async def delete_list(name: str, store: Store = Depends(get_store)) -> PlainTextResponse:
    try:
        message = await MailingListService.delete_list(store, name)
    except MailingListError as e:
        return _error_response(e)
    return PlainTextResponse(message, status_code=status.HTTP_200_OK)


@router.delete(
    "/{name}/members/{email}",
    response_class=PlainTextResponse,
    summary="Remove a member from a mailing list",
)
async def delete_member(
    name: str,
    email: str,
    store: Store = Depends(get_store),
) -> PlainTextResponse:
    """Remove ``email`` from the list.

    Returns 404 if the list does not exist or if the email is not one
    of its members.
    """
    try:
        message = await MailingListService.delete_member(store, name, email)
    except MailingListError as e:
        return _error_response(e)
    return PlainTextResponse(message, status_code=status.HTTP_200_OK)


@router.put("/{name}", summary="Create a mailing list or merge members into it")
async def upsert_list(
    name: str,
    payload: Any = Body(..., description="Mailing list as {\"name\": ..., \"members\": [...]}"),
    store: Store = Depends(get_store),
) -> Any:
    """Create or update a mailing list.

    The ``name`` in the URL must match the ``name`` in the body,
    otherwise 404 is returned before the rest of the body is looked
    at.  A matching body with malformed ``members`` answers 422.  A new
    list answers 200; merging into an existing list answers 201.
    Either way the body is the whole updated collection.
    """
    try:
        created, collection = await MailingListService.upsert_list(store, name, payload)
    except MailingListError as e:
        return _error_response(e)
    except ValidationError as e:
        raise RequestValidationError(e.errors())
    status_code = status.HTTP_200_OK if created else status.HTTP_201_CREATED
    return JSONResponse(content=collection, status_code=status_code)


@router.put("/{name}/members/{email}", summary="Add a member to a mailing list")
async def add_member(
    name: str,
    email: str,
    store: Store = Depends(get_store),
) -> Any:
    """Add ``email`` to the list and return the whole collection with 201.

    Returns 404 if the list does not exist or already contains the email.
    """
    try:
        collection = await MailingListService.add_member(store, name, email)
    except MailingListError as e:
        return _error_response(e)
    return JSONResponse(content=collection, status_code=status.HTTP_201_CREATED)
