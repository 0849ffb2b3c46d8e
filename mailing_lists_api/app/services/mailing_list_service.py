"""
Business logic for mailing lists and their members.

Every operation follows the same shape: load the complete collection
from the store, work on the in‑memory copy and, for mutations, save
the whole collection back before returning.  Mutations run inside
``store.transaction()`` and raise before saving anything when a
lookup fails, so a request either applies its change completely or
not at all.

Names and emails are matched by exact string comparison.  Records
without a usable ``name`` may exist in files written by other tools;
they are never matched and are written back untouched.
"""

import logging
from typing import Any, Dict, List, Tuple

from mailing_lists_api.app.core.errors import (
    MailingListNotFoundError,
    MemberExistsError,
    MemberNotFoundError,
    NameMismatchError,
    StorageCorruptError,
)
from mailing_lists_api.app.core.storage import Collection, Store
from mailing_lists_api.app.schemas.mailing_list import MailingList


logger = logging.getLogger(__name__)


def _record_name(record: Any) -> Any:
    if isinstance(record, dict):
        return record.get("name")
    return None


def _find_index(collection: Collection, name: str) -> int:
    """Return the index of the record called ``name`` or ``-1``."""
    for index, record in enumerate(collection):
        if _record_name(record) == name:
            return index
    return -1


def _members_of(record: Dict[str, Any]) -> List[Any]:
    """Return the member list of ``record``, ``[]`` if it has none.

    A ``members`` value that is not an array means the data file was
    written with a different layout; that is reported as corruption.
    """
    members = record.get("members")
    if members is None:
        return []
    if not isinstance(members, list):
        raise StorageCorruptError(
            f'Mailing List "{record.get("name")}" has members of type '
            f"{type(members).__name__}, expected an array"
        )
    return members


class MailingListService:
    """Service for reading and updating the mailing list collection."""

    @classmethod
    async def get_collection(cls, store: Store) -> Collection:
        """Return the stored collection unchanged."""
        return store.load()

    @classmethod
    async def list_names(cls, store: Store) -> List[str]:
        """Return the names of all records whose name is a non‑empty string."""
        collection = store.load()
        names = (_record_name(record) for record in collection)
        return [name for name in names if isinstance(name, str) and name]

    @classmethod
    async def get_list(cls, store: Store, name: str) -> Dict[str, Any]:
        collection = store.load()
        index = _find_index(collection, name)
        if index == -1:
            raise MailingListNotFoundError(f'A Mailing List named "{name}" was not found')
        return collection[index]

    @classmethod
    async def get_members(cls, store: Store, name: str) -> List[str]:
        record = await cls.get_list(store, name)
        return _members_of(record)

    @classmethod
    async def delete_list(cls, store: Store, name: str) -> str:
        """Remove the list called ``name`` and return a confirmation message."""
        with store.transaction():
            collection = store.load()
            index = _find_index(collection, name)
            if index == -1:
                raise MailingListNotFoundError(
                    f'A Mailing List named "{name}" does not exist to delete'
                )
            del collection[index]
            store.save(collection)
        logger.info("Deleted mailing list %r", name)
        return f'A Mailing List named "{name}" was successfully deleted'

    @classmethod
    async def delete_member(cls, store: Store, name: str, email: str) -> str:
        """Remove ``email`` from the members of list ``name``.

        Only the first matching entry is removed.  Raises
        ``MailingListNotFoundError`` when the list does not exist and
        ``MemberNotFoundError`` when the email is not one of its members.
        """
        with store.transaction():
            collection = store.load()
            index = _find_index(collection, name)
            if index == -1:
                raise MailingListNotFoundError(f'There is no Mailing List named "{name}"')
            members = _members_of(collection[index])
            if email not in members:
                raise MemberNotFoundError(
                    f'There is no email "{email}" in the Mailing List named "{name}" to delete.'
                )
            members.remove(email)
            collection[index]["members"] = members
            store.save(collection)
        logger.info("Removed %r from mailing list %r", email, name)
        return f'The email {email} from the Mailing List named "{name}" was successfully deleted'

    @classmethod
    async def upsert_list(
        cls,
        store: Store,
        name: str,
        payload: Any,
    ) -> Tuple[bool, Collection]:
        """Create the list ``name`` or merge new members into it.

        ``payload`` is the decoded request body.  Its ``name`` must equal
        the name in the URL whether or not the list exists; anything
        else, a missing or non‑string name included, raises
        ``NameMismatchError``.  Only then is the body validated as a
        ``MailingList``, so malformed members surface as a pydantic
        ``ValidationError``.

        A missing list is appended with the members from the body.  For
        an existing list, members from the body that it does not contain
        yet are appended in body order; existing members keep their
        position and no duplicate is introduced.

        Returns
        -------
        Tuple[bool, Collection]
            ``True`` if the list was created, ``False`` if it was merged,
            together with the saved collection.
        """
        body_name = payload.get("name") if isinstance(payload, dict) else None
        if not isinstance(body_name, str) or name != body_name:
            raise NameMismatchError(
                f'The URL parameter "name": "{name}" does not match '
                f'the PUT body "name": "{body_name}"'
            )
        data = MailingList(**payload)
        with store.transaction():
            collection = store.load()
            index = _find_index(collection, name)
            if index == -1:
                collection.append(data.to_record())
                created = True
            else:
                members = _members_of(collection[index])
                for email in data.members:
                    if email not in members:
                        members.append(email)
                collection[index]["members"] = members
                created = False
            store.save(collection)
        logger.info("%s mailing list %r", "Created" if created else "Merged into", name)
        return created, collection

    @classmethod
    async def add_member(cls, store: Store, name: str, email: str) -> Collection:
        """Append ``email`` to the members of list ``name``.

        Raises ``MailingListNotFoundError`` when the list does not exist
        and ``MemberExistsError`` when the email is already a member.
        """
        with store.transaction():
            collection = store.load()
            index = _find_index(collection, name)
            if index == -1:
                raise MailingListNotFoundError(f'A Mailing List named "{name}" does not exist')
            members = _members_of(collection[index])
            if email in members:
                raise MemberExistsError(
                    f'The email "{email}" already exists in the members '
                    f'of the Mailing List "{name}"'
                )
            members.append(email)
            collection[index]["members"] = members
            store.save(collection)
        logger.info("Added %r to mailing list %r", email, name)
        return collection
