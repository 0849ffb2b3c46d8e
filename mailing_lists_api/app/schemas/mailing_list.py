"""
Pydantic schemas for mailing lists.

A mailing list is a uniquely named, ordered sequence of member email
addresses.  Emails are kept as plain strings and compared exactly, so
no ``EmailStr`` normalisation is applied.
"""

from typing import List

from pydantic import BaseModel, Field


class MailingList(BaseModel):
    """Schema of a mailing list as sent in the body of ``PUT /lists/{name}``."""

    name: str = Field(..., min_length=1, description="Unique name of the mailing list")
    members: List[str] = Field(
        default_factory=list,
        description="Member email addresses in insertion order",
    )

    def to_record(self) -> dict:
        """Return the plain dictionary written to the data file."""
        return {"name": self.name, "members": list(self.members)}
