"""
Pydantic schemas for phonebook entries.

A person is a name and a phone number identified by a numeric id that
the service assigns on creation.  Both fields of the create payload
are optional at the schema level so that missing values reach the
service, which answers them with the phonebook's own error message.
"""

from typing import Optional

from pydantic import BaseModel, Field


class PersonCreate(BaseModel):
    """Schema for adding a person to the phonebook."""

    name: Optional[str] = Field(None, description="Display name; must be unique in the phonebook")
    number: Optional[str] = Field(None, description="Phone number, stored as given")


class Person(BaseModel):
    """Schema for reading a phonebook entry."""

    id: int
    name: str
    number: str
