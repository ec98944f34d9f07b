"""The contact record kept in the address book."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Contact:
    """A single address-book entry.

    An ``id`` of 0 means the contact has not been stored yet.
    """

    id: int = 0
    name: str = ""
    cogname: str = ""
    number_phone: str = ""
    email: str = ""

    def __str__(self) -> str:
        return (
            f"ID: {self.id} ,NAME: {self.name} ,COGNAME: {self.cogname}"
            f" ,NUMBER PHONE: {self.number_phone} ,EMAIL: {self.email}."
        )