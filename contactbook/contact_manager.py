"""Storage of contacts in an SQLite table."""

from __future__ import annotations

from types import TracebackType

from .contact import Contact
from .database import DatabaseManager, Row

DEFAULT_DB_PATH = "contact.db"

_CREATE_TABLE = """
    CREATE TABLE IF NOT EXISTS CONTACT(
        ID INTEGER PRIMARY KEY AUTOINCREMENT,
        NAME TEXT NOT NULL,
        COGNAME TEXT DEFAULT '',
        NUMBER_PHONE TEXT NOT NULL,
        EMAIL TEXT DEFAULT ''
    )
"""

_SELECT = "SELECT ID, NAME, COGNAME, NUMBER_PHONE, EMAIL FROM CONTACT"


def _contact_from_row(row: Row) -> Contact:
    contact_id, name, cogname, number_phone, email = row
    return Contact(int(contact_id), name, cogname, number_phone, email)


class ContactManager:
    """Adds, lists, finds, changes and deletes stored contacts."""

    def __init__(self, db_path: str = DEFAULT_DB_PATH) -> None:
        self._db = DatabaseManager(db_path)
        try:
            self._db.execute(_CREATE_TABLE)
        except BaseException:
            self._db.close()
            raise

    def add_contact(self, contact: Contact) -> Contact:
        """Store a new contact and return it with the id it was given."""
        self._db.execute(
            "INSERT INTO CONTACT(NAME, COGNAME, NUMBER_PHONE, EMAIL) VALUES(?, ?, ?, ?)",
            (contact.name, contact.cogname, contact.number_phone, contact.email),
        )
        (row,) = self._db.query("SELECT last_insert_rowid()")
        return Contact(
            int(row[0]),
            contact.name,
            contact.cogname,
            contact.number_phone,
            contact.email,
        )

    def get_all_contacts(self) -> list[Contact]:
        """Return every stored contact in id order."""
        return [_contact_from_row(row) for row in self._db.query(f"{_SELECT} ORDER BY ID")]

    def get_contact_by_id(self, contact_id: int) -> Contact | None:
        """Return the contact with this id, or None if there is none."""
        rows = self._db.query(f"{_SELECT} WHERE ID = ?", (contact_id,))
        return _contact_from_row(rows[0]) if rows else None

    def update_contact(self, contact: Contact) -> None:
        """Overwrite the stored fields of the contact with the same id."""
        self._db.execute(
            "UPDATE CONTACT SET NAME = ?, COGNAME = ?, NUMBER_PHONE = ?, EMAIL = ? WHERE ID = ?",
            (contact.name, contact.cogname, contact.number_phone, contact.email, contact.id),
        )

    def delete_contact(self, contact_id: int) -> None:
        """Remove the contact with this id; a missing id is not an error."""
        self._db.execute("DELETE FROM CONTACT WHERE ID = ?", (contact_id,))

    def close(self) -> None:
        self._db.close()

    def __enter__(self) -> ContactManager:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()