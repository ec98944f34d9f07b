"""Interactive text menu for the address book."""

from __future__ import annotations

import argparse
import enum
import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from .contact import Contact
from .contact_manager import DEFAULT_DB_PATH, ContactManager
from .database import DatabaseError

_DIGITS = frozenset("0123456789")
_MAX_CHOICE = 5


class State(enum.Enum):
    """The screen the application is currently showing."""

    MENU = enum.auto()
    ADD_CONTACT = enum.auto()
    SHOW_CONTACT = enum.auto()
    FIND_CONTACT = enum.auto()
    CHANGE_CONTACT = enum.auto()
    DELETE_CONTACT = enum.auto()
    EXIT = enum.auto()


_CHOICES = {
    0: State.EXIT,
    1: State.ADD_CONTACT,
    2: State.SHOW_CONTACT,
    3: State.FIND_CONTACT,
    4: State.CHANGE_CONTACT,
    5: State.DELETE_CONTACT,
}

_MENU_TEXT = (
    "___________________MENU_______________\n"
    "What you want to do?\n"
    "0 - Exit,\n"
    "1 - Add new contact,\n"
    "2 - Show all contact,\n"
    "3 - Find contact,\n"
    "4 - Change contact\n"
    "5 - Delete contact.\n"
)


def _format_contact(contact: Contact) -> str:
    return (
        f"ID: {contact.id} ,NAME: {contact.name} ,COGNAME:{contact.cogname}"
        f" ,NUMBER PHON: {contact.number_phone} ,EMAIL: {contact.email}"
    )


class Application:
    """A menu-driven loop that reads commands and edits the contact list."""

    def __init__(
        self,
        manager: ContactManager | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self.manager = manager if manager is not None else ContactManager()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self.state = State.MENU
        self._handlers: dict[State, Callable[[], None]] = {
            State.MENU: self._menu,
            State.ADD_CONTACT: self._add_contact,
            State.SHOW_CONTACT: self._show_contacts,
            State.FIND_CONTACT: self._find_contact,
            State.CHANGE_CONTACT: self._change_contact,
            State.DELETE_CONTACT: self._delete_contact,
        }

    def run(self) -> None:
        """Run the menu loop until the user exits or input ends."""
        try:
            while self.state is not State.EXIT:
                self._handlers[self.state]()
        except EOFError:
            self.state = State.EXIT

    # input helpers

    def _say(self, text: str) -> None:
        self.stdout.write(text)

    def _complain(self, text: str) -> None:
        self.stderr.write(text + "\n")

    def _read_line(self, prompt: str) -> str:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def _read_int(self, prompt: str, valid: Callable[[int], bool], error: str) -> int:
        while True:
            text = self._read_line(prompt)
            try:
                value = int(text.strip())
            except ValueError:
                value = None
            if value is not None and valid(value):
                return value
            self._complain(error)

    def _enter_choice(self) -> int:
        return self._read_int(
            "Enter your choice: ",
            lambda value: 0 <= value <= _MAX_CHOICE,
            f"Error the choice must be between 0 and {_MAX_CHOICE} "
            "and must not contain letters",
        )

    def _enter_id(self) -> int:
        return self._read_int(
            "Enter id of contact: ",
            lambda value: value >= 0,
            "Error the id must not be negative and must not contain letters",
        )

    def _enter_name(self) -> str:
        name = self._read_line("Enter name of contact: ")
        while not name:
            self._complain("The name field cannot be empty")
            name = self._read_line("Enter name of contact: ")
        return name

    def _enter_cogname(self) -> str:
        return self._read_line("Enter cogname of contact: ")

    def _enter_number(self) -> str:
        number = self._read_line("Enter number of contact: ")
        while not number or not set(number) <= _DIGITS:
            self._complain("The number field cannot be empty and cannot contain letters")
            number = self._read_line("Enter number of contact: ")
        return number

    def _enter_email(self) -> str:
        return self._read_line("Enter email of contact: ")

    def _enter_fields(self) -> tuple[str, str, str, str]:
        name = self._enter_name()
        cogname = self._enter_cogname()
        number = self._enter_number()
        email = self._enter_email()
        return name, cogname, number, email

    # states

    def _menu(self) -> None:
        self._say(_MENU_TEXT)
        self.state = _CHOICES[self._enter_choice()]

    def _add_contact(self) -> None:
        self._say("___________________ADD CONTACT_________________\n")
        name, cogname, number, email = self._enter_fields()
        try:
            self.manager.add_contact(Contact(0, name, cogname, number, email))
        except DatabaseError as err:
            self._complain(f"Data insertion error: {err}")
        self.state = State.MENU

    def _show_contacts(self) -> None:
        self._say("___________________SHOW CONTACT_________________\n")
        try:
            contacts = self.manager.get_all_contacts()
        except DatabaseError as err:
            self._complain(f"Data sampling error: {err}")
            contacts = []
        if contacts:
            for contact in contacts:
                self._say(_format_contact(contact) + "\n")
        else:
            self._say("Contact list is empty!\n")
        self.state = State.MENU

    def _lookup(self, contact_id: int) -> Contact | None:
        try:
            return self.manager.get_contact_by_id(contact_id)
        except DatabaseError as err:
            self._complain(f"Data sampling error: {err}")
            return None

    def _find_contact(self) -> None:
        self._say("___________________FIND CONTACT_________________\n")
        contact = self._lookup(self._enter_id())
        if contact is None:
            self._say("Contact with this id not found\n")
        else:
            self._say(_format_contact(contact) + "\n")
        self.state = State.MENU

    def _change_contact(self) -> None:
        self._say("________________CHANGE CONTACT_______________\n")
        contact = self._lookup(self._enter_id())
        if contact is None:
            self._say("Contact with this id not found\n")
        else:
            name, cogname, number, email = self._enter_fields()
            contact.name = name
            contact.cogname = cogname
            contact.number_phone = number
            contact.email = email
            try:
                self.manager.update_contact(contact)
            except DatabaseError as err:
                self._complain(f"Data update error: {err}")
                self._say("Error in change contact!\n")
            else:
                self._say(f"Contact: {name} is change!\n")
        self.state = State.MENU

    def _delete_contact(self) -> None:
        self._say("__________________DELETE CONTACT_________________\n")
        contact_id = self._enter_id()
        try:
            self.manager.delete_contact(contact_id)
        except DatabaseError as err:
            self._complain(f"Error in delete data: {err}")
            self._say("Failed to delete contact\n")
        else:
            self._say(f"Contact with id {contact_id} is delete!\n")
        self.state = State.MENU


def main(argv: Sequence[str] | None = None) -> int:
    """Start the interactive address book."""
    parser = argparse.ArgumentParser(description="Keep an address book in SQLite.")
    parser.add_argument(
        "--db",
        default=DEFAULT_DB_PATH,
        help=f"database file (default: {DEFAULT_DB_PATH})",
    )
    args = parser.parse_args(argv)
    try:
        manager = ContactManager(args.db)
    except DatabaseError as err:
        print(err, file=sys.stderr)
        return 1
    with manager:
        Application(manager).run()
    return 0