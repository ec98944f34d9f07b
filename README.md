# contactbook

contactbook is a small address book that runs in the terminal. Each contact has an
id, a name, a cogname, a phone number and an e-mail address. Contacts are kept in a
local SQLite database.

## Installation

```
pip install .
```

To install the test tools as well:

```
pip install .[test]
```

## Usage

```
contactbook
```

By default the program opens `contact.db` in the current directory and creates it if
it does not exist. To use a different file, pass `--db`:

```
contactbook --db my-contacts.db
```

It then shows a menu:

```
0 - Exit,
1 - Add new contact,
2 - Show all contact,
3 - Find contact,
4 - Change contact
5 - Delete contact.
```

When it asks for input, it checks the answer and asks again if the answer is not valid:

- The menu choice must be a number from 0 to 5.
- An id must be a non-negative number.
- The name must not be empty.
- The phone number must be made of digits only and must not be empty.
- The cogname and the e-mail address may be left blank.

The program stops when you choose 0 or when its input ends. If the database file
cannot be opened, it prints the error and exits with status 1.

## Using it as a library

```python
from contactbook.contact import Contact
from contactbook.contact_manager import ContactManager

with ContactManager("contacts.db") as manager:
    stored = manager.add_contact(Contact(0, "Ada", "Lovelace", "12345", "ada@example.com"))
    print(stored.id)
    for contact in manager.get_all_contacts():
        print(contact)
```

- `Contact` (in `contactbook.contact`) is a dataclass with the fields `id`, `name`,
  `cogname`, `number_phone` and `email`. An `id` of 0 means the contact has not been
  stored yet.
- `ContactManager` (in `contactbook.contact_manager`) stores contacts in a `CONTACT`
  table, creating it when needed:
  - `add_contact(contact)` stores a new contact and returns a copy with its new id.
  - `get_all_contacts()` returns every contact in id order.
  - `get_contact_by_id(contact_id)` returns the contact, or `None` if there is none.
  - `update_contact(contact)` overwrites the stored fields of the contact with the same id.
  - `delete_contact(contact_id)` removes a contact; a missing id is not an error.
  - `close()` closes the database; the manager can also be used in a `with` block.
- `DatabaseManager` (in `contactbook.database`) is a thin layer over one SQLite file.
  `execute(sql, params)` runs a statement and returns the affected row count, and
  `query(sql, params)` returns rows as tuples of text, with NULL shown as `"NULL"`.
  Both raise `DatabaseError` when a statement fails or the database is closed.
- `Application` (in `contactbook.application`) is the interactive menu. It takes a
  `ContactManager` and optional `stdin`, `stdout` and `stderr` streams, and `run()`
  runs the menu until the user exits.

## Running the tests

```
pytest
```