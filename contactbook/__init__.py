"""A terminal address book that keeps contacts in an SQLite database."""

__version__ = "0.1.0"
__all__ = ["application", "contact", "contact_manager", "database"]