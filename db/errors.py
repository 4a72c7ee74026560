"""
db/errors.py
------------
Exceptions raised by the database layer.
"""


class StoreError(Exception):
    """The store rejected a statement or could not be reached."""


class ConstraintError(StoreError):
    """A statement violated a table constraint (e.g. duplicate email)."""
