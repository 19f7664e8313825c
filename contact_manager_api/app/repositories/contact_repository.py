"""
SQLite access for the ``Contact`` table.

Every method opens its own connection through ``get_cursor`` so each
call runs in its own transaction.  All queries use parameterized
statements; the only interpolated SQL fragment is the ORDER BY clause,
which is looked up in a fixed whitelist.  ``sqlite3.Error`` is left
to propagate to the service layer.
"""

from __future__ import annotations

import sqlite3
from typing import List, Optional, Tuple

from contact_manager_api.app.core.db import get_cursor
from contact_manager_api.app.schemas.contact import (
    ContactCreate,
    ContactRead,
    PageRequest,
)

_COLUMNS = "id, name, email, address, telephone_number, postal_address"

_SORT_ORDERS = {
    "id ASC": "id ASC",
    "id DESC": "id DESC",
    "name ASC": "name COLLATE NOCASE ASC, id ASC",
    "name DESC": "name COLLATE NOCASE DESC, id ASC",
}


class ContactRepository:
    """Typed query calls over the ``Contact`` table."""

    @staticmethod
    def _order_by(page_request: PageRequest) -> str:
        return _SORT_ORDERS.get(page_request.sort, "id ASC")

    @classmethod
    def find_all(cls, page_request: PageRequest) -> Tuple[List[ContactRead], int]:
        """Return one page of contacts and the total number of rows."""
        with get_cursor() as cursor:
            total = cursor.execute("SELECT COUNT(*) FROM Contact").fetchone()[0]
            rows = cursor.execute(
                f"SELECT {_COLUMNS} FROM Contact ORDER BY {cls._order_by(page_request)} "
                "LIMIT ? OFFSET ?",
                (page_request.size, page_request.offset),
            ).fetchall()
        return [cls._row_to_contact(row) for row in rows], total

    @classmethod
    def find_by_name_containing(
        cls, keyword: str, page_request: PageRequest
    ) -> Tuple[List[ContactRead], int]:
        """Case-insensitive substring match on ``name``."""
        pattern = "%" + _escape_like(keyword.casefold()) + "%"
        where = "WHERE casefold(name) LIKE ? ESCAPE '\\'"
        with get_cursor() as cursor:
            total = cursor.execute(
                f"SELECT COUNT(*) FROM Contact {where}", (pattern,)
            ).fetchone()[0]
            rows = cursor.execute(
                f"SELECT {_COLUMNS} FROM Contact {where} "
                f"ORDER BY {cls._order_by(page_request)} LIMIT ? OFFSET ?",
                (pattern, page_request.size, page_request.offset),
            ).fetchall()
        return [cls._row_to_contact(row) for row in rows], total

    @classmethod
    def find_by_id(cls, contact_id: int) -> Optional[ContactRead]:
        with get_cursor() as cursor:
            row = cursor.execute(
                f"SELECT {_COLUMNS} FROM Contact WHERE id = ?", (contact_id,)
            ).fetchone()
        if row is None:
            return None
        return cls._row_to_contact(row)

    @classmethod
    def save(cls, contact: ContactCreate) -> ContactRead:
        """Insert the contact, or overwrite the row when ``contact.id`` is set."""
        values = (
            contact.name,
            contact.email,
            contact.address,
            contact.telephone_number,
            contact.postal_address,
        )
        with get_cursor() as cursor:
            if contact.id is None:
                cursor.execute(
                    """
                    INSERT INTO Contact (name, email, address, telephone_number, postal_address)
                    VALUES (?, ?, ?, ?, ?)
                    """,
                    values,
                )
                contact_id = cursor.lastrowid
            else:
                cursor.execute(
                    """
                    INSERT OR REPLACE INTO Contact
                        (id, name, email, address, telephone_number, postal_address)
                    VALUES (?, ?, ?, ?, ?, ?)
                    """,
                    (contact.id, *values),
                )
                contact_id = contact.id
            row = cursor.execute(
                f"SELECT {_COLUMNS} FROM Contact WHERE id = ?", (contact_id,)
            ).fetchone()
        return cls._row_to_contact(row)

    @classmethod
    def update(cls, contact: ContactRead) -> ContactRead:
        """Write every column of an existing row in place."""
        with get_cursor() as cursor:
            cursor.execute(
                """
                UPDATE Contact
                SET name = ?, email = ?, address = ?, telephone_number = ?, postal_address = ?
                WHERE id = ?
                """,
                (
                    contact.name,
                    contact.email,
                    contact.address,
                    contact.telephone_number,
                    contact.postal_address,
                    contact.id,
                ),
            )
            row = cursor.execute(
                f"SELECT {_COLUMNS} FROM Contact WHERE id = ?", (contact.id,)
            ).fetchone()
        return cls._row_to_contact(row)

    @staticmethod
    def delete_by_id(contact_id: int) -> bool:
        """Delete a row.  Returns ``True`` if a row was removed."""
        with get_cursor() as cursor:
            cursor.execute("DELETE FROM Contact WHERE id = ?", (contact_id,))
            affected = cursor.rowcount
        return affected > 0

    @staticmethod
    def _row_to_contact(row: sqlite3.Row) -> ContactRead:
        return ContactRead(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            address=row["address"],
            telephone_number=row["telephone_number"],
            postal_address=row["postal_address"],
        )


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
