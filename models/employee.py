"""
models/employee.py
------------------
Domain model for employee records.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Employee:
    """
    Represents a single employee record.

    Attributes:
        name: Family name.
        first_name: Given name.
        home_phone: Personal phone number.
        mobile_phone: Mobile phone number.
        work_phone: Work phone number.
        address: Street address.
        postal_code: Postal code.
        city: City.
        email: Email address.
        id: Identifier generated by the store (None for new records).
    """
    name: Optional[str] = None
    first_name: Optional[str] = None
    home_phone: Optional[str] = None
    mobile_phone: Optional[str] = None
    work_phone: Optional[str] = None
    address: Optional[str] = None
    postal_code: Optional[str] = None
    city: Optional[str] = None
    email: Optional[str] = None
    id: Optional[str] = None

    def has_id(self) -> bool:
        """Returns True if the record carries a non-empty identifier."""
        return bool(self.id)

    def values(self) -> tuple:
        """The nine attribute values, in column order."""
        return (
            self.name,
            self.first_name,
            self.home_phone,
            self.mobile_phone,
            self.work_phone,
            self.address,
            self.postal_code,
            self.city,
            self.email,
        )

    def __str__(self) -> str:
        full_name = " ".join(p for p in (self.first_name, self.name) if p)
        return f"#{self.id or '-'} | {full_name or '?'} | {self.email or ''}"
