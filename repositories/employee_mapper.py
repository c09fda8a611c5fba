"""
repositories/employee_mapper.py
-------------------------------
Record Mapper: turns one row of the `employees` table into an Employee.
"""

from typing import Sequence

from models.employee import Employee

# Column name -> Employee attribute, in table order.
COLUMN_TO_FIELD = {
    "id": "id",
    "name": "name",
    "firstname": "first_name",
    "homephone": "home_phone",
    "mobilephone": "mobile_phone",
    "workphone": "work_phone",
    "address": "address",
    "postalcode": "postal_code",
    "city": "city",
    "email": "email",
}

COLUMNS: tuple = tuple(COLUMN_TO_FIELD)
VALUE_COLUMNS: tuple = COLUMNS[1:]


def row_to_employee(row: Sequence, columns: Sequence[str]) -> Employee:
    """
    Build an Employee from one result row.

    Args:
        row: Row values, positionally aligned with ``columns``.
        columns: Column names reported by the cursor (any case).

    Returns:
        A new Employee. NULL columns and columns absent from the row stay None.
    """
    fields = {}
    for column, value in zip(columns, row):
        field = COLUMN_TO_FIELD.get(column.lower())
        if field is None or value is None:
            continue
        fields[field] = str(value) if field == "id" else value
    return Employee(**fields)
