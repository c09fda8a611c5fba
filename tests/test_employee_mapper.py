from models.employee import Employee
from repositories.employee_mapper import COLUMNS, VALUE_COLUMNS, row_to_employee


def test_maps_every_column():
    row = (7, "Martin", "Alice", "01", "06", "09", "12 rue", "75002", "Paris", "a@x.fr")
    employee = row_to_employee(row, COLUMNS)
    assert employee == Employee(
        id="7",
        name="Martin",
        first_name="Alice",
        home_phone="01",
        mobile_phone="06",
        work_phone="09",
        address="12 rue",
        postal_code="75002",
        city="Paris",
        email="a@x.fr",
    )


def test_null_columns_stay_absent():
    row = ("e1", "Martin") + (None,) * 8
    employee = row_to_employee(row, COLUMNS)
    assert employee.id == "e1"
    assert employee.name == "Martin"
    assert employee.email is None
    assert employee.city is None


def test_column_names_are_case_insensitive():
    employee = row_to_employee(("e1", "Paris"), ["ID", "CITY"])
    assert employee.id == "e1"
    assert employee.city == "Paris"


def test_unknown_columns_are_ignored():
    employee = row_to_employee(("e1", "x"), ["id", "created_at"])
    assert employee == Employee(id="e1")


def test_value_columns_match_entity_order():
    employee = Employee(*(f"v{i}" for i in range(len(VALUE_COLUMNS))))
    mapped = row_to_employee(("e1",) + employee.values(), COLUMNS)
    assert mapped.values() == employee.values()
