from __future__ import annotations

import csv
import io
import json
from datetime import date

import pytest

from conftest import make_employee
from roster.core.errors import ImportFormatError
from roster.models.employee import EmergencyContact
from roster.services.export_encoder import CSV_HEADERS, from_json, to_csv, to_json

EXPECTED_HEADER = (
    "ID,First Name,Last Name,Email,Phone,Department,Role,Status,Contract Type,Hire Date,Probation,"
    "Probation End Date,Supervisor,Emergency Contact Name,Emergency Contact Relationship,"
    "Emergency Contact Phone,Emergency Contact Email"
)


@pytest.fixture
def sample():
    return [
        make_employee(
            "emp_1",
            first_name="John",
            last_name="Doe",
            email="john@x.com",
            department_id="dept_eng",
            role_id="role_swe",
            hire_date=date(2024, 1, 15),
            probation_end_date=date(2024, 7, 15),
            supervisor_id="emp_9",
            emergency_contact=EmergencyContact(
                name="Jane Doe", relationship="Spouse", phone="+1-555-0102", email="jane@x.com"
            ),
        ),
        make_employee("emp_2", first_name='Dwayne "The Rock"', department_id="dept_gone"),
    ]


def test_to_json_is_pretty_camel_case_array(sample):
    text = to_json(sample)
    data = json.loads(text)

    assert text.startswith("[\n  {")
    assert len(data) == 2
    assert list(data[0])[:4] == ["id", "firstName", "lastName", "email"]
    assert list(data[0])[-2:] == ["createdAt", "updatedAt"]
    assert data[0]["hireDate"] == "2024-01-15"
    assert data[0]["emergencyContact"]["relationship"] == "Spouse"


def test_json_round_trip(sample):
    assert from_json(to_json(sample)) == sample


def test_from_json_rejects_garbage():
    with pytest.raises(ImportFormatError):
        from_json("{not json")
    with pytest.raises(ImportFormatError):
        from_json('{"id": "emp_1"}')
    with pytest.raises(ImportFormatError):
        from_json('[{"id": "emp_1"}]')


def test_csv_header_row(sample):
    lines = to_csv(sample).splitlines()

    assert lines[0] == EXPECTED_HEADER
    assert lines[0].split(",") == CSV_HEADERS


def test_csv_row_quotes_every_field_and_resolves_names(sample, departments, roles):
    lines = to_csv(sample, departments, roles).splitlines()

    assert lines[1] == (
        '"emp_1","John","Doe","john@x.com","+1-555-0000","Engineering","Software Engineer",'
        '"active","permanent","2024-01-15","Yes","2024-07-15","emp_9","Jane Doe","Spouse",'
        '"+1-555-0102","jane@x.com"'
    )


def test_csv_unresolved_reference_and_missing_optionals(sample, departments, roles):
    rows = list(csv.reader(io.StringIO(to_csv(sample, departments, roles))))
    second = dict(zip(rows[0], rows[2]))

    assert second["Department"] == ""
    assert second["Probation"] == "No"
    assert second["Probation End Date"] == ""
    assert second["Supervisor"] == ""
    assert second["Emergency Contact Email"] == ""


def test_csv_doubles_embedded_quotes(sample):
    text = to_csv(sample)

    assert '"Dwayne ""The Rock"""' in text
    rows = list(csv.reader(io.StringIO(text)))
    assert rows[2][1] == 'Dwayne "The Rock"'


def test_csv_one_line_per_employee(sample):
    assert len(to_csv(sample).splitlines()) == 3
    assert to_csv([]) == EXPECTED_HEADER + "\n"
