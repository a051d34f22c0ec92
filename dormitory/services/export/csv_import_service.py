"""
Bulk CSV import of students and employees.

Rows are validated one by one; failures are collected in the result
instead of failing the upload.
"""

import csv
import io
import re
from typing import Any, Callable, Dict, List, Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from dormitory.core.exceptions import BadRequestError, BaseAppException
from dormitory.core.logging import get_logger
from dormitory.core.security import PasswordHasher, get_password_hasher
from dormitory.models.base.enums import (
    EMPLOYEE_ROLES,
    DisabilityStatus,
    EmployeeStatus,
    Gender,
    StudentStatus,
    values,
)
from dormitory.models.user import Employee, Student
from dormitory.repositories import EmployeeRepository, StudentRepository

logger = get_logger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

STUDENT_IMPORT_COLUMNS = (
    "student_id",
    "first_name",
    "second_name",
    "last_name",
    "email",
    "gender",
    "batch",
    "disability_status",
)
STUDENT_OPTIONAL_COLUMNS = ("second_name",)

EMPLOYEE_IMPORT_COLUMNS = (
    "employee_id",
    "first_name",
    "last_name",
    "email",
    "gender",
    "role",
    "phone",
    "department",
)
EMPLOYEE_OPTIONAL_COLUMNS = ("phone", "department")


class RowError(Exception):
    """A single CSV row failed validation."""


def parse_csv(content: str, expected: Sequence[str]) -> List[Dict[str, str]]:
    """
    Parse CSV text into trimmed row dicts.

    Raises:
        BadRequestError: If the file is empty or lacks expected columns
    """
    if not content.strip():
        raise BadRequestError("CSV file is empty")

    reader = csv.DictReader(io.StringIO(content.lstrip("\ufeff")))
    headers = [h.strip() for h in (reader.fieldnames or [])]
    missing = [column for column in expected if column not in headers]
    if missing:
        raise BadRequestError(
            f"Missing required columns: {', '.join(missing)}. Expected columns: {', '.join(expected)}",
            {"missing": missing, "expected": list(expected)},
        )

    rows = []
    for raw in reader:
        row = {(k or "").strip(): (v or "").strip() for k, v in raw.items() if k is not None}
        if any(row.values()):
            rows.append(row)

    if not rows:
        raise BadRequestError("CSV file is empty")
    return rows


def normalize_disability(value: str) -> str:
    value = (value or "").strip().lower()
    if value == "yes":
        return DisabilityStatus.PHYSICAL.value
    if value in values(DisabilityStatus):
        return value
    return DisabilityStatus.NONE.value


def _check_common(row: Dict[str, str], required: Sequence[str]) -> None:
    for field in required:
        if not row.get(field):
            raise RowError(f"Missing {field}")
    if not EMAIL_PATTERN.match(row["email"]):
        raise RowError("Invalid email format")
    if row["gender"].lower() not in values(Gender):
        raise RowError("Gender must be 'male' or 'female'")


class CsvImportService:

    def __init__(self, db: Session, hasher: Optional[PasswordHasher] = None):
        self.db = db
        self.students = StudentRepository(db)
        self.employees = EmployeeRepository(db)
        self.hasher = hasher or get_password_hasher()

    def _run(
        self,
        rows: List[Dict[str, str]],
        key: str,
        build: Callable[[Dict[str, str]], Any],
    ) -> Dict[str, Any]:
        result: Dict[str, Any] = {"total": len(rows), "created": 0, "skipped": 0, "errors": []}

        for row in rows:
            try:
                entity = build(row)
                self.db.add(entity)
                self.db.commit()
                result["created"] += 1
            except RowError as e:
                result["skipped"] += 1
                result["errors"].append(f"Row with {key} {row.get(key) or 'unknown'}: {e}")
            except BaseAppException as e:
                self.db.rollback()
                result["skipped"] += 1
                result["errors"].append(f"Row with {key} {row.get(key) or 'unknown'}: {e.message}")
            except SQLAlchemyError as e:
                self.db.rollback()
                logger.warning(f"Database error importing {key} {row.get(key)}: {type(e).__name__}")
                result["skipped"] += 1
                result["errors"].append(f"Row with {key} {row.get(key) or 'unknown'}: Could not be saved")

        return result

    def _build_student(self, row: Dict[str, str]) -> Student:
        required = [c for c in STUDENT_IMPORT_COLUMNS if c not in STUDENT_OPTIONAL_COLUMNS]
        _check_common(row, required)
        if self.students.find_by_student_id(row["student_id"]):
            raise RowError("Student already exists")
        if self.students.find_by_email(row["email"]):
            raise RowError("Email already exists")
        if not row["batch"].isdigit():
            raise RowError("Batch must be a number")

        password = self.hasher.default_password(row["last_name"])
        return Student(
            student_id=row["student_id"],
            first_name=row["first_name"],
            second_name=row.get("second_name") or None,
            last_name=row["last_name"],
            email=row["email"].lower(),
            gender=row["gender"].lower(),
            batch=row["batch"],
            disability_status=normalize_disability(row.get("disability_status")),
            status=StudentStatus.ACTIVE.value,
            password=self.hasher.hash(password),
        )

    def _build_employee(self, row: Dict[str, str]) -> Employee:
        required = [c for c in EMPLOYEE_IMPORT_COLUMNS if c not in EMPLOYEE_OPTIONAL_COLUMNS]
        _check_common(row, required)
        if self.employees.find_by_employee_id(row["employee_id"]):
            raise RowError("Employee already exists")
        if self.employees.find_by_email(row["email"]):
            raise RowError("Email already exists")
        role = row["role"].lower()
        if role not in EMPLOYEE_ROLES:
            raise RowError(f"Invalid role. Must be one of: {', '.join(EMPLOYEE_ROLES)}")

        password = self.hasher.default_password(row["last_name"])
        return Employee(
            employee_id=row["employee_id"],
            first_name=row["first_name"],
            last_name=row["last_name"],
            email=row["email"].lower(),
            gender=row["gender"].lower(),
            role=role,
            phone=row.get("phone") or None,
            department=row.get("department") or None,
            status=EmployeeStatus.ACTIVE.value,
            password=self.hasher.hash(password),
        )

    def import_students(self, content: str) -> Dict[str, Any]:
        rows = parse_csv(content, STUDENT_IMPORT_COLUMNS)
        result = self._run(rows, "student_id", self._build_student)
        logger.info(f"Student CSV import: {result['created']} created, {result['skipped']} skipped")
        return result

    def import_employees(self, content: str) -> Dict[str, Any]:
        rows = parse_csv(content, EMPLOYEE_IMPORT_COLUMNS)
        result = self._run(rows, "employee_id", self._build_employee)
        logger.info(f"Employee CSV import: {result['created']} created, {result['skipped']} skipped")
        return result
