"""
CSV / JSON export of students and employees.
"""

import csv
import io
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Sequence

from sqlalchemy.orm import Session

from dormitory.core.logging import get_logger
from dormitory.core.security import PasswordHasher, get_password_hasher
from dormitory.repositories import EmployeeRepository, StudentRepository

logger = get_logger(__name__)

STUDENT_EXPORT_COLUMNS = (
    "student_id",
    "first_name",
    "second_name",
    "last_name",
    "email",
    "gender",
    "batch",
    "disability_status",
    "status",
)
EMPLOYEE_EXPORT_COLUMNS = (
    "employee_id",
    "first_name",
    "last_name",
    "email",
    "gender",
    "phone",
    "department",
    "role",
    "status",
)
PASSWORD_COLUMN = "default_password"


def render_csv(columns: Sequence[str], rows: Iterable[Dict[str, Any]]) -> str:
    """
    Render rows as CSV with a header line.

    Fields containing a comma, a double quote or a newline are quoted with
    inner quotes doubled; missing values become empty fields.
    """
    output = io.StringIO()
    writer = csv.DictWriter(
        output,
        fieldnames=list(columns),
        extrasaction="ignore",
        quoting=csv.QUOTE_MINIMAL,
        lineterminator="\n",
    )
    writer.writeheader()
    for row in rows:
        writer.writerow({column: "" if row.get(column) is None else row.get(column) for column in columns})
    return output.getvalue()


def export_filename(prefix: str) -> str:
    return f"{prefix}_export_{datetime.now(timezone.utc).date().isoformat()}.csv"


class CsvExportService:

    def __init__(self, db: Session, hasher: PasswordHasher = None):
        self.db = db
        self.students = StudentRepository(db)
        self.employees = EmployeeRepository(db)
        self.hasher = hasher or get_password_hasher()

    def _rows(self, records, include_passwords: bool) -> List[Dict[str, Any]]:
        rows = []
        for record in records:
            row = record.to_dict()
            if include_passwords:
                row[PASSWORD_COLUMN] = self.hasher.default_password(record.last_name)
            rows.append(row)
        return rows

    def student_rows(self, include_passwords: bool = False) -> List[Dict[str, Any]]:
        return self._rows(self.students.find_all(order_by=["student_id"]), include_passwords)

    def employee_rows(self, include_passwords: bool = False) -> List[Dict[str, Any]]:
        return self._rows(self.employees.find_all(order_by=["employee_id"]), include_passwords)

    def students_csv(self, include_passwords: bool = False) -> str:
        columns = list(STUDENT_EXPORT_COLUMNS) + ([PASSWORD_COLUMN] if include_passwords else [])
        rows = self.student_rows(include_passwords)
        logger.info(f"Exported {len(rows)} students as CSV", extra={"include_passwords": include_passwords})
        return render_csv(columns, rows)

    def employees_csv(self, include_passwords: bool = False) -> str:
        columns = list(EMPLOYEE_EXPORT_COLUMNS) + ([PASSWORD_COLUMN] if include_passwords else [])
        rows = self.employee_rows(include_passwords)
        logger.info(f"Exported {len(rows)} employees as CSV", extra={"include_passwords": include_passwords})
        return render_csv(columns, rows)
