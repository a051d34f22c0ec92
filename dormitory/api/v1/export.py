"""
CSV / JSON export of students and employees.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response
from sqlalchemy.orm import Session

from dormitory.api import deps
from dormitory.core.constants import MANAGEMENT_ROLES
from dormitory.core.exceptions import BadRequestError
from dormitory.core.permissions import Principal
from dormitory.services.export import CsvExportService, export_filename

router = APIRouter(prefix="/export", tags=["Export"])

STUDENT_EXPORT_ROLES = ("admin", "directorate", "coordinator", "registrar")
EXPORT_FORMATS = ("csv", "json")


def _csv_response(content: str, prefix: str) -> Response:
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{export_filename(prefix)}"'},
    )


def _json_body(rows) -> dict:
    return {
        "success": True,
        "data": rows,
        "count": len(rows),
        "exported_at": datetime.now(timezone.utc).isoformat(),
    }


def _check_format(export_format: str) -> str:
    export_format = export_format.lower()
    if export_format not in EXPORT_FORMATS:
        raise BadRequestError("Invalid format. Use csv or json")
    return export_format


@router.get("/students")
def export_students(
    export_format: str = Query(default="csv", alias="format"),
    include_passwords: bool = Query(default=False, alias="includePasswords"),
    principal: Principal = Depends(deps.require_roles(*STUDENT_EXPORT_ROLES)),
    db: Session = Depends(deps.get_db),
):
    export_format = _check_format(export_format)
    include_passwords = include_passwords and principal.is_admin
    service = CsvExportService(db)

    if export_format == "json":
        return _json_body(service.student_rows(include_passwords))
    return _csv_response(service.students_csv(include_passwords), "students")


@router.get("/employees")
def export_employees(
    export_format: str = Query(default="csv", alias="format"),
    include_passwords: bool = Query(default=False, alias="includePasswords"),
    principal: Principal = Depends(deps.require_roles(*MANAGEMENT_ROLES)),
    db: Session = Depends(deps.get_db),
):
    export_format = _check_format(export_format)
    include_passwords = include_passwords and principal.is_admin
    service = CsvExportService(db)

    if export_format == "json":
        return _json_body(service.employee_rows(include_passwords))
    return _csv_response(service.employees_csv(include_passwords), "employees")
