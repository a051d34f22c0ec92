"""
Employee endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile
from sqlalchemy.orm import Session

from dormitory.api import deps
from dormitory.core.constants import MANAGEMENT_ROLES
from dormitory.core.permissions import Principal, require_self_or_role
from dormitory.models.base.enums import UserType
from dormitory.schemas.common import SuccessResponse
from dormitory.schemas.employee import EmployeeCreate, EmployeeUpdate
from dormitory.services.export import CsvImportService
from dormitory.services.user import EmployeeService

router = APIRouter(prefix="/employees", tags=["Employees"])

ADMIN_ONLY = ("admin",)


@router.get("")
def list_employees(
    role: Optional[str] = None,
    status: Optional[str] = None,
    principal: Principal = Depends(deps.require_roles(*MANAGEMENT_ROLES)),
    db: Session = Depends(deps.get_db),
):
    employees = EmployeeService(db).list_employees(role=role, status=status)
    return SuccessResponse.create(employees)


@router.post("", status_code=201)
def create_employee(
    payload: EmployeeCreate,
    principal: Principal = Depends(deps.require_roles(*ADMIN_ONLY)),
    db: Session = Depends(deps.get_db),
):
    employee = EmployeeService(db).create_employee(payload)
    return SuccessResponse.create(employee, message="Employee created successfully")


@router.post("/upload-csv")
def upload_employees_csv(
    file: UploadFile = File(...),
    principal: Principal = Depends(deps.require_roles(*MANAGEMENT_ROLES)),
    db: Session = Depends(deps.get_db),
):
    content = deps.read_csv_upload(file)
    result = CsvImportService(db).import_employees(content)
    return SuccessResponse.create(
        result,
        message=f"Imported {result['created']} employees, skipped {result['skipped']}",
    )


@router.get("/{employee_id}")
def get_employee(
    employee_id: str,
    principal: Principal = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
):
    require_self_or_role(principal, employee_id, UserType.EMPLOYEE, MANAGEMENT_ROLES)
    return SuccessResponse.create(EmployeeService(db).get_employee(employee_id))


@router.put("/{employee_id}")
def update_employee(
    employee_id: str,
    payload: EmployeeUpdate,
    principal: Principal = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
):
    require_self_or_role(principal, employee_id, UserType.EMPLOYEE, MANAGEMENT_ROLES)
    employee = EmployeeService(db).update_employee(principal, employee_id, payload)
    return SuccessResponse.create(employee, message="Employee updated successfully")


@router.delete("/{employee_id}")
def delete_employee(
    employee_id: str,
    principal: Principal = Depends(deps.require_roles(*ADMIN_ONLY)),
    db: Session = Depends(deps.get_db),
):
    EmployeeService(db).delete_employee(principal, employee_id)
    return SuccessResponse.create(None, message="Employee deleted successfully")


@router.post("/{employee_id}/reset-password")
def reset_employee_password(
    employee_id: str,
    principal: Principal = Depends(deps.require_roles(*ADMIN_ONLY)),
    db: Session = Depends(deps.get_db),
):
    new_password = EmployeeService(db).reset_password(employee_id)
    return SuccessResponse.create({"new_password": new_password}, message="Password reset successfully")
