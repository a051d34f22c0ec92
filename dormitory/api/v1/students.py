"""
Student endpoints, including the per-student views and CSV upload.
"""

from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile
from sqlalchemy.orm import Session

from dormitory.api import deps
from dormitory.core.constants import MANAGEMENT_ROLES, REGISTRY_ROLES, STUDENT_LIST_ROLES
from dormitory.core.permissions import Principal, require_self_or_role, require_staff_or_owner
from dormitory.models.base.enums import UserType
from dormitory.schemas.common import PaginationParams, SuccessResponse
from dormitory.schemas.student import (
    EmergencyContactPayload,
    StudentBulkAction,
    StudentCreate,
    StudentUpdate,
)
from dormitory.services.export import CsvImportService
from dormitory.services.user import StudentService

router = APIRouter(prefix="/students", tags=["Students"])

PASSWORD_RESET_ROLES = ("admin", "registrar")


@router.get("")
def list_students(
    search: Optional[str] = None,
    status: Optional[str] = None,
    pagination: PaginationParams = Depends(deps.get_pagination_params),
    principal: Principal = Depends(deps.require_roles(*STUDENT_LIST_ROLES)),
    db: Session = Depends(deps.get_db),
):
    students, meta = StudentService(db).list_students(pagination, search=search, status=status)
    return SuccessResponse.create(students, pagination=meta.to_response())


@router.post("", status_code=201)
def create_student(
    payload: StudentCreate,
    principal: Principal = Depends(deps.require_roles(*REGISTRY_ROLES)),
    db: Session = Depends(deps.get_db),
):
    student = StudentService(db).create_student(payload)
    return SuccessResponse.create(student, message="Student created successfully")


@router.put("")
def bulk_update_students(
    payload: StudentBulkAction,
    principal: Principal = Depends(deps.require_roles(*REGISTRY_ROLES)),
    db: Session = Depends(deps.get_db),
):
    count = StudentService(db).bulk_update_status(payload.action)
    return SuccessResponse.create({"count": count}, message=f"Updated {count} students")


@router.post("/upload-csv")
def upload_students_csv(
    file: UploadFile = File(...),
    principal: Principal = Depends(deps.require_roles(*REGISTRY_ROLES)),
    db: Session = Depends(deps.get_db),
):
    content = deps.read_csv_upload(file)
    result = CsvImportService(db).import_students(content)
    return SuccessResponse.create(
        result,
        message=f"Imported {result['created']} students, skipped {result['skipped']}",
    )


@router.get("/{student_id}")
def get_student(
    student_id: str,
    principal: Principal = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
):
    require_staff_or_owner(principal, student_id)
    return SuccessResponse.create(StudentService(db).get_student(student_id))


@router.put("/{student_id}")
def update_student(
    student_id: str,
    payload: StudentUpdate,
    principal: Principal = Depends(deps.require_roles(*REGISTRY_ROLES)),
    db: Session = Depends(deps.get_db),
):
    student = StudentService(db).update_student(student_id, payload)
    return SuccessResponse.create(student, message="Student updated successfully")


@router.delete("/{student_id}")
def delete_student(
    student_id: str,
    principal: Principal = Depends(deps.require_roles(*MANAGEMENT_ROLES)),
    db: Session = Depends(deps.get_db),
):
    StudentService(db).delete_student(student_id)
    return SuccessResponse.create(None, message="Student deleted successfully")


@router.post("/{student_id}/reset-password")
def reset_student_password(
    student_id: str,
    principal: Principal = Depends(deps.require_roles(*PASSWORD_RESET_ROLES)),
    db: Session = Depends(deps.get_db),
):
    new_password = StudentService(db).reset_password(student_id)
    return SuccessResponse.create({"new_password": new_password}, message="Password reset successfully")


@router.get("/{student_id}/placement")
def get_student_placement(
    student_id: str,
    principal: Principal = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
):
    require_staff_or_owner(principal, student_id)
    return SuccessResponse.create(StudentService(db).get_placement_details(student_id))


@router.get("/{student_id}/materials")
def get_student_materials(
    student_id: str,
    principal: Principal = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
):
    require_staff_or_owner(principal, student_id)
    return SuccessResponse.create(StudentService(db).get_materials(student_id))


@router.get("/{student_id}/requests")
def get_student_requests(
    student_id: str,
    principal: Principal = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
):
    require_staff_or_owner(principal, student_id)
    return SuccessResponse.create(StudentService(db).get_requests(student_id))


@router.get("/{student_id}/emergency-contact")
def get_emergency_contact(
    student_id: str,
    principal: Principal = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
):
    require_staff_or_owner(principal, student_id)
    return SuccessResponse.create(StudentService(db).get_emergency_contact(student_id))


@router.api_route("/{student_id}/emergency-contact", methods=["POST", "PUT"])
def save_emergency_contact(
    student_id: str,
    payload: EmergencyContactPayload,
    principal: Principal = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
):
    require_self_or_role(principal, student_id, UserType.STUDENT, REGISTRY_ROLES)
    contact = StudentService(db).upsert_emergency_contact(student_id, payload)
    return SuccessResponse.create(contact, message="Emergency contact saved successfully")
