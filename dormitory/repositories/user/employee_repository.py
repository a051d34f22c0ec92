# dormitory/repositories/user/employee_repository.py
from typing import List, Optional

from sqlalchemy.orm import Session

from dormitory.models.user import Employee
from dormitory.repositories.base import BaseRepository


class EmployeeRepository(BaseRepository[Employee]):

    def __init__(self, db: Session):
        super().__init__(Employee, db)

    def find_by_employee_id(self, employee_id: str) -> Optional[Employee]:
        return self._query().filter(Employee.employee_id == employee_id).first()

    def find_by_email(self, email: str) -> Optional[Employee]:
        return self._query().filter(Employee.email == (email or "").strip().lower()).first()

    def find_by_employee_ids(self, employee_ids: List[str]) -> List[Employee]:
        if not employee_ids:
            return []
        return self._query().filter(Employee.employee_id.in_(employee_ids)).all()

    def list_filtered(self, role: Optional[str] = None, status: Optional[str] = None) -> List[Employee]:
        criteria = {}
        if role:
            criteria["role"] = role
        if status:
            criteria["status"] = status
        return self.find_by_criteria(criteria, order_by=["employee_id"])
