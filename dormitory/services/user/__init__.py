from dormitory.services.user.employee_service import EmployeeService
from dormitory.services.user.student_service import StudentService

__all__ = ["EmployeeService", "StudentService"]
