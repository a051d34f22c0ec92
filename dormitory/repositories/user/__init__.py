from dormitory.repositories.user.employee_repository import EmployeeRepository
from dormitory.repositories.user.student_repository import StudentRepository

__all__ = ["EmployeeRepository", "StudentRepository"]
