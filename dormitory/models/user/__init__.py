"""
User models package.
"""

from dormitory.models.user.employee import Employee
from dormitory.models.user.student import Student

__all__ = ["Employee", "Student"]
