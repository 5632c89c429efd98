from .course import Course
from .department import Department
from .student import Student
from .teacher import Teacher, TeacherType

__all__ = ["Course", "Department", "Student", "Teacher", "TeacherType"]
