from .grade_chart import GradeBarChart

__all__ = ["GradeBarChart"]
