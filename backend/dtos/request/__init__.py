"""
Request DTOs

DTOs for incoming API requests. Field aliases define the camelCase wire
names; Python code uses the snake_case attribute names.
"""

from .assignment_request import AssignClientRequest

__all__ = ["AssignClientRequest"]
