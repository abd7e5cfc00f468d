"""
Domain Value Objects

Value objects are immutable types that represent descriptive aspects of the domain.
They have no conceptual identity and are compared by their values, not by ID.

Examples:
- PageRequest: Validated one-based pagination input
- ErrorKind: Failure category reported by the booking services
"""
