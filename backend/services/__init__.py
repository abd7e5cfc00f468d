"""
Service layer: booking business rules over a request-scoped session.
"""
