"""
Service layer.

Services encapsulate the business rules of a domain so that API
handlers only translate between HTTP and service calls.
"""
