"""
Application package.

The API is split into configuration and infrastructure (``core``),
request and response models (``schemas``), business rules
(``services``) and HTTP routes (``api``).
"""
