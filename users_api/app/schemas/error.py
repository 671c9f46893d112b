"""
Pydantic models describing the JSON error envelope.

These models only document error responses in the OpenAPI schema; the
bodies themselves are built by the exception handlers in
``core.errors``.
"""

from typing import List, Optional, Union

from pydantic import BaseModel, Field


class ValidationIssue(BaseModel):
    path: List[Union[str, int]] = Field(..., examples=[["name"]])
    message: str = Field(..., examples=["String should have at least 6 characters"])
    code: str = Field(..., examples=["string_too_short"])


class ErrorResponse(BaseModel):
    """Error envelope returned by every failing request."""

    code: str = Field(..., examples=["Not Found"])
    message: str = Field(..., examples=["User not found"])
    errors: Optional[List[ValidationIssue]] = None
