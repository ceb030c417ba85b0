"""
Pydantic schemas for API responses.
"""

from pydantic import BaseModel, Field
from datetime import datetime


# ─── Response Schemas ────────────────────────────────────────────────────────

class DebugResponse(BaseModel):
    path: str
    query: str
    full_uri: str
    extraction_method: str


class FibonacciResponse(BaseModel):
    fibonacci: str = Field(..., description="F(n) as decimal text")
    n: int = Field(..., ge=0)
    timestamp: str = Field(..., description="ISO-8601 UTC")
    status: str
    debug: DebugResponse
    usage: str


class HealthResponse(BaseModel):
    status: str
    version: str
    timestamp: datetime
    max_index: int
