"""
Pydantic schemas for comment endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, StrictStr


class NewCommentRequest(BaseModel):
    # Unknown fields in the request body are ignored.
    username: StrictStr = Field(..., min_length=1, max_length=200)
    body: StrictStr = Field(..., min_length=1)
