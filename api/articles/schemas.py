"""
Pydantic schemas for article endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, StrictInt


class VoteUpdateRequest(BaseModel):
    inc_votes: StrictInt
