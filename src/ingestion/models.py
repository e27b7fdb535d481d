from __future__ import annotations

from pydantic import BaseModel, Field


class ManuscriptUpload(BaseModel):
    """
    A validated manuscript source ready for analysis.
    """
    filename: str
    content: str = ""
    size_bytes: int = Field(default=0, ge=0, description="Size of the upload before decoding")
