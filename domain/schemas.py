"""Pydantic models describing the storage tree."""

from pathlib import Path

from pydantic import BaseModel, Field


class TaxonomyInfo(BaseModel):
    """One discovered taxonomy directory under the storage root."""

    name: str = Field(..., description="Taxonomy key (directory name).")
    path: Path = Field(..., description="Absolute path of the taxonomy directory.")
    loaded: bool = Field(
        default=False,
        description="True once the taxonomy has been scanned and cached by the accessor.",
    )
