"""
Copyright (c) 2025 Eric C. Mumford (@heymumford)
This file is part of SKILLFIX, licensed under the MIT License.
See LICENSE file for details.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

# MAJOR.MINOR.PATCH with optional pre-release and build suffixes
VERSION_PATTERN = r"^\d+\.\d+\.\d+(?:-[0-9A-Za-z.-]+)?(?:\+[0-9A-Za-z.-]+)?$"


class RecordAttributes(BaseModel):
    """Free-form attributes attached to a detailed record."""

    color: str
    size: str
    weight: float = Field(..., ge=0.0, lt=100.0)

    model_config = {"frozen": True}


class RecordMetadata(BaseModel):
    """Timestamps and optional tagging for a fixture record."""

    created: str
    modified: str
    tags: tuple[str, ...] | None = None
    attributes: RecordAttributes | None = None

    model_config = {"frozen": True}


class Record(BaseModel):
    """One synthetic data item of a fixture bundle."""

    id: int = Field(..., ge=0)
    name: str
    description: str
    content: str | None = None
    metadata: RecordMetadata

    model_config = {"frozen": True}

    @field_validator("name")
    def validate_name_matches_id(cls, v, info):
        """Record names are derived from their id."""
        values = info.data
        if "id" in values and v != f"Item {values['id']}":
            raise ValueError(f"Record name must be 'Item {values['id']}', got '{v}'")
        return v


class Bundle(BaseModel):
    """A named, versioned sequence of fixture records."""

    name: str = Field(..., min_length=1)
    version: str = Field(..., pattern=VERSION_PATTERN)
    data: tuple[Record, ...] = ()

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_positions(self):
        """Validate that every record id equals its position in the sequence."""
        for position, record in enumerate(self.data):
            if record.id != position:
                raise ValueError(f"Record at position {position} has id {record.id}")
        return self

    def to_export(self) -> dict[str, Any]:
        """Return the plain ``name``/``version``/``data`` structure loaders consume."""
        return self.model_dump(mode="json", exclude_none=True)

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize the bundle export to JSON."""
        return self.model_dump_json(indent=indent, exclude_none=True)
