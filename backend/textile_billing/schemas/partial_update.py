"""
Base schema for partial updates of reference records.
"""

from typing import ClassVar, Tuple

from pydantic import BaseModel, model_validator


class PartialUpdate(BaseModel):
    """
    Update payload where every field may be omitted.
    
    Fields named in ``not_nullable`` map to required columns, so sending them
    as an explicit null is rejected instead of being written.
    """
    not_nullable: ClassVar[Tuple[str, ...]] = ()
    
    @model_validator(mode='before')
    @classmethod
    def reject_null_required_fields(cls, data):
        """Fail validation when a required column is sent as null."""
        if isinstance(data, dict):
            nulls = [field for field in cls.not_nullable if field in data and data[field] is None]
            if nulls:
                raise ValueError(f"Fields cannot be null: {', '.join(nulls)}")
        return data
