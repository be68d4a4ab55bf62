"""
Contact record model.

File: models/contact.py
Author: Contact Book maintainers
Created: 2026-10-18
Last Modified: 2026-10-18
"""

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..validation import validate_field


class ContactRecord(BaseModel):
    """A single address book entry. Fields are validated on creation and on assignment."""
    model_config = ConfigDict(
        validate_assignment=True,
        extra='forbid',
    )

    name: str = Field(..., description="Full name, letters and spaces only")
    phone: str = Field(..., description="Raw 11 digit number starting with 09")
    email: str = Field(..., description="Email address")
    address: str = Field(..., description="Physical address")
    birthdate: str = Field(..., description="Birthdate as DD/MM/YYYY")

    @field_validator("name", "phone", "email", "address", "birthdate")
    @classmethod
    def _check_field(cls, value: str, info) -> str:
        error = validate_field(info.field_name, value)
        if error is not None:
            raise ValueError(error)
        return value

    def to_dict(self) -> Dict[str, str]:
        """Convert to a plain field -> value dict"""
        return {
            "name": self.name,
            "phone": self.phone,
            "email": self.email,
            "address": self.address,
            "birthdate": self.birthdate,
        }
