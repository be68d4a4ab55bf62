"""
Field validation for contact records.

File: validation/__init__.py
Author: Contact Book maintainers
Created: 2026-10-18
Last Modified: 2026-10-18
"""

from .messages import (
    CONTACT_FIELDS,
    FIELD_RULES,
    address_length_message,
    birthdate_format_message,
    email_format_message,
    name_format_message,
    name_length_message,
    phone_format_message,
    validate_field,
)
from .validators import (
    MAX_TEXT_LENGTH,
    PHONE_DISPLAY_LENGTH,
    format_phone_display,
    is_valid_address,
    is_valid_birthdate,
    is_valid_email,
    is_valid_name,
    is_valid_phone,
)

__all__ = [
    # Predicates
    "is_valid_name",
    "is_valid_phone",
    "is_valid_email",
    "is_valid_address",
    "is_valid_birthdate",
    "format_phone_display",
    "MAX_TEXT_LENGTH",
    "PHONE_DISPLAY_LENGTH",
    # Messages
    "CONTACT_FIELDS",
    "FIELD_RULES",
    "validate_field",
    "name_length_message",
    "name_format_message",
    "phone_format_message",
    "email_format_message",
    "birthdate_format_message",
    "address_length_message",
]
