"""
Field validation predicates and phone display formatting.

Every predicate takes a candidate string and returns a bool. A failed
validation is a normal result, never an exception.

File: validation/validators.py
Author: Contact Book maintainers
Created: 2026-10-18
Last Modified: 2026-10-18
"""

import re
import string

MAX_TEXT_LENGTH = 100
MIN_NAME_LENGTH = 2
MIN_ADDRESS_LENGTH = 5

PHONE_LENGTH = 11
PHONE_PREFIX = "09"
# "+63 (XXX) XXX XXXX"
PHONE_DISPLAY_LENGTH = 20

# ASCII only, matching the C locale ctype classes
NAME_LETTERS = frozenset(string.ascii_letters)
NAME_SPACES = frozenset(" \t\n\r\x0b\x0c")

MIN_BIRTH_YEAR = 1900
MAX_BIRTH_YEAR = 2025

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
BIRTHDATE_PATTERN = re.compile(r"(\d{2})/(\d{2})/(\d{4})", re.ASCII)


def is_valid_name(name: str) -> bool:
    """ASCII letters and whitespace only, between 2 and 100 characters."""
    if not isinstance(name, str):
        return False
    if len(name) < MIN_NAME_LENGTH or len(name) > MAX_TEXT_LENGTH:
        return False
    return all(c in NAME_LETTERS or c in NAME_SPACES for c in name)


def _is_raw_phone(phone: str) -> bool:
    return (
        isinstance(phone, str)
        and len(phone) == PHONE_LENGTH
        and phone.startswith(PHONE_PREFIX)
    )


def is_valid_phone(phone: str) -> bool:
    """Philippine mobile format: 11 digits starting with '09'."""
    if not _is_raw_phone(phone):
        return False
    return all(c in "0123456789" for c in phone)


def format_phone_display(phone: str) -> str:
    """
    Format a raw phone number for display.

    Converts 09XXXXXXXXX to +63 (XXX) XXX XXXX by dropping the leading zero.
    Anything that is not an 11 character '09' number is returned unchanged.

    Examples:
        >>> format_phone_display("09244561530")
        '+63 (924) 456 1530'
        >>> format_phone_display("12345")
        '12345'
    """
    if not _is_raw_phone(phone):
        return phone

    area_code = phone[1:4]
    first_part = phone[4:7]
    second_part = phone[7:11]

    return f"+63 ({area_code}) {first_part} {second_part}"


def is_valid_email(email: str) -> bool:
    if not isinstance(email, str):
        return False
    return EMAIL_PATTERN.fullmatch(email) is not None


def is_valid_birthdate(date: str) -> bool:
    """
    Validate a DD/MM/YYYY birthdate.

    Day, month and year ranges are checked independently, so a date like
    30/02/2025 passes. Month lengths and leap years are not considered.
    """
    if not isinstance(date, str):
        return False

    match = BIRTHDATE_PATTERN.fullmatch(date)
    if match is None:
        return False

    day, month, year = (int(part) for part in match.groups())

    if month < 1 or month > 12:
        return False
    if day < 1 or day > 31:
        return False
    if year < MIN_BIRTH_YEAR or year > MAX_BIRTH_YEAR:
        return False

    return True


def is_valid_address(address: str) -> bool:
    if not isinstance(address, str):
        return False
    return MIN_ADDRESS_LENGTH <= len(address) <= MAX_TEXT_LENGTH
