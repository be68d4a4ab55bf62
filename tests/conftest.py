"""Shared fixtures for contact book tests."""

import io

import pytest
from rich.console import Console

from contactbook import AppConfig, ContactRecord, ContactStore


def make_contact(**overrides) -> ContactRecord:
    """Build a valid contact, overriding any fields."""
    data = {
        "name": "Juan Dela Cruz",
        "phone": "09244561530",
        "email": "juan@example.com",
        "address": "123 Rizal Street, Manila",
        "birthdate": "15/06/2000",
    }
    data.update(overrides)
    return ContactRecord(**data)


@pytest.fixture
def juan():
    return make_contact()


@pytest.fixture
def maria():
    return make_contact(
        name="Maria Santos",
        phone="09171234567",
        email="maria.santos@mail.ph",
        address="45 Mabini Avenue, Quezon City",
        birthdate="01/01/1990",
    )


@pytest.fixture
def pedro():
    return make_contact(
        name="Pedro Reyes",
        phone="09998887777",
        email="pedro@reyes.org",
        address="7 Bonifacio Road, Cebu",
        birthdate="31/12/1985",
    )


@pytest.fixture
def store(juan, maria, pedro):
    """Store holding three contacts in insertion order."""
    contact_store = ContactStore()
    for contact in (juan, maria, pedro):
        contact_store.add(contact)
    return contact_store


@pytest.fixture
def console():
    """Console that records output instead of writing to a terminal."""
    return Console(file=io.StringIO(), width=200, force_terminal=False, color_system=None)


@pytest.fixture
def quiet_config():
    return AppConfig(clear_screen=False)
