"""
Main entry point for the Contact Book Management System.

Interactive menu for adding, searching, deleting, modifying and listing
contacts held in memory for the current session.

Usage:
    >>> python main.py

File: main.py
Author: Contact Book maintainers
Created: 2026-10-18
Last Modified: 2026-10-18
"""

import logging
import sys
from typing import Callable, Optional

from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm

from contactbook import AppConfig, ContactRecord, ContactStore, render_contact_table
from contactbook.validation import FIELD_RULES

load_dotenv()

log = logging.getLogger(__name__)

APP_TITLE = "CONTACT BOOK MANAGEMENT SYSTEM"

# Menu key -> (label, handler method name)
MENU = {
    "1": ("Add Contact", "add_contact"),
    "2": ("Search Contact", "search_contact"),
    "3": ("Delete Contact", "delete_contact"),
    "4": ("Modify Contact", "modify_contact"),
    "5": ("List All Contacts", "list_contacts"),
    "6": ("Exit", None),
}

# field -> (prompt label used when modifying, prompt used when adding)
FIELD_PROMPTS = {
    "name": ("Name", "Enter name"),
    "phone": ("Phone", "Enter phone number (11 digits starting with '09')"),
    "email": ("Email", "Enter email"),
    "address": ("Address", "Enter address"),
    "birthdate": ("Birthdate", "Enter birthdate (DD/MM/YYYY)"),
}


class ContactBookShell:
    """Menu-driven front end over a ContactStore."""

    def __init__(
        self,
        store: Optional[ContactStore] = None,
        console: Optional[Console] = None,
        config: Optional[AppConfig] = None,
    ):
        self.store = store if store is not None else ContactStore()
        self.console = console or Console()
        self.config = config or AppConfig()

    # ---------- Output helpers ----------

    def _print(self, text: str = "") -> None:
        # Plain text: no markup, no highlighting, no wrapping of wide tables
        self.console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)

    def _ask(self, prompt: str, suffix: str = ": ") -> str:
        # Raw line, no stripping: leading/trailing spaces are part of the value.
        # Prompts can echo stored values, which may contain [brackets]
        return self.console.input(escape(prompt) + suffix, emoji=False)

    def display_header(self, title: str) -> None:
        """Clear the screen and show a centered section title."""
        if self.config.clear_screen:
            self.console.clear()
        width = self.config.header_width
        self._print("=" * width)
        self._print(title.rjust((width + len(title)) // 2))
        self._print("=" * width)

    def show_table(self, contacts) -> None:
        self._print(render_contact_table(contacts))

    def pause(self) -> None:
        self._ask("\nPress Enter to continue...", suffix="")

    def get_valid_input(
        self,
        prompt: str,
        validator: Callable[[str], bool],
        error_msg: str,
        allow_empty: bool = False,
    ) -> str:
        """
        Prompt until the validator accepts the input.

        Args:
            prompt: Prompt text
            validator: Predicate for the field
            error_msg: Message shown on invalid input
            allow_empty: Accept an empty answer (used to keep the current value)

        Returns:
            The accepted input ("" only when allow_empty is set)
        """
        while True:
            value = self._ask(prompt)
            if allow_empty and value == "":
                return value
            if validator(value):
                return value
            self._print(f"\nError: {error_msg}\n")

    # ---------- Menu actions ----------

    def add_contact(self) -> None:
        self.display_header("ADD NEW CONTACT")

        values = {}
        for field_name, (_, add_prompt) in FIELD_PROMPTS.items():
            validator, message = FIELD_RULES[field_name]
            values[field_name] = self.get_valid_input(add_prompt, validator, message)

        self.store.add(ContactRecord(**values))

        self._print("\nContact added successfully!")
        self.pause()

    def search_contact(self) -> None:
        self.display_header("SEARCH CONTACT")

        result = self.store.search(self._ask("Enter search term"))
        if not result.ok:
            self._print(f"\n{result.error}")
        elif not result.matches:
            self._print("\nNo contacts found matching your search.")
        else:
            self._print(f"\nFound {len(result.matches)} matching contact(s):\n")
            self.show_table(result.matches)

        self.pause()

    def _select_contact(self, title: str, action: str) -> Optional[str]:
        """
        Show all contacts and ask for a name until one matches.

        Returns:
            The exact name of an existing contact, or None if the user backed out
        """
        while True:
            self.display_header(title)

            if self.store.is_empty:
                self._print("\nNo contacts in address book!")
                self.pause()
                return None

            self._print("\nCurrent Contacts:\n")
            self.show_table(self.store.list())

            name = self._ask(f"\nEnter contact name to {action} (or 'Q' to go back)")
            if name.upper() == "Q":
                return None

            if self.store.find_index(name) is not None:
                return name

            self._print("\nContact not found!")
            if not Confirm.ask("Would you like to try again? (Y/N)", console=self.console, default=False, show_choices=False):
                return None

    def delete_contact(self) -> bool:
        name = self._select_contact("DELETE CONTACT", "delete")
        if name is None:
            return False

        self.store.delete(name)
        self._print("\nContact deleted successfully!")
        self.pause()
        return True

    def modify_contact(self) -> bool:
        name = self._select_contact("MODIFY CONTACT", "modify")
        if name is None:
            return False

        contact = self.store.get(name)
        self._print("\nSelected contact details:")
        self.show_table([contact])

        self._print("\nEnter new details (press Enter to keep current value):")

        new_fields = {}
        for field_name, (label, _) in FIELD_PROMPTS.items():
            validator, message = FIELD_RULES[field_name]
            current = getattr(contact, field_name)
            new_fields[field_name] = self.get_valid_input(
                f"{label} [{current}]", validator, message, allow_empty=True
            )

        result = self.store.modify(name, new_fields)
        if result.ok:
            self._print("\nContact modified successfully!")
        else:
            for message in result.rejected.values():
                self._print(f"\nError: {message}")

        self.pause()
        return result.ok

    def list_contacts(self) -> None:
        self.display_header("LIST ALL CONTACTS")

        if self.store.is_empty:
            self._print("\nNo contacts in address book!")
        else:
            self.show_table(self.store.list())

        self.pause()

    # ---------- Main loop ----------

    def display_menu(self) -> None:
        self.display_header(APP_TITLE)
        self._print()
        for key, (label, _) in MENU.items():
            self._print(f"{key}. {label}")
        self._print()

    def run(self) -> None:
        """Main program loop."""
        while True:
            self.display_menu()
            choice = self._ask("Enter your choice (1-6)")[:1]

            if choice == "6":
                self._print("\nThank you for using Contact Book Management System!")
                return

            entry = MENU.get(choice)
            if entry is None:
                self._print("\nInvalid choice!")
                self.pause()
                continue

            log.debug(f"Menu choice {choice}: {entry[0]}")
            getattr(self, entry[1])()


def main():
    """Main entry point."""
    config = AppConfig.from_env()
    config.configure_logging()

    shell = ContactBookShell(config=config)
    try:
        shell.run()
    except (KeyboardInterrupt, EOFError):
        shell.console.print("\n[dim]Goodbye![/]")
        sys.exit(0)


if __name__ == "__main__":
    main()
