"""Tests for contact table rendering."""

from contactbook.rendering import ColumnWidths, column_widths, render_contact_table

from conftest import make_contact


class TestColumnWidths:
    def test_defaults_are_header_lengths(self):
        widths = column_widths([])
        assert widths.as_tuple() == (4, 5, 5, 7, 9)
        assert widths.total_width == 4 + 5 + 5 + 7 + 9 + 12 + 2

    def test_widths_fit_longest_value_plus_padding(self, juan, maria, pedro):
        widths = column_widths([juan, maria, pedro])

        assert widths.name == len("Juan Dela Cruz") + 4
        assert widths.email == len("maria.santos@mail.ph") + 4
        assert widths.address == len("45 Mabini Avenue, Quezon City") + 4
        assert widths.birthdate == 10 + 4

    def test_phone_column_uses_formatted_width(self, juan):
        assert column_widths([juan]).phone == 24

    def test_short_values_still_get_padding(self):
        widths = ColumnWidths()
        widths.update(make_contact(name="Al"))
        # "Al" + 4 == 6 > len("NAME")
        assert widths.name == 6
        # birthdate value + padding beats the 9 char header
        assert widths.birthdate == 14

    def test_total_width(self, juan):
        widths = column_widths([juan])
        assert widths.total_width == sum(widths.as_tuple()) + 14


class TestRenderContactTable:
    def test_exact_layout(self):
        contact = make_contact(
            name="Ana Cruz",
            phone="09244561530",
            email="ana@x.ph",
            address="12 Main",
            birthdate="01/02/2003",
        )
        lines = render_contact_table([contact]).split("\n")

        separator = "-" * (12 + 24 + 12 + 11 + 14 + 14)
        assert lines == [
            separator,
            "| NAME         | PHONE                    | EMAIL        | ADDRESS     | BIRTHDATE      |",
            separator,
            "| Ana Cruz     | +63 (924) 456 1530       | ana@x.ph     | 12 Main     | 01/02/2003     |",
            separator,
        ]

    def test_separator_and_row_widths(self, store):
        widths = column_widths(store.list())
        lines = render_contact_table(store.list()).split("\n")

        separators = [lines[0], lines[2], lines[-1]]
        assert all(line == "-" * widths.total_width for line in separators)
        # Rows carry "| " and " |" on top of the separators' 2 border characters
        rows = [lines[1]] + lines[3:-1]
        assert all(len(row) == widths.total_width + 2 for row in rows)

    def test_rows_follow_input_order(self, juan, maria, pedro):
        lines = render_contact_table([pedro, juan, maria]).split("\n")
        rows = lines[3:-1]
        assert [row.split(" | ")[0][2:].strip() for row in rows] == [
            "Pedro Reyes",
            "Juan Dela Cruz",
            "Maria Santos",
        ]

    def test_empty_input_renders_header_only(self):
        lines = render_contact_table([]).split("\n")
        assert len(lines) == 4
        assert lines[1] == "| NAME | PHONE | EMAIL | ADDRESS | BIRTHDATE |"

    def test_long_values_are_not_truncated(self):
        address = "Unit 5, " + "Very Long Street Name " * 4
        contact = make_contact(address=address.strip())
        assert address.strip() in render_contact_table([contact])
