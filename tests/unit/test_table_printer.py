from blogspy_table.app.application.data_table import DataTable
from blogspy_table.app.domain.models.column import ColumnDef
from blogspy_table.app.ui.table_printer import format_table, print_table

COLUMNS = [
    ColumnDef(key="name", header="Name", sortable=True),
    ColumnDef(key="age", header="Age", sortable=True, align="right"),
    ColumnDef(key="city", header="City"),
]
ROWS = [
    {"id": 1, "name": "Bob", "age": 30, "city": "Lima"},
    {"id": 2, "name": "Ann", "age": 25},
    {"id": 3, "name": "Cid", "age": 25, "city": "Oslo"},
]


def test_format_table_shows_rows_sort_arrow_and_footer() -> None:
    table = DataTable(ROWS, COLUMNS, page_size=2, selectable=True)
    table.sort_by("age")
    table.toggle_row(2)

    text = format_table("People", table.view())

    assert text.splitlines()[0] == "People"
    assert "Age ^" in text
    assert "[x] | Ann" in text
    assert "[ ] | Cid" in text
    assert "Bob" not in text
    assert "Showing 1 to 2 of 3 results  Page 1 of 2  (<<) (<) > >>" in text
    assert "1 of 3 selected" in text


def test_format_table_renders_placeholder_for_missing_field() -> None:
    table = DataTable(ROWS, COLUMNS)
    table.search("ann")

    lines = format_table("People", table.view()).splitlines()

    assert lines[-1].split(" | ")[-1].strip() == "-"
    assert "Page" not in "\n".join(lines)


def test_format_table_empty_and_loading_states() -> None:
    table = DataTable(ROWS, COLUMNS, empty_message="No people found")
    table.search("zzz")
    assert "(No people found)" in format_table("People", table.view())

    table.set_loading(True)
    assert "(Loading...)" in format_table("People", table.view())


def test_print_table_writes_to_stdout(capsys) -> None:
    print_table("People", DataTable(ROWS, COLUMNS).view())

    captured = capsys.readouterr()
    assert "People" in captured.out
    assert "Search: Search..." in captured.out


def test_rows_without_id_render_by_position_and_stay_unchecked() -> None:
    rows = [{"name": "Zed", "age": 40}, {"name": "Amy", "age": 22}]
    table = DataTable(rows, COLUMNS, selectable=True)
    table.toggle_all_visible(True)

    text = format_table("Anonymous", table.view())
    rows_text = [line for line in text.splitlines() if "Zed" in line or "Amy" in line]

    assert table.selected_ids == frozenset()
    assert [[cell.strip() for cell in line.split("|")[:2]] for line in rows_text] == [["[ ]", "Zed"], ["[ ]", "Amy"]]
