from blogspy_table.app.domain.models.column import ColumnDef
from blogspy_table.app.domain.models.row import FieldValue
from blogspy_table.app.ui.listing_view import (
    EMPTY_VALUE,
    SortDirection,
    compare_values,
    display_value,
    is_numeric,
    render_cell,
    sort_rows,
)

PEOPLE = [
    {"id": 1, "name": "Bob", "age": 30},
    {"id": 2, "name": "Ann", "age": 25},
    {"id": 3, "name": "Cid", "age": 25},
]


def test_no_sort_key_returns_input_order() -> None:
    assert sort_rows(PEOPLE, None) is PEOPLE


def test_numeric_sort_keeps_ties_in_original_order() -> None:
    ordered = sort_rows(PEOPLE, "age", SortDirection.ASC)

    assert [row["name"] for row in ordered] == ["Ann", "Cid", "Bob"]


def test_descending_inverts_comparator_but_keeps_ties_stable() -> None:
    ordered = sort_rows(PEOPLE, "age", "desc")

    assert [row["name"] for row in ordered] == ["Bob", "Ann", "Cid"]


def test_descending_is_reverse_of_ascending_without_ties() -> None:
    ascending = sort_rows(PEOPLE, "name", SortDirection.ASC)
    descending = sort_rows(ascending, "name", SortDirection.DESC)

    assert list(descending) == list(reversed(ascending))


def test_string_sort_ignores_case() -> None:
    rows = [{"name": "beta"}, {"name": "Alpha"}, {"name": "gamma"}]

    assert [row["name"] for row in sort_rows(rows, "name")] == ["Alpha", "beta", "gamma"]


def test_accented_text_sorts_beside_its_base_letter() -> None:
    rows = [{"name": "zebra"}, {"name": "Éclair"}, {"name": "apple"}, {"name": "eclipse"}]

    assert [row["name"] for row in sort_rows(rows, "name")] == ["apple", "Éclair", "eclipse", "zebra"]
    assert [row["name"] for row in sort_rows(rows, "name", "desc")] == ["zebra", "eclipse", "Éclair", "apple"]


def test_numbers_compare_numerically_not_lexically() -> None:
    rows = [{"v": 10}, {"v": 2}, {"v": 33}]

    assert [row["v"] for row in sort_rows(rows, "v")] == [2, 10, 33]


def test_mixed_values_fall_back_to_text_comparison() -> None:
    rows = [{"v": 10}, {"v": 2}, {"v": "abc"}]

    assert [row["v"] for row in sort_rows(rows, "v")] == [2, 10, "abc"]
    assert compare_values(FieldValue.of(10), FieldValue.of("9")) == -1


def test_nan_and_bool_are_not_numeric() -> None:
    assert is_numeric(3.5)
    assert not is_numeric(float("nan"))
    assert not is_numeric(True)
    assert not is_numeric("12")


def test_missing_sort_field_compares_as_empty_text() -> None:
    rows = [{"id": 1, "name": "zed"}, {"id": 2}, {"id": 3, "name": "amy"}]

    assert [row["id"] for row in sort_rows(rows, "name")] == [2, 3, 1]


def test_display_value_placeholder_for_missing_and_none() -> None:
    assert display_value(FieldValue(present=False)) == EMPTY_VALUE
    assert display_value(None) == EMPTY_VALUE
    assert display_value(FieldValue.of(0)) == "0"


def test_render_cell_prefers_column_renderer() -> None:
    column = ColumnDef(key="age", header="Age", render=lambda value, row, index: f"{row['name']}:{value}:{index}")

    assert render_cell(column, PEOPLE[0], 4) == "Bob:30:4"
    assert render_cell(ColumnDef(key="missing", header="Missing"), PEOPLE[0], 0) == EMPTY_VALUE
