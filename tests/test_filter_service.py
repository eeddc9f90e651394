from models.csv_model import Table
from services.filter_service import FilterService


def test_empty_query_returns_data_rows(people):
    assert FilterService.filter_rows(people, "") == people.data_rows(True)
    assert FilterService.filter_rows(people, "   ") == people.data_rows(True)


def test_header_excluded_only_in_header_mode(people):
    assert FilterService.filter_rows(people, "", has_header=False) == list(people.rows)
    assert FilterService.filter_rows(people, "city") == []
    assert FilterService.filter_rows(people, "city", has_header=False) == [people.rows[0]]


def test_tokens_are_and_across_tokens_or_across_cells(people):
    result = FilterService.filter_rows(people, "smith new")
    assert result == [people.rows[1], people.rows[3]]


def test_case_insensitive(people):
    assert FilterService.filter_rows(people, "BOSTON") == [people.rows[2]]


def test_exact_match_uses_full_phrase(people):
    assert FilterService.filter_rows(people, "new york", exact_match=True) == [people.rows[1]]
    assert FilterService.filter_rows(people, "york new", exact_match=True) == []
    assert FilterService.filter_rows(people, "york new") == [people.rows[1]]


def test_result_is_ordered_subsequence(people):
    data = people.data_rows(True)
    result = FilterService.filter_rows(people, "o")
    positions = [data.index(r) for r in result]
    assert positions == sorted(positions)


def test_consecutive_spaces_do_not_change_result(people):
    assert FilterService.filter_rows(people, "smith  new") == FilterService.filter_rows(people, "smith new")


def test_tokenize():
    assert FilterService.tokenize("Foo  Bar") == ["foo", "bar"]
    assert FilterService.tokenize("  Foo Bar ", exact_match=True) == ["foo bar"]
    assert FilterService.tokenize("") == []


def test_ragged_rows_do_not_break_filter():
    table = Table([["a", "b"], ["x"], [], ["y", "z", "extra"]])
    assert FilterService.filter_rows(table, "extra") == [("y", "z", "extra")]
    assert FilterService.filter_rows(table, "") == [("x",), (), ("y", "z", "extra")]


def test_input_table_not_mutated(people):
    before = people.rows
    FilterService.filter_rows(people, "smith")
    assert people.rows == before
