from models.csv_model import ASCENDING, DESCENDING, SortSpec
from services.sort_service import SortService


def test_lexicographic_not_numeric():
    rows = [("9",), ("10",), ("2",)]
    assert SortService.sort_rows(rows, SortSpec(0)) == [("10",), ("2",), ("9",)]


def test_descending():
    rows = [("b",), ("a",), ("c",)]
    assert SortService.sort_rows(rows, SortSpec(0, DESCENDING)) == [("c",), ("b",), ("a",)]


def test_no_spec_or_no_header_is_identity():
    rows = [("b",), ("a",)]
    assert SortService.sort_rows(rows, None) == rows
    assert SortService.sort_rows(rows, SortSpec(0), has_header=False) == rows


def test_stable_ties_both_directions():
    rows = [("z", "1"), ("z", "2")]
    assert SortService.sort_rows(rows, SortSpec(0, ASCENDING)) == rows
    assert SortService.sort_rows(rows, SortSpec(0, DESCENDING)) == rows
    mixed = [("b", "1"), ("a", "1"), ("b", "2"), ("a", "2")]
    assert SortService.sort_rows(mixed, SortSpec(0, DESCENDING)) == [("b", "1"), ("b", "2"), ("a", "1"), ("a", "2")]


def test_idempotent():
    rows = [("c", "1"), ("a", "2"), ("c", "0"), ("b", "9")]
    spec = SortSpec(0)
    once = SortService.sort_rows(rows, spec)
    assert SortService.sort_rows(once, spec) == once


def test_out_of_range_column_is_empty_key():
    rows = [("b", "x"), ("a",), ("c", "a")]
    assert SortService.sort_rows(rows, SortSpec(1)) == [("a",), ("c", "a"), ("b", "x")]
    assert SortService.sort_rows(rows, SortSpec(7)) == rows


def test_input_not_mutated():
    rows = [("b",), ("a",)]
    SortService.sort_rows(rows, SortSpec(0))
    assert rows == [("b",), ("a",)]


def test_next_spec_toggles_direction():
    spec = SortService.next_spec(None, 2)
    assert spec == SortSpec(2, ASCENDING)
    spec = SortService.next_spec(spec, 2)
    assert spec == SortSpec(2, DESCENDING)
    assert SortService.next_spec(spec, 2) == SortSpec(2, ASCENDING)
    assert SortService.next_spec(SortSpec(2, DESCENDING), 0) == SortSpec(0, ASCENDING)
