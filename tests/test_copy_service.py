from services.copy_service import CopyService


def test_simplify_numbers():
    assert CopyService.normalize_for_copy("$1,234.56", simplify_numbers=True) == "1234.56"
    assert CopyService.normalize_for_copy("  $ 5  ", simplify_numbers=True) == "5"


def test_simplify_is_blind_strip():
    assert CopyService.normalize_for_copy("Smith, John", simplify_numbers=True) == "Smith John"


def test_disabled_keeps_exact_text():
    assert CopyService.normalize_for_copy("  $1,234  ", simplify_numbers=False) == "  $1,234  "


def test_join_row_delimiters():
    row = ["a", "$1,000", "c"]
    assert CopyService.join_row(row, "auto") == "a,$1,000,c"
    assert CopyService.join_row(row, "\t") == "a\t$1,000\tc"
    assert CopyService.join_row(row, None) == "a,$1,000,c"
