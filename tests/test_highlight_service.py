from services.highlight_service import HighlightService, Span


def joined(spans):
    return "".join(s.text for s in spans)


def test_empty_query_is_single_plain_span():
    assert HighlightService.highlight("Hello", "") == [Span("Hello", False)]
    assert HighlightService.highlight("Hello", "   ") == [Span("Hello", False)]


def test_matches_keep_original_case():
    spans = HighlightService.highlight("New York, new", "NEW")
    assert spans == [Span("New", True), Span(" York, ", False), Span("new", True)]


def test_multiple_tokens():
    spans = HighlightService.highlight("Alice Smith", "smith ali")
    assert spans == [Span("Ali", True), Span("ce ", False), Span("Smith", True)]


def test_regex_metacharacters_are_literal():
    text = "price (USD) $1.50 [a+b] *x?"
    for query in ["(usd)", "$1.50", "[a+b]", "*x?", "(", "\\", "a|b"]:
        spans = HighlightService.highlight(text, query)
        assert joined(spans) == text
    assert Span("(USD)", True) in HighlightService.highlight(text, "(usd)")
    assert HighlightService.highlight("1x50", "1.50") == [Span("1x50", False)]


def test_longer_token_wins_over_prefix():
    spans = HighlightService.highlight("abcdef", "ab abcd")
    assert spans == [Span("abcd", True), Span("ef", False)]


def test_exact_match_highlights_full_phrase():
    spans = HighlightService.highlight("new york new", "new york", exact_match=True)
    assert spans == [Span("new york", True), Span(" new", False)]


def test_concatenation_reconstructs_text():
    cases = [("", "a"), ("aaa", "a"), ("Mixed CASE text", "case  t"), ("ñandú Ñu", "ñ")]
    for text, query in cases:
        assert joined(HighlightService.highlight(text, query)) == text
