import re
from typing import List, NamedTuple

from services.filter_service import FilterService


class Span(NamedTuple):
    text: str
    is_match: bool


class HighlightService:

    @staticmethod
    def tokens(query: str, exact_match: bool = False) -> List[str]:
        return FilterService.tokenize(query, exact_match)

    @staticmethod
    def build_pattern(tokens: List[str]):
        if not tokens: return None
        # Tokens escapados, los más largos primero para que ganen sobre sus prefijos
        ordered = sorted(set(tokens), key=len, reverse=True)
        return re.compile("|".join(re.escape(t) for t in ordered), re.IGNORECASE)

    @staticmethod
    def highlight(cell_text: str, query: str, exact_match: bool = False) -> List[Span]:
        """
        Divide el texto de la celda en tramos literales y coincidencias.
        La concatenación de los tramos reproduce el texto original tal cual.
        """
        text = "" if cell_text is None else str(cell_text)
        pattern = HighlightService.build_pattern(HighlightService.tokens(query, exact_match))
        if pattern is None: return [Span(text, False)]

        spans: List[Span] = []
        pos = 0
        for m in pattern.finditer(text):
            if m.start() > pos: spans.append(Span(text[pos:m.start()], False))
            spans.append(Span(m.group(0), True))
            pos = m.end()
        if pos < len(text): spans.append(Span(text[pos:], False))
        return spans or [Span(text, False)]
