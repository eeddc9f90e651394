from typing import List, Sequence

from models.csv_model import Row, Table


class FilterService:
    """
    Búsqueda por términos sobre las filas de datos.
    Una fila coincide si TODOS los tokens aparecen (sin distinguir mayúsculas)
    en AL MENOS una celda. El orden original se conserva.
    """

    @staticmethod
    def tokenize(query: str, exact_match: bool = False) -> List[str]:
        if not query or not query.strip(): return []
        if exact_match: return [query.strip().lower()]
        # Los espacios consecutivos producen tokens vacíos: se descartan
        return [t for t in query.lower().split(' ') if t]

    @staticmethod
    def row_matches(row: Sequence[str], tokens: Sequence[str]) -> bool:
        cells = [str(cell).lower() for cell in row]
        return all(any(token in cell for cell in cells) for token in tokens)

    @staticmethod
    def filter_rows(table: Table, query: str, has_header: bool = True, exact_match: bool = False) -> List[Row]:
        data = table.data_rows(has_header)
        tokens = FilterService.tokenize(query, exact_match)
        if not tokens: return data
        return [row for row in data if FilterService.row_matches(row, tokens)]
