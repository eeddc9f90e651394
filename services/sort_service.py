from typing import List, Optional, Sequence

from models.csv_model import ASCENDING, DESCENDING, Row, SortSpec


class SortService:

    @staticmethod
    def sort_key(row: Sequence[str], column_index: int) -> str:
        # Filas cortas: la celda faltante cuenta como cadena vacía
        if 0 <= column_index < len(row): return str(row[column_index])
        return ""

    @staticmethod
    def sort_rows(rows: Sequence[Row], spec: Optional[SortSpec], has_header: bool = True) -> List[Row]:
        """
        Orden lexicográfico (sin conversión numérica: "10" < "9") sobre la columna pedida.
        sorted() es estable también con reverse=True, los empates mantienen su orden.
        """
        if spec is None or not has_header: return list(rows)
        return sorted(rows, key=lambda r: SortService.sort_key(r, spec.column_index), reverse=spec.descending)

    @staticmethod
    def next_spec(current: Optional[SortSpec], column_index: int) -> SortSpec:
        # Misma columna en ascendente -> descendente; cualquier otro caso -> ascendente
        if current is not None and current.column_index == column_index and current.direction == ASCENDING:
            return SortSpec(column_index, DESCENDING)
        return SortSpec(column_index, ASCENDING)
