from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

Row = Tuple[str, ...]

ASCENDING = "ascending"
DESCENDING = "descending"


class Table:
    """
    Representa el CSV en memoria:
      - rows: tupla de filas (cada fila es una tupla de strings, sin normalizar el largo)
      - La primera fila es el encabezado solo si has_header es True al consultarla.
    Inmutable: una carga nueva crea una Table nueva.
    """
    def __init__(self, rows: Optional[Sequence[Sequence[str]]] = None):
        self._rows: Tuple[Row, ...] = tuple(tuple(r) for r in (rows or []))

    @property
    def rows(self) -> Tuple[Row, ...]:
        return self._rows

    def __len__(self):
        return len(self._rows)

    def __bool__(self):
        return bool(self._rows)

    def header(self, has_header: bool) -> Row:
        if not has_header or not self._rows: return ()
        return self._rows[0]

    def data_rows(self, has_header: bool) -> List[Row]:
        return list(self._rows[1:]) if has_header else list(self._rows)

    def column_count(self) -> int:
        return max((len(r) for r in self._rows), default=0)


@dataclass(frozen=True)
class SortSpec:
    column_index: int
    direction: str = ASCENDING

    @property
    def descending(self) -> bool:
        return self.direction == DESCENDING
