from typing import Optional, Sequence


class CopyService:
    """Texto que se envía al portapapeles al copiar una celda o una fila."""

    @staticmethod
    def normalize_for_copy(text: str, simplify_numbers: bool = False) -> str:
        if not simplify_numbers: return text
        # Quita $ y , sin validar que el resultado sea numérico
        return text.replace('$', '').replace(',', '').strip()

    @staticmethod
    def row_delimiter(delimiter: Optional[str]) -> str:
        if not delimiter or delimiter == "auto": return ','
        return delimiter

    @staticmethod
    def join_row(row: Sequence[str], delimiter: Optional[str] = "auto") -> str:
        return CopyService.row_delimiter(delimiter).join(str(cell) for cell in row)
