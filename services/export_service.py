import logging
from typing import List, Sequence

import pandas as pd

from services.csv_service import CSVServiceError

logger = logging.getLogger(__name__)


class ExportService:
    """
    Exporta la vista actual (filas mostradas, ya filtradas y ordenadas).
    """

    @staticmethod
    def unique_columns(columns: Sequence[str], width: int) -> List[str]:
        names = []
        for i in range(width):
            name = str(columns[i]).strip() if i < len(columns) and str(columns[i]).strip() else f"Columna {i + 1}"
            original = name
            suffix = 1
            while name in names:
                suffix += 1
                name = f"{original}_{suffix}"
            names.append(name)
        return names

    @staticmethod
    def to_dataframe(columns: Sequence[str], rows: Sequence[Sequence[str]]) -> pd.DataFrame:
        width = max([len(columns)] + [len(r) for r in rows])
        # Filas cortas se rellenan con "" para que el DataFrame quede rectangular
        data = [list(r) + [""] * (width - len(r)) for r in rows]
        return pd.DataFrame(data, columns=ExportService.unique_columns(columns, width), dtype=str)

    @staticmethod
    def export_csv(filename: str, columns: Sequence[str], rows: Sequence[Sequence[str]], delimiter: str = ',') -> None:
        df = ExportService.to_dataframe(columns, rows)
        try:
            df.to_csv(filename, sep=delimiter, index=False)
        except OSError as e:
            raise CSVServiceError(f"No se pudo exportar: {e}") from e
        logger.info("Exportadas %d filas a %s", len(df), filename)

    @staticmethod
    def export_excel(filename: str, columns: Sequence[str], rows: Sequence[Sequence[str]], sheet_name: str = "Datos") -> None:
        df = ExportService.to_dataframe(columns, rows)
        try:
            with pd.ExcelWriter(filename, engine='openpyxl') as writer:
                df.to_excel(writer, sheet_name=sheet_name, index=False)

                # Ajustar ancho de columnas al contenido más largo
                sheet = writer.sheets[sheet_name]
                for column in sheet.columns:
                    cells = [cell for cell in column]
                    max_length = max(len(str(c.value)) if c.value is not None else 0 for c in cells)
                    sheet.column_dimensions[cells[0].column_letter].width = max_length + 2
        except OSError as e:
            raise CSVServiceError(f"No se pudo exportar: {e}") from e
        logger.info("Exportadas %d filas a %s", len(df), filename)
