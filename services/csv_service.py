import csv
import io
import logging
from dataclasses import dataclass, field
from typing import List

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = ('.csv', '.tsv', '.txt')


class CSVServiceError(Exception):
    pass


class TableLoadError(CSVServiceError):
    def __init__(self, message: str, errors=None):
        super().__init__(message)
        self.errors = list(errors or [])


class UnsupportedFileError(CSVServiceError):
    pass


@dataclass
class ParseError:
    row: int
    message: str

    def __str__(self):
        return f"Fila {self.row}: {self.message}"


@dataclass
class ParseResult:
    rows: List[List[str]] = field(default_factory=list)
    errors: List[ParseError] = field(default_factory=list)


class CSVService:
    """
    Lectura de texto tabular (CSV/TSV) en memoria.
    - El parser devuelve filas + errores, nunca lanza por datos mal formados.
    - La detección de delimitador ocurre antes de llamar al parser.
    """

    @staticmethod
    def detect_delimiter(text: str) -> str:
        # Si hay un tabulador en cualquier parte es TSV, si no coma
        return '\t' if '\t' in text else ','

    @staticmethod
    def parse(raw_text: str, delimiter: str = ',', skip_empty_lines: bool = True) -> ParseResult:
        result = ParseResult()
        # Sin tope de tamaño de celda: el límite por defecto (131072) rechaza CSV válidos
        csv.field_size_limit(max(csv.field_size_limit(), len(raw_text) + 1))
        # strict=True para que una comilla sin cerrar se reporte como error
        try:
            reader = csv.reader(io.StringIO(raw_text, newline=''), delimiter=delimiter, strict=True)
        except TypeError as e:
            result.errors.append(ParseError(0, f"Delimitador inválido {delimiter!r}: {e}"))
            return result
        try:
            for row in reader:
                if not row:
                    if skip_empty_lines: continue
                    row = ['']
                result.rows.append(row)
        except csv.Error as e:
            result.errors.append(ParseError(reader.line_num, str(e)))

        if result.errors:
            logger.warning("Parse con %d error(es): %s", len(result.errors), result.errors[0])
        return result

    @staticmethod
    def read_text_file(path: str) -> str:
        # Intentar leer con diferentes codificaciones
        encodings = ['utf-8-sig', 'utf-8', 'latin-1', 'cp1252']
        for enc in encodings:
            try:
                with open(path, "r", encoding=enc, newline="") as f:
                    text = f.read()
                logger.info("Archivo %s leído con codificación %s", path, enc)
                return text
            except UnicodeDecodeError:
                continue
            except OSError as e:
                raise CSVServiceError(f"Error de lectura: {e}") from e
        raise CSVServiceError("No se pudo leer el archivo (revise codificación).")

    @staticmethod
    def is_supported_file(path: str) -> bool:
        return str(path).lower().endswith(SUPPORTED_EXTENSIONS)
