import logging
from typing import List, Optional

from models.csv_model import Row, SortSpec, Table
from models.settings_model import Settings
from services.copy_service import CopyService
from services.csv_service import CSVService, CSVServiceError, TableLoadError, UnsupportedFileError
from services.export_service import ExportService
from services.filter_service import FilterService
from services.highlight_service import HighlightService, Span
from services.settings_service import MemorySettingsStore
from services.sort_service import SortService

logger = logging.getLogger(__name__)

DEFAULT_STATUS = "Arrastre o abra un archivo CSV."
LOADED_STATUS = "Datos cargados correctamente."
INVALID_FILE_STATUS = "Seleccione un archivo CSV válido."
INVALID_DATA_MESSAGE = "Formato de datos inválido."


class LogNotifier:
    def notify(self, kind: str, message: str) -> None:
        if kind == "error": logger.error(message)
        else: logger.info(message)


class MemoryClipboard:
    def __init__(self):
        self.text: Optional[str] = None

    def write(self, text: str) -> None:
        self.text = text


class CSVController:
    """
    Estado de la sesión y pipeline de la vista:
        filas mostradas = ordenar(filtrar(tabla, consulta, opciones), sort_spec)
    Todo es síncrono y se recalcula en cada consulta.
    """

    def __init__(self, notifier=None, clipboard=None, settings_store=None):
        self.notifier = notifier or LogNotifier()
        self.clipboard = clipboard or MemoryClipboard()
        self.settings_store = settings_store or MemorySettingsStore()
        self.settings: Settings = self.settings_store.load()

        self.table = Table()
        self.query = ""
        self.sort_spec: Optional[SortSpec] = None
        self.load_delimiter = "auto"
        self.status_text = DEFAULT_STATUS
        self.last_error: CSVServiceError | None = None

    # =========================================================================
    #  CARGA
    # =========================================================================
    def load_raw(self, text: str, delimiter_override: Optional[str] = None) -> bool:
        """
        Reemplaza la tabla de forma atómica. Si el parser reporta errores la tabla
        anterior queda intacta y se emite una sola notificación de error.
        """
        requested = delimiter_override or self.settings.delimiter
        delimiter = CSVService.detect_delimiter(text) if requested == "auto" else requested
        result = CSVService.parse(text, delimiter, self.settings.skip_empty_rows)

        if result.errors:
            self.last_error = TableLoadError(INVALID_DATA_MESSAGE, result.errors)
            self.notifier.notify("error", INVALID_DATA_MESSAGE)
            return False

        self.table = Table(result.rows)
        self.sort_spec = None
        self.load_delimiter = requested
        self.last_error = None
        self.status_text = LOADED_STATUS
        logger.info("Tabla cargada: %d filas, delimitador %r", len(self.table), delimiter)
        self.notifier.notify("success", LOADED_STATUS)
        return True

    def load_file(self, path: str, delimiter_override: Optional[str] = None) -> bool:
        try:
            if not CSVService.is_supported_file(path):
                raise UnsupportedFileError(f"Tipo de archivo no soportado: {path}")
            text = CSVService.read_text_file(path)
        except UnsupportedFileError as e:
            self.last_error = e
            self.status_text = INVALID_FILE_STATUS
            self.notifier.notify("error", INVALID_FILE_STATUS)
            return False
        except CSVServiceError as e:
            self.last_error = e
            self.notifier.notify("error", str(e))
            return False
        return self.load_raw(text, delimiter_override)

    def clear(self):
        self.table = Table()
        self.query = ""
        self.sort_spec = None
        self.load_delimiter = "auto"
        self.status_text = DEFAULT_STATUS
        self.last_error = None

    def has_data(self) -> bool:
        return bool(self.table)

    # =========================================================================
    #  CONSULTA Y ORDEN
    # =========================================================================
    def set_query(self, query: str):
        self.query = query or ""

    def append_query_char(self, ch: str) -> bool:
        # Escribir con la tabla enfocada agrega el carácter al filtro
        if not self.has_data() or len(ch) != 1 or not (ch.isascii() and ch.isalnum()): return False
        self.query += ch
        return True

    def set_sort(self, column_index: int):
        self.sort_spec = SortService.next_spec(self.sort_spec, column_index)
        logger.info("Orden: columna %d %s", self.sort_spec.column_index, self.sort_spec.direction)

    # --- CONFIGURACIÓN ---
    def update_settings(self, **changes) -> Settings:
        self.settings = self.settings.with_changes(**changes)
        self.settings_store.save(self.settings)
        return self.settings

    # =========================================================================
    #  VISTA
    # =========================================================================
    def filtered_rows(self) -> List[Row]:
        return FilterService.filter_rows(self.table, self.query, self.settings.has_header, self.settings.exact_match)

    def displayed_rows(self) -> List[Row]:
        return SortService.sort_rows(self.filtered_rows(), self.sort_spec, self.settings.has_header)

    def row_count(self) -> int:
        return len(self.table.data_rows(self.settings.has_header))

    def displayed_count(self) -> int:
        return len(self.filtered_rows())

    def row_info(self) -> str:
        return f"Filas cargadas: {self.row_count()}, Filas mostradas: {self.displayed_count()}"

    def column_names(self) -> List[str]:
        width = self.table.column_count()
        header = self.table.header(self.settings.has_header)
        return [header[i] if i < len(header) else f"Columna {i + 1}" for i in range(width)]

    def header_labels(self) -> List[str]:
        labels = self.column_names()
        spec = self.sort_spec
        if spec is not None and self.settings.has_header and spec.column_index < len(labels):
            labels[spec.column_index] += " ▼" if spec.descending else " ▲"
        return labels

    def highlight_cell(self, text: str) -> List[Span]:
        return HighlightService.highlight(text, self.query, self.settings.exact_match)

    # =========================================================================
    #  PORTAPAPELES Y EXPORTACIÓN
    # =========================================================================
    def copy_cell(self, text: str) -> str:
        value = CopyService.normalize_for_copy(text, self.settings.simplify_numbers)
        self.clipboard.write(value)
        self.notifier.notify("success", f"Copiado: {value}")
        return value

    def copy_row(self, index: int) -> Optional[str]:
        rows = self.displayed_rows()
        if not 0 <= index < len(rows): return None
        value = CopyService.join_row(rows[index], self.load_delimiter)
        self.clipboard.write(value)
        self.notifier.notify("success", f"Copiado: {value}")
        return value

    def export_view(self, filename: str):
        columns = self.column_names()
        rows = self.displayed_rows()
        if filename.lower().endswith('.csv'):
            ExportService.export_csv(filename, columns, rows, CopyService.row_delimiter(self.load_delimiter))
        else:
            ExportService.export_excel(filename, columns, rows)
        self.notifier.notify("success", f"Exportadas {len(rows)} filas.")
