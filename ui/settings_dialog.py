import tkinter as tk
from tkinter import ttk

from models.settings_model import DELIMITER_CHOICES
from ui.dropdown_view import DropdownView

OPTIONS = [
    ('has_header', "La primera fila es encabezado"),
    ('exact_match', "Coincidencia exacta (frase completa)"),
    ('skip_empty_rows', "Omitir filas vacías al cargar"),
    ('simplify_numbers', "Quitar $ y , al copiar celdas"),
]


class SettingsDialog(tk.Toplevel):
    """
    Diálogo modal de opciones. Cada cambio se aplica de inmediato con on_change(**cambios).
    """

    def __init__(self, parent, settings, on_change=None):
        super().__init__(parent)
        self.title("Configuración")
        self.resizable(False, False)
        self.transient(parent)
        self.on_change = on_change

        frame = ttk.Frame(self, padding=15)
        frame.pack(fill="both", expand=True)
        self._vars = {}
        for key, text in OPTIONS:
            var = tk.BooleanVar(value=getattr(settings, key))
            ttk.Checkbutton(frame, text=text, variable=var,
                            command=lambda k=key, v=var: self._changed(k, v.get())).pack(anchor="w", pady=2)
            self._vars[key] = var

        self.dd_delimiter = DropdownView(frame, DELIMITER_CHOICES, label="Delimitador:",
                                         on_select=lambda value: self._changed('delimiter', value))
        self.dd_delimiter.set_selected(settings.delimiter)
        self.dd_delimiter.pack(anchor="w", pady=(8, 0))

        ttk.Button(frame, text="Cerrar", command=self.destroy).pack(anchor="e", pady=(10, 0))
        self.grab_set()

    def _changed(self, key, value):
        if self.on_change: self.on_change(**{key: value})
