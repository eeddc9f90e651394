import logging
import tkinter as tk
from tkinter import ttk, filedialog, messagebox

from controllers.csv_controller import CSVController
from services.settings_service import SettingsStore
from ui.paste_box import PasteBox
from ui.settings_dialog import SettingsDialog
from ui.table_view import TableView

logger = logging.getLogger(__name__)


def is_own_widget(widget, window, excluded=()):
    """
    True si el evento viene de un widget tkinter de la ventana principal.
    Widgets internos de Tk (p.ej. el listbox del Combobox) llegan como str.
    """
    if not isinstance(widget, tk.Misc) or widget in excluded: return False
    return str(widget.winfo_toplevel()) == str(window)


class StatusNotifier:
    """Notificaciones en la barra de estado; los errores además en un messagebox."""

    def __init__(self, label):
        self.label = label

    def notify(self, kind, message):
        if kind == "error":
            self.label.config(text=f"❌ {message}")
            messagebox.showerror("Error", message)
        else:
            self.label.config(text=f"✅ {message}")


class TkClipboard:
    def __init__(self, window):
        self.window = window

    def write(self, text):
        self.window.clipboard_clear()
        self.window.clipboard_append(text)


class MainWindow:
    def __init__(self, settings_path=None):
        self.window = tk.Tk()
        self.window.title("CSV Finder - Búsqueda rápida en CSV")
        self.window.geometry("1200x800")
        self.window.protocol("WM_DELETE_WINDOW", self.on_closing)

        self.project_toolbar = ttk.Frame(self.window, relief=tk.RAISED, borderwidth=1)
        self.project_toolbar.pack(side="top", fill="x")
        ttk.Button(self.project_toolbar, text="📂 Abrir CSV", command=self.open_file_action).pack(side="left", padx=5, pady=5)
        ttk.Button(self.project_toolbar, text="📋 Pegar", command=self.paste_clipboard_action).pack(side="left", padx=5, pady=5)
        ttk.Button(self.project_toolbar, text="💾 Exportar vista", command=self.export_action).pack(side="left", padx=5, pady=5)
        ttk.Button(self.project_toolbar, text="❌ Limpiar", command=self.clear_action).pack(side="left", padx=5, pady=5)
        ttk.Separator(self.project_toolbar, orient="vertical").pack(side="left", fill="y", padx=10, pady=5)
        ttk.Button(self.project_toolbar, text="⚙️ Configuración", command=self.settings_action).pack(side="left", padx=5, pady=5)

        self.status_frame = ttk.Frame(self.window, relief=tk.SUNKEN, padding=(5, 2))
        self.status_frame.pack(side="bottom", fill="x")
        self.lbl_status = ttk.Label(self.status_frame, text="Listo", anchor="w")
        self.lbl_status.pack(side="left", fill="x")
        ttk.Label(self.status_frame, text="Todo el procesamiento ocurre localmente.",
                  font=("Arial", 8, "italic")).pack(side="right")

        self.controller = CSVController(notifier=StatusNotifier(self.lbl_status),
                                        clipboard=TkClipboard(self.window),
                                        settings_store=SettingsStore(settings_path))

        self.body = ttk.Frame(self.window, padding=10)
        self.body.pack(fill="both", expand=True)

        # Vista sin datos: texto de estado + caja para pegar
        self.empty_view = ttk.Frame(self.body)
        ttk.Label(self.empty_view, text="CSV Finder", font=("Arial", 20, "bold")).pack(anchor="w")
        ttk.Label(self.empty_view, text="Cargue y busque datos CSV rápidamente.").pack(anchor="w", pady=(0, 10))
        self.lbl_drop = ttk.Label(self.empty_view, text=self.controller.status_text, font=("Arial", 11))
        self.lbl_drop.pack(anchor="w", pady=(0, 10))
        self.paste_box = PasteBox(self.empty_view, on_submit=self.load_text)
        self.paste_box.pack(fill="both", expand=True)

        # Vista con datos
        self.table_view = TableView(self.body, on_search=self.on_search, on_sort=self.on_sort,
                                    on_cell_click=self.controller.copy_cell,
                                    on_row_copy=self.controller.copy_row,
                                    highlighter=self.controller.highlight_cell)

        self.window.bind_all("<Key>", self._on_key, add="+")
        self.refresh()

    def run_task(self, description, func):
        self.window.config(cursor="watch")
        self.lbl_status.config(text=f"⏳ {description}...")
        self.window.update()
        try:
            func()
        except Exception as e:
            logger.exception("Fallo en '%s'", description)
            self.lbl_status.config(text="❌ Error")
            messagebox.showerror("Error", str(e))
        finally:
            self.window.config(cursor="")

    # --- ACCIONES ---
    def load_text(self, text):
        self.controller.load_raw(text)
        self.refresh()

    def open_file_action(self):
        path = filedialog.askopenfilename(filetypes=[("CSV / TSV", "*.csv *.tsv *.txt"), ("Todos", "*.*")])
        if not path: return
        self.run_task("Cargando archivo", lambda: self.controller.load_file(path))
        self.refresh()

    def paste_clipboard_action(self):
        try:
            text = self.window.clipboard_get()
        except tk.TclError:
            self.lbl_status.config(text="El portapapeles está vacío.")
            return
        self.load_text(text)

    def export_action(self):
        if not self.controller.has_data(): return
        path = filedialog.asksaveasfilename(initialfile="vista.xlsx", defaultextension=".xlsx",
                                            filetypes=[("Excel", "*.xlsx"), ("CSV", "*.csv")])
        if not path: return
        self.run_task("Exportando", lambda: self.controller.export_view(path))

    def clear_action(self):
        self.controller.clear()
        self.table_view.search_var.set("")
        self.refresh()

    def settings_action(self):
        SettingsDialog(self.window, self.controller.settings, on_change=self.on_settings_change)

    def on_settings_change(self, **changes):
        self.controller.update_settings(**changes)
        self.refresh()

    def on_search(self, text):
        self.controller.set_query(text)
        self.refresh_table()

    def on_sort(self, column_index):
        self.controller.set_sort(column_index)
        self.refresh_table()

    def _on_key(self, event):
        # Escape limpia el filtro; letras/números fuera del buscador se agregan al filtro
        if event.keysym == "Escape":
            if self.controller.query: self.table_view.set_search("")
            return
        if event.state & 0x4: return  # Ctrl
        excluded = (self.table_view.search_entry, self.paste_box.text_widget)
        if not is_own_widget(event.widget, self.window, excluded): return
        if self.controller.append_query_char(event.char):
            self.table_view.search_var.set(self.controller.query)
            self.table_view.focus_search()
            self.refresh_table()

    # --- DIBUJO ---
    def refresh(self):
        if self.controller.has_data():
            self.empty_view.pack_forget()
            self.table_view.pack(fill="both", expand=True)
            self.refresh_table()
        else:
            self.table_view.pack_forget()
            self.lbl_drop.config(text=self.controller.status_text)
            self.empty_view.pack(fill="both", expand=True)

    def refresh_table(self):
        self.table_view.update_table_multi(columns=self.controller.column_names(),
                                           rows=self.controller.displayed_rows(),
                                           labels=self.controller.header_labels(),
                                           status=self.controller.row_info())

    def on_closing(self):
        if messagebox.askokcancel("Salir", "¿Seguro que quieres salir?"):
            self.window.destroy()

    def run(self): self.window.mainloop()
