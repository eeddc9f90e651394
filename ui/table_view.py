import tkinter as tk
from tkinter import ttk

# Margen para distinguir clic simple de doble clic
DOUBLE_CLICK_MS = 300


class TableView(ttk.Frame):
    """
    Tabla con caja de búsqueda. No filtra por sí misma: avisa al controlador vía callbacks
      - on_search(texto), on_sort(indice_columna), on_cell_click(texto), on_row_copy(indice_fila)
    highlighter(texto) -> lista de (texto, coincide) para la vista previa de la fila seleccionada.
    """

    def __init__(self, parent, on_search=None, on_sort=None, on_cell_click=None, on_row_copy=None,
                 highlighter=None, *args, **kwargs):
        super().__init__(parent, *args, **kwargs)
        self.on_search = on_search
        self.on_sort = on_sort
        self.on_cell_click = on_cell_click
        self.on_row_copy = on_row_copy
        self.highlighter = highlighter

        control_frame = ttk.Frame(self)
        control_frame.pack(fill="x", pady=(0, 5))
        ttk.Label(control_frame, text="Buscar:").pack(side="left", padx=(0, 5))
        self.search_var = tk.StringVar()
        self.search_entry = ttk.Entry(control_frame, textvariable=self.search_var, width=40)
        self.search_entry.pack(side="left", padx=(0, 10))
        self.search_entry.bind("<KeyRelease>", self._on_search)
        self.clear_search_btn = ttk.Button(control_frame, text="Limpiar", command=lambda: self.set_search(""))
        self.clear_search_btn.pack(side="left")
        self.status_label = ttk.Label(control_frame, text="")
        self.status_label.pack(side="right")

        tree_frame = ttk.Frame(self)
        tree_frame.pack(fill="both", expand=True)
        self._tree = ttk.Treeview(tree_frame, show="headings", selectmode="browse")
        self._tree.pack(side="left", fill="both", expand=True)
        self._scroll_y = ttk.Scrollbar(tree_frame, orient="vertical", command=self._tree.yview)
        self._scroll_y.pack(side="right", fill="y")
        self._tree.configure(yscrollcommand=self._scroll_y.set)
        self._scroll_x = ttk.Scrollbar(self, orient="horizontal", command=self._tree.xview)
        self._scroll_x.pack(fill="x")
        self._tree.configure(xscrollcommand=self._scroll_x.set)
        self._tree.bind("<ButtonRelease-1>", self._on_click)
        self._tree.bind("<Double-1>", self._on_double_click)
        self._tree.bind("<<TreeviewSelect>>", self._on_select)

        # Vista previa de la fila seleccionada con las coincidencias resaltadas
        self._preview = tk.Text(self, height=4, wrap="word", state="disabled", font=("Arial", 10))
        self._preview.pack(fill="x", pady=(5, 0))
        self._preview.tag_configure("search_hl", background="#ffe066")
        self._preview.tag_configure("col_name", foreground="#555555", font=("Arial", 10, "bold"))

        self._current_columns = []
        self._current_rows = []
        self._pending_copy = None
        self._skip_release = False

    # --- EVENTOS ---
    def _on_search(self, event=None):
        if event is not None and event.keysym == "Escape": return
        if self.on_search: self.on_search(self.search_var.get())

    def set_search(self, text):
        self.search_var.set(text)
        if self.on_search: self.on_search(text)

    def focus_search(self):
        self.search_entry.focus_set()
        self.search_entry.icursor("end")

    def _cell_at(self, event):
        item = self._tree.identify_row(event.y)
        col = self._tree.identify_column(event.x)
        if not item or not col: return None, None
        return self._tree.index(item), int(col.lstrip("#")) - 1

    def _on_click(self, event):
        # Soltar el botón tras un doble clic no debe volver a programar la copia de celda
        if self._skip_release:
            self._skip_release = False
            return
        if self._tree.identify_region(event.x, event.y) == "heading":
            col = self._tree.identify_column(event.x)
            if col and self.on_sort: self.on_sort(int(col.lstrip("#")) - 1)
            return
        row_idx, col_idx = self._cell_at(event)
        if row_idx is None or row_idx >= len(self._current_rows): return
        row = self._current_rows[row_idx]
        if col_idx < len(row): self.schedule_cell_copy(row[col_idx])

    def schedule_cell_copy(self, text):
        # La copia de celda espera: si llega un doble clic se copia la fila en su lugar
        self.cancel_cell_copy()
        if self.on_cell_click: self._pending_copy = self.after(DOUBLE_CLICK_MS, self._fire_cell_copy, text)

    def cancel_cell_copy(self):
        if self._pending_copy is not None:
            self.after_cancel(self._pending_copy)
            self._pending_copy = None

    def _fire_cell_copy(self, text):
        self._pending_copy = None
        if self.on_cell_click: self.on_cell_click(text)

    def _on_double_click(self, event):
        self._skip_release = True
        self.cancel_cell_copy()
        row_idx, _ = self._cell_at(event)
        if row_idx is not None and self.on_row_copy: self.on_row_copy(row_idx)

    def _on_select(self, event=None):
        sel = self._tree.selection()
        if not sel: return
        idx = self._tree.index(sel[0])
        if idx < len(self._current_rows): self._show_preview(self._current_rows[idx])

    def _show_preview(self, row):
        self._preview.configure(state="normal")
        self._preview.delete("1.0", "end")
        for i, cell in enumerate(row):
            name = self._current_columns[i] if i < len(self._current_columns) else f"Columna {i + 1}"
            self._preview.insert("end", f"{name}: ", "col_name")
            spans = self.highlighter(cell) if self.highlighter else [(cell, False)]
            for text, is_match in spans:
                self._preview.insert("end", text, "search_hl" if is_match else ())
            self._preview.insert("end", "   ")
        self._preview.configure(state="disabled")

    # --- DIBUJO ---
    def clear(self):
        for r in self._tree.get_children(): self._tree.delete(r)
        self._tree["columns"] = ()
        self._preview.configure(state="normal")
        self._preview.delete("1.0", "end")
        self._preview.configure(state="disabled")

    def update_table_multi(self, columns, rows, labels=None, status=""):
        self._current_columns = list(columns)
        self._current_rows = list(rows)
        self.clear()
        self.status_label.config(text=status)
        if not columns: return
        ids = [f"c{i}" for i in range(len(columns))]
        self._tree["columns"] = tuple(ids)
        for i, col in enumerate(ids):
            self._tree.heading(col, text=(labels or columns)[i])
            self._tree.column(col, anchor="w", width=180)
        for row in rows:
            safe = []
            for i in range(len(columns)):
                if i < len(row): safe.append("" if row[i] is None else str(row[i]))
                else: safe.append("")
            self._tree.insert("", "end", values=tuple(safe))
