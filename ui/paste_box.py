import tkinter as tk
from tkinter import ttk


class PasteBox(ttk.Frame):
    """Área para pegar datos CSV/TSV. Ctrl+Enter o el botón Cargar llaman on_submit(texto)."""

    def __init__(self, parent, on_submit=None, *args, **kwargs):
        super().__init__(parent, *args, **kwargs)
        self.on_submit = on_submit

        ttk.Label(self, text="Pegue aquí datos CSV o TSV (compatible con hojas de cálculo). Atajo: Ctrl + Enter.").pack(anchor="w")
        self._text = tk.Text(self, height=10, wrap="none", font=("Consolas", 10))
        self._text.pack(fill="both", expand=True, pady=5)
        self._text.bind("<Control-Return>", self._handle_submit)
        self._text.bind("<KeyRelease>", self._update_button)
        self._btn = ttk.Button(self, text="📥 Cargar", command=self._handle_submit, state="disabled")
        self._btn.pack(anchor="e")

    @property
    def text_widget(self):
        return self._text

    def _get_text(self):
        return self._text.get("1.0", "end-1c")

    def _update_button(self, event=None):
        self._btn.config(state="normal" if self._get_text() else "disabled")

    def _handle_submit(self, event=None):
        text = self._get_text()
        if text and self.on_submit:
            self.on_submit(text)
            self._text.delete("1.0", "end")
            self._update_button()
        return "break"
