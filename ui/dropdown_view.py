from tkinter import ttk


class DropdownView(ttk.Frame):
    """
    Combobox readonly sobre un dict {valor: etiqueta}; on_select recibe (valor: str)
    """

    def __init__(self, parent, options=None, on_select=None, label=None, *args, **kwargs):
        super().__init__(parent, *args, **kwargs)
        self.on_select = on_select
        self._options = {}

        if label: ttk.Label(self, text=label).pack(side="left", padx=(6, 0))
        self._combobox = ttk.Combobox(self, state="readonly", width=18)
        self._combobox.pack(side="left", fill="x", padx=6, pady=6)
        self._combobox.bind("<<ComboboxSelected>>", self._handle_select)
        self.update_options(options or {})

    def update_options(self, options):
        self._options = dict(options)
        self._combobox["values"] = list(self._options.values())
        if self._options: self._combobox.set(next(iter(self._options.values())))

    def set_selected(self, value):
        if value in self._options: self._combobox.set(self._options[value])

    def _handle_select(self, event):
        if self.on_select: self.on_select(self.get_selected())

    def get_selected(self):
        label = self._combobox.get()
        for value, text in self._options.items():
            if text == label: return value
        return None
