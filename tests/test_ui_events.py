import pytest

tk = pytest.importorskip("tkinter")


@pytest.fixture
def root():
    try:
        window = tk.Tk()
    except tk.TclError:
        pytest.skip("sin display disponible")
    window.withdraw()
    yield window
    window.destroy()


def wait(window, ms):
    window.after(ms, window.quit)
    window.mainloop()


def test_is_own_widget_rejects_tk_internal_names(root):
    from ui.main_window import is_own_widget

    entry = tk.Entry(root)
    other = tk.Toplevel(root)
    assert is_own_widget(entry, root)
    assert not is_own_widget(entry, root, excluded=(entry,))
    assert not is_own_widget(tk.Entry(other), root)
    assert not is_own_widget(".!combobox.popdown.f.l", root)


def test_single_click_copies_cell_after_delay(root):
    from ui.table_view import DOUBLE_CLICK_MS, TableView

    copies = []
    view = TableView(root, on_cell_click=copies.append)
    view.schedule_cell_copy("Alice")
    assert copies == []
    wait(root, DOUBLE_CLICK_MS + 100)
    assert copies == ["Alice"]


def test_double_click_cancels_cell_copy(root):
    from ui.table_view import DOUBLE_CLICK_MS, TableView

    copies, rows = [], []
    view = TableView(root, on_cell_click=copies.append, on_row_copy=rows.append)
    view.schedule_cell_copy("Alice")

    class Event:
        x = y = 0

    view._on_double_click(Event())
    view._on_click(Event())
    wait(root, DOUBLE_CLICK_MS + 100)
    assert copies == []
