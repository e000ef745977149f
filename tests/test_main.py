import pytest

tk = pytest.importorskip("tkinter")

import Main as main_module
from Settings import Settings


@pytest.fixture
def headless_main(monkeypatch, tmp_path):
    def no_display():
        raise tk.TclError("no display name and no $DISPLAY environment variable")

    monkeypatch.setattr(main_module.tk, "Tk", no_display)
    return main_module.Main(Settings(history_file=tmp_path / "history.txt"))


def feed(monkeypatch, answers):
    answers = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))


def test_falls_back_to_console(capsys, headless_main):
    assert headless_main.root is None
    assert "GUI not available" in capsys.readouterr().out


def test_console_convert_view_and_exit(headless_main, monkeypatch, capsys, tmp_path):
    # Convert 1 USD to INR, view history, exit.
    feed(monkeypatch, ["1", "4", "2", "1", "1", "2", "4"])
    headless_main.run()
    out = capsys.readouterr().out
    assert "Converted Value: 83.0000 INR" in out
    assert "Conversion History:\n1.00 USD = 83.0000 INR" in out
    assert (tmp_path / "history.txt").read_text(encoding="utf-8") == "1.00 USD = 83.0000 INR\n"


def test_console_invalid_value_and_clear(headless_main, monkeypatch, capsys, tmp_path):
    feed(monkeypatch, ["1", "3", "1", "2", "hot", "3", "9", "4"])
    headless_main.run()
    out = capsys.readouterr().out
    assert "Invalid Input" in out
    assert "History cleared." in out
    assert "Invalid choice." in out
    assert (tmp_path / "history.txt").read_text(encoding="utf-8") == ""


def test_build_controller_wires_history_file(tmp_path):
    settings = Settings(history_file=tmp_path / "h.txt")
    controller = main_module.build_controller(settings)
    assert controller.history_log.path == tmp_path / "h.txt"
    assert controller.catalog.categories()[0] == "Length"


@pytest.fixture
def tk_root():
    try:
        root = tk.Tk()
    except tk.TclError:
        pytest.skip("no display available")
    root.withdraw()
    yield root
    root.destroy()


def test_form_converts_and_clears(tk_root, tmp_path):
    settings = Settings(history_file=tmp_path / "history.txt")
    form = main_module.ConverterForm(tk_root, main_module.build_controller(settings), settings)

    form.on_category_selected("Currency")
    assert form.from_var.get() == "INR"
    form.from_menu["menu"].invoke(1)
    form.to_menu["menu"].invoke(0)
    assert (form.from_var.get(), form.to_var.get()) == ("USD", "INR")

    form.input_entry.insert(0, "1")
    form.on_convert()
    assert form.output_var.get() == "83.0000"
    assert "1.00 USD = 83.0000 INR" in form.history_area.get("1.0", tk.END)

    form.on_clear()
    assert form.history_area.get("1.0", tk.END).strip() == "Conversion History:"
    assert (tmp_path / "history.txt").read_text(encoding="utf-8") == ""


def test_form_shows_invalid_input(tk_root, tmp_path):
    settings = Settings(history_file=tmp_path / "history.txt")
    form = main_module.ConverterForm(tk_root, main_module.build_controller(settings), settings)
    form.input_entry.insert(0, "1_000")
    form.on_convert()
    assert form.output_var.get() == "Invalid Input"
    assert not (tmp_path / "history.txt").exists()
