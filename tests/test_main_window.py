import os

import pytest

pytest.importorskip("PyQt6")
pytest.importorskip("pytestqt")

from PyQt6.QtGui import QGuiApplication

import bmfont_lua
from bmfont_lua.core.converter import convert
from bmfont_lua.gui import main_window
from bmfont_lua.gui.main_window import MainWindow, _create_file_handler


@pytest.fixture
def window(qtbot):
    w = MainWindow()
    qtbot.addWidget(w)
    yield w
    if w.load_worker is not None:
        w.load_worker.wait()


def test_initial_state(window):
    assert window.file_name_label.text() == "No file selected"
    assert window.output_group.isHidden()
    assert not window.toolbar_copy.isEnabled()
    assert window.status_label.isHidden()


def test_load_valid_file(window, qtbot, tmp_path, scenario_a):
    path = tmp_path / "font.fnt"
    path.write_text(scenario_a, encoding="utf-8")

    window.load_descriptor(str(path))
    qtbot.waitUntil(lambda: window.status_label.property("kind") == "success", timeout=5000)

    assert window.status_label.text() == "Conversion successful!"
    assert window.output_view.toPlainText() == convert(scenario_a).output
    assert not window.output_group.isHidden()
    assert window.toolbar_copy.isEnabled()
    assert window.file_name_label.text() == "font.fnt"
    assert window.windowTitle() == "BMFont to Lua Converter - font.fnt"


def test_load_invalid_descriptor(window, qtbot, tmp_path):
    path = tmp_path / "font.xml"
    path.write_text('<chars count="1"></chars>', encoding="utf-8")

    window.load_descriptor(str(path))
    qtbot.waitUntil(lambda: window.status_label.property("kind") == "error", timeout=5000)

    assert window.status_label.text() == "Missing <info> element."
    assert window.output_group.isHidden()
    assert not window.toolbar_copy.isEnabled()


def test_rejects_file_type(window, tmp_path):
    window.load_descriptor(str(tmp_path / "atlas.png"))

    assert window.status_label.property("kind") == "error"
    assert window.status_label.text() == "Invalid file type. Select .xml, .fnt, or .txt."
    assert window.load_worker is None


def test_unreadable_file(window, qtbot, tmp_path):
    window.load_descriptor(str(tmp_path / "missing.fnt"))
    qtbot.waitUntil(lambda: window.status_label.property("kind") == "error", timeout=5000)

    assert window.status_label.text().startswith("Error reading file: ")
    assert window.file_name_label.text() == "Error reading missing.fnt"


def test_copy_to_clipboard(window, qtbot, scenario_a):
    window._on_conversion_finished(convert(scenario_a))

    window._copy_to_clipboard()

    assert QGuiApplication.clipboard().text() == window.output_text
    assert window.toolbar_copy.text() == "Copied!"
    assert not window.toolbar_copy.isEnabled()
    qtbot.waitUntil(lambda: window.toolbar_copy.isEnabled(), timeout=3000)
    assert window.toolbar_copy.text() == "📋 Copy"


def test_copy_without_output_does_nothing(window):
    window._copy_to_clipboard()
    assert window.toolbar_copy.text() == "📋 Copy"


def test_unexpected_error_message(window):
    window._on_conversion_error("boom")
    assert window.status_label.text() == "Error during conversion: boom. Check console for details."


def test_change_language(window):
    window._change_language("pt_BR")

    assert window.file_menu.title() == "&Arquivo"
    assert window.toolbar_open.text() == "📂 Abrir"
    assert window.file_name_label.text() == "Nenhum arquivo selecionado"
    assert window.language_actions["pt_BR"].isChecked()
    assert not window.language_actions["en"].isChecked()


def test_second_load_replaces_first(window, qtbot, tmp_path, scenario_a):
    first = tmp_path / "first.fnt"
    first.write_text(scenario_a, encoding="utf-8")
    second = tmp_path / "second.xml"
    second.write_text('<chars count="1"></chars>', encoding="utf-8")

    window.load_descriptor(str(first))
    window.load_descriptor(str(second))
    qtbot.waitUntil(lambda: window.status_label.property("kind") == "error", timeout=5000)
    qtbot.wait(200)

    assert window.status_label.text() == "Missing <info> element."
    assert window.output_group.isHidden()
    assert window.output_text == ""
    assert window.file_name_label.text() == "second.xml"


def test_rejected_file_drops_pending_result(window, qtbot, tmp_path, scenario_a):
    path = tmp_path / "font.fnt"
    path.write_text(scenario_a, encoding="utf-8")

    window.load_descriptor(str(path))
    window.load_descriptor(str(tmp_path / "atlas.png"))
    qtbot.wait(200)

    assert window.status_label.text() == "Invalid file type. Select .xml, .fnt, or .txt."
    assert window.output_group.isHidden()


def test_log_file_outside_package():
    package_dir = os.path.dirname(os.path.abspath(bmfont_lua.__file__))
    assert not os.path.abspath(main_window.LOG_FILE).startswith(package_dir)


def test_unwritable_log_file_is_skipped(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    assert _create_file_handler(str(blocker / "logs" / "debug.log")) is None


def test_log_file_handler(tmp_path):
    handler = _create_file_handler(str(tmp_path / "logs" / "debug.log"))
    try:
        assert handler is not None
        assert (tmp_path / "logs" / "debug.log").exists()
    finally:
        handler.close()
