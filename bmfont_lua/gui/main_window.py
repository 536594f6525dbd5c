"""
Main Window - Primary application window for the BMFont to Lua Converter.
"""

import os
import sys
import logging
import traceback
from typing import Optional

# ============================================================
# LOGGING SETUP - Detailed logging to file and console
# ============================================================
LOG_DIR = os.path.join(os.path.expanduser('~'), '.bmfont_lua')
LOG_FILE = os.path.join(LOG_DIR, 'bmfont_debug.log')


def _create_file_handler(log_file: str) -> Optional[logging.Handler]:
    """Open the debug log file, or return None when it cannot be written."""
    try:
        os.makedirs(os.path.dirname(log_file), exist_ok=True)
        handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
    except OSError as e:
        print(f"[WARNING] Cannot write log file {log_file}: {e}", file=sys.stderr)
        return None
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter('%(asctime)s [%(levelname)s] %(funcName)s: %(message)s'))
    return handler


# Create logger
logger = logging.getLogger('BMFONT')
logger.setLevel(logging.DEBUG)

# Clear existing handlers
logger.handlers.clear()

# File handler - detailed log
file_handler = _create_file_handler(LOG_FILE)

# Console handler
console_handler = logging.StreamHandler(sys.stdout)
console_handler.setLevel(logging.INFO)
console_handler.setFormatter(logging.Formatter('[%(levelname)s] %(message)s'))

if file_handler is not None:
    logger.addHandler(file_handler)
logger.addHandler(console_handler)

logger.info("=" * 60)
logger.info("BMFont to Lua Converter - Starting")
logger.info(f"Log file: {LOG_FILE if file_handler is not None else 'disabled'}")
logger.info(f"Python: {sys.executable}")
logger.info(f"Working dir: {os.getcwd()}")
logger.info("=" * 60)

from PyQt6.QtWidgets import (
    QApplication, QMainWindow, QWidget, QVBoxLayout, QToolBar,
    QStatusBar, QFileDialog, QLabel, QGroupBox, QPlainTextEdit
)
from PyQt6.QtCore import Qt, QSize, QThread, QTimer, pyqtSignal
from PyQt6.QtGui import QAction, QFontDatabase, QGuiApplication

logger.info("PyQt6 imports successful")

from ..core.converter import ConversionResult
from ..core.loader import DescriptorFileError, convert_file, is_supported_file
from ..i18n import tr, set_language, get_language, get_available_languages

# How long the copy action reads "Copied!" before resetting
COPY_FEEDBACK_MS = 1500

STATUS_STYLES = {
    "success": "background-color: #1f3b2c; color: #a6e3a1; border: 1px solid #a6e3a1;",
    "error": "background-color: #3b1f2a; color: #f38ba8; border: 1px solid #f38ba8;",
}


class ConversionWorker(QThread):
    """Background worker that reads and converts a descriptor file."""

    converted = pyqtSignal(object)  # ConversionResult
    file_error = pyqtSignal(str)  # unsupported or unreadable file
    error = pyqtSignal(str)  # unexpected failure

    def __init__(self, file_path: str, fail_fast: bool = True, parent=None):
        super().__init__(parent)
        self.file_path = file_path
        self.fail_fast = fail_fast

    def run(self):
        try:
            result = convert_file(self.file_path, fail_fast=self.fail_fast)
            self.converted.emit(result)
        except DescriptorFileError as e:
            self.file_error.emit(str(e))
        except Exception as e:
            traceback.print_exc()
            self.error.emit(str(e))


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self):
        super().__init__()
        self.current_file_path: Optional[str] = None
        self.output_text = ""
        self.load_worker: Optional[ConversionWorker] = None

        self.setAcceptDrops(True)

        self._setup_ui()
        self._setup_menu()
        self._setup_toolbar()
        self._apply_dark_theme()

    def _setup_ui(self):
        """Setup the main UI layout."""
        self.setWindowTitle(tr("window.title"))
        self.setMinimumSize(640, 480)
        self.resize(900, 700)

        central = QWidget()
        self.setCentralWidget(central)

        layout = QVBoxLayout(central)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(8)

        self.file_name_label = QLabel(tr("panel.no_file"))
        self.file_name_label.setStyleSheet("color: #6c7086; font-size: 13px;")
        layout.addWidget(self.file_name_label)

        self.hint_label = QLabel(tr("panel.drop_hint"))
        self.hint_label.setStyleSheet("color: #6c7086; font-size: 11px;")
        layout.addWidget(self.hint_label)

        # Status banner - hidden until there is something to report
        self.status_label = QLabel()
        self.status_label.setWordWrap(True)
        self.status_label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        self.status_label.setVisible(False)
        layout.addWidget(self.status_label)

        # Output area - only shown after a successful conversion
        self.output_group = QGroupBox(tr("panel.output"))
        output_layout = QVBoxLayout(self.output_group)
        output_layout.setContentsMargins(8, 12, 8, 8)

        self.output_view = QPlainTextEdit()
        self.output_view.setReadOnly(True)
        self.output_view.setLineWrapMode(QPlainTextEdit.LineWrapMode.NoWrap)
        self.output_view.setFont(QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont))
        output_layout.addWidget(self.output_view)

        self.output_group.setVisible(False)
        layout.addWidget(self.output_group, 1)
        layout.addStretch()

        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)
        self.status_bar.showMessage(tr("status.ready"))

    def _setup_menu(self):
        """Setup menu bar."""
        menubar = self.menuBar()

        # File menu
        self.file_menu = menubar.addMenu(tr("menu.file"))

        self.menu_open = QAction(tr("menu.open"), self)
        self.menu_open.setShortcut("Ctrl+O")
        self.menu_open.triggered.connect(self._open_file)
        self.file_menu.addAction(self.menu_open)

        self.file_menu.addSeparator()

        self.menu_exit = QAction(tr("menu.exit"), self)
        self.menu_exit.setShortcut("Ctrl+Q")
        self.menu_exit.triggered.connect(self.close)
        self.file_menu.addAction(self.menu_exit)

        # Edit menu
        self.edit_menu = menubar.addMenu(tr("menu.edit"))

        self.menu_copy = QAction(tr("menu.copy"), self)
        self.menu_copy.setShortcut("Ctrl+Shift+C")
        self.menu_copy.triggered.connect(self._copy_to_clipboard)
        self.menu_copy.setEnabled(False)
        self.edit_menu.addAction(self.menu_copy)

        # View menu
        self.view_menu = menubar.addMenu(tr("menu.view"))

        # Language submenu
        language_menu = self.view_menu.addMenu("🌐 Language / Idioma")
        self.language_actions = {}

        for code, name in get_available_languages().items():
            lang_action = QAction(name, self)
            lang_action.setCheckable(True)
            lang_action.setChecked(code == get_language())
            lang_action.triggered.connect(lambda checked, c=code: self._change_language(c))
            language_menu.addAction(lang_action)
            self.language_actions[code] = lang_action

    def _setup_toolbar(self):
        """Setup toolbar."""
        toolbar = QToolBar("Main Toolbar")
        toolbar.setMovable(False)
        toolbar.setIconSize(QSize(24, 24))
        toolbar.setToolButtonStyle(Qt.ToolButtonStyle.ToolButtonTextBesideIcon)
        self.addToolBar(toolbar)
        self.main_toolbar = toolbar

        self.toolbar_open = QAction(tr("toolbar.open"), self)
        self.toolbar_open.setToolTip(tr("toolbar.open_tooltip"))
        self.toolbar_open.triggered.connect(self._open_file)
        toolbar.addAction(self.toolbar_open)

        toolbar.addSeparator()

        self.toolbar_copy = QAction(tr("toolbar.copy"), self)
        self.toolbar_copy.setToolTip(tr("toolbar.copy_tooltip"))
        self.toolbar_copy.triggered.connect(self._copy_to_clipboard)
        self.toolbar_copy.setEnabled(False)
        toolbar.addAction(self.toolbar_copy)

    def _change_language(self, lang_code: str):
        """Change the application language."""
        if set_language(lang_code):
            for code, action in self.language_actions.items():
                action.setChecked(code == lang_code)

            lang_name = get_available_languages().get(lang_code, lang_code)
            logger.info(f"Language changed to {lang_code}")

            self._retranslate_ui()
            self.status_bar.showMessage(tr("status.language_changed", language=lang_name))

    def _retranslate_ui(self):
        """Update all UI text with current language translations."""
        self._update_window_title()

        self.file_menu.setTitle(tr("menu.file"))
        self.edit_menu.setTitle(tr("menu.edit"))
        self.view_menu.setTitle(tr("menu.view"))

        self.menu_open.setText(tr("menu.open"))
        self.menu_copy.setText(tr("menu.copy"))
        self.menu_exit.setText(tr("menu.exit"))

        self.toolbar_open.setText(tr("toolbar.open"))
        self.toolbar_open.setToolTip(tr("toolbar.open_tooltip"))
        self.toolbar_copy.setText(tr("toolbar.copy"))
        self.toolbar_copy.setToolTip(tr("toolbar.copy_tooltip"))

        if not self.current_file_path:
            self.file_name_label.setText(tr("panel.no_file"))
        self.hint_label.setText(tr("panel.drop_hint"))
        self.output_group.setTitle(tr("panel.output"))

        if not self.current_file_path:
            self.status_bar.showMessage(tr("status.ready"))

    def _apply_dark_theme(self):
        """Apply dark theme to the application."""
        self.setStyleSheet("""
            QMainWindow, QWidget {
                background-color: #1e1e2e;
                color: #cdd6f4;
                font-size: 13px;
            }
            QMenuBar {
                background-color: #181825;
                color: #cdd6f4;
                font-size: 13px;
                padding: 4px;
            }
            QMenuBar::item {
                padding: 6px 12px;
            }
            QMenuBar::item:selected {
                background-color: #313244;
            }
            QMenu {
                background-color: #1e1e2e;
                color: #cdd6f4;
                border: 1px solid #313244;
                font-size: 13px;
            }
            QMenu::item {
                padding: 8px 25px;
            }
            QMenu::item:selected {
                background-color: #45475a;
            }
            QToolBar {
                background-color: #181825;
                border: none;
                spacing: 4px;
                padding: 4px 6px;
            }
            QToolButton {
                background-color: transparent;
                color: #cdd6f4;
                padding: 6px 10px;
                border-radius: 6px;
                font-size: 12px;
            }
            QToolButton:hover {
                background-color: #313244;
            }
            QToolButton:disabled {
                color: #6c6f85;
            }
            QGroupBox {
                font-weight: bold;
                border: 2px solid #313244;
                border-radius: 6px;
                margin-top: 10px;
                padding-top: 8px;
                font-size: 12px;
            }
            QGroupBox::title {
                subcontrol-origin: margin;
                left: 10px;
                padding: 0 6px;
            }
            QPlainTextEdit {
                background-color: #181825;
                border: 1px solid #313244;
                border-radius: 4px;
                padding: 6px;
            }
            QStatusBar {
                background-color: #181825;
                color: #a6adc8;
                font-size: 12px;
                padding: 4px;
            }
            QLabel {
                color: #cdd6f4;
                font-size: 12px;
            }
        """)

    # ------------------------------------------------------------
    # File selection
    # ------------------------------------------------------------

    def _open_file(self):
        """Open a descriptor file."""
        logger.info("Opening file dialog...")
        file_path, _ = QFileDialog.getOpenFileName(
            self,
            tr("panel.open_title"),
            "",
            tr("panel.file_filter")
        )

        if file_path:
            logger.info(f"Selected file: {file_path}")
            self.load_descriptor(file_path)
        else:
            logger.info("File dialog cancelled")

    def dragEnterEvent(self, event):
        if event.mimeData().hasUrls():
            event.acceptProposedAction()
        else:
            event.ignore()

    def dropEvent(self, event):
        local_files = [url.toLocalFile() for url in event.mimeData().urls() if url.isLocalFile()]
        if not local_files:
            event.ignore()
            return

        event.acceptProposedAction()
        logger.info(f"Dropped file: {local_files[0]}")
        self.load_descriptor(local_files[0])

    def load_descriptor(self, file_path: str, fail_fast: bool = True):
        """Convert a descriptor file using a background thread."""
        logger.info(f"Loading descriptor: {file_path}")
        self._release_worker()
        self.clear_status()
        self._hide_output()

        file_name = os.path.basename(file_path)
        self.current_file_path = file_path
        self.file_name_label.setText(file_name)
        self.file_name_label.setToolTip(file_name)
        self.file_name_label.setStyleSheet("color: #cdd6f4; font-size: 13px;")
        self._update_window_title()

        if not is_supported_file(file_path):
            logger.warning(f"Rejected file type: {file_name}")
            self.show_status(tr("error.invalid_file_type"), "error")
            return

        self.status_bar.showMessage(tr("status.loading", filename=file_name))

        self.load_worker = ConversionWorker(file_path, fail_fast=fail_fast, parent=self)
        self.load_worker.converted.connect(self._on_conversion_finished)
        self.load_worker.file_error.connect(self._on_file_error)
        self.load_worker.error.connect(self._on_conversion_error)
        self.load_worker.start()

    def _release_worker(self):
        """Detach the previous worker so its results never reach the window."""
        worker = self.load_worker
        if worker is None:
            return
        for signal in (worker.converted, worker.file_error, worker.error):
            try:
                signal.disconnect()
            except TypeError:
                pass
        if worker.isRunning():
            worker.wait()
        # Deleted after its already queued emissions are delivered
        worker.deleteLater()
        self.load_worker = None

    def _is_stale_result(self) -> bool:
        # Emissions already queued before the worker was released
        sender = self.sender()
        return sender is not None and sender is not self.load_worker

    # ------------------------------------------------------------
    # Conversion results
    # ------------------------------------------------------------

    def _on_conversion_finished(self, result: ConversionResult):
        """Show the Lua table or the diagnostic."""
        if self._is_stale_result():
            return
        if result.ok:
            self.output_text = result.output
            self.output_view.setPlainText(result.output)
            self.output_group.setVisible(True)
            self._reset_copy_button()
            self.show_status(tr("status.success"), "success")
            logger.info(f"Conversion successful: {len(result.font.characters)} characters")
        else:
            self._hide_output()
            self.show_status(result.to_text(), "error")
            logger.warning(f"Conversion failed: {result.to_text()}")
        self.status_bar.clearMessage()

    def _on_file_error(self, error_message: str):
        """Handle unsupported or unreadable files."""
        if self._is_stale_result():
            return
        logger.error(f"File error: {error_message}")
        self._hide_output()
        self.show_status(error_message, "error")
        if self.current_file_path:
            self.file_name_label.setText(
                tr("error.reading_name", filename=os.path.basename(self.current_file_path))
            )
        self.status_bar.clearMessage()

    def _on_conversion_error(self, error_message: str):
        """Handle unexpected failures raised while converting."""
        if self._is_stale_result():
            return
        logger.error(f"Conversion error: {error_message}")
        self._hide_output()
        self.show_status(tr("error.conversion_failed", error=error_message), "error")
        self.status_bar.clearMessage()

    def _hide_output(self):
        self.output_text = ""
        self.output_view.clear()
        self.output_group.setVisible(False)
        self.menu_copy.setEnabled(False)
        self.toolbar_copy.setEnabled(False)

    # ------------------------------------------------------------
    # Clipboard
    # ------------------------------------------------------------

    def _copy_to_clipboard(self):
        """Copy the Lua output and briefly show "Copied!"."""
        if not self.output_text:
            return

        clipboard = QGuiApplication.clipboard()
        clipboard.setText(self.output_text)
        if clipboard.text() != self.output_text:
            logger.error("Failed to copy text to clipboard")
            self.show_status(tr("error.copy_failed"), "error")
            return

        logger.info("Output copied to clipboard")
        self.toolbar_copy.setText(tr("toolbar.copied"))
        self.toolbar_copy.setEnabled(False)
        self.menu_copy.setEnabled(False)
        QTimer.singleShot(COPY_FEEDBACK_MS, self._reset_copy_button)

    def _reset_copy_button(self):
        self.toolbar_copy.setText(tr("toolbar.copy"))
        has_output = bool(self.output_text)
        self.toolbar_copy.setEnabled(has_output)
        self.menu_copy.setEnabled(has_output)

    # ------------------------------------------------------------
    # Status banner
    # ------------------------------------------------------------

    def show_status(self, message: str, kind: str):
        """Show a success or error banner."""
        self.status_label.setText(message)
        self.status_label.setProperty("kind", kind)
        self.status_label.setStyleSheet(
            STATUS_STYLES.get(kind, "") + " border-radius: 6px; padding: 8px;"
        )
        self.status_label.setVisible(True)

    def clear_status(self):
        self.status_label.setText("")
        self.status_label.setProperty("kind", None)
        self.status_label.setVisible(False)

    def closeEvent(self, event):
        if self.load_worker is not None and self.load_worker.isRunning():
            self.load_worker.wait()
        super().closeEvent(event)

    def _update_window_title(self):
        """Update window title to show the current file name."""
        if self.current_file_path:
            file_name = os.path.basename(self.current_file_path)
            self.setWindowTitle(tr("window.title_with_file", filename=file_name))
        else:
            self.setWindowTitle(tr("window.title"))


def run_app(file_path: str = None):
    """Run the application."""
    app = QApplication(sys.argv)
    app.setStyle("Fusion")

    window = MainWindow()
    window.show()

    if file_path:
        window.load_descriptor(file_path)

    sys.exit(app.exec())
