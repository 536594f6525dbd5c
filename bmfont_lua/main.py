"""
BMFont to Lua Converter - Main entry point.

Usage:
    python -m bmfont_lua [descriptor.fnt]
    python -m bmfont_lua --print [--all-errors] descriptor.fnt

Without --print the GUI opens (loading the file when one is given).
With --print the Lua table goes to stdout, or the diagnostic to stderr
with exit status 1.
"""

import sys
import os

from .core.loader import DescriptorFileError, convert_file
from .i18n import tr


def _write_stdout(text: str) -> None:
    # Ids decode to raw 16-bit code units, which may be lone surrogates
    sys.stdout.buffer.write(text.encode("utf-8", "surrogatepass") + b"\n")
    sys.stdout.flush()


def print_conversion(file_path: str, fail_fast: bool = True) -> int:
    """Convert a file headlessly. Returns the process exit status."""
    try:
        result = convert_file(file_path, fail_fast=fail_fast)
    except DescriptorFileError as e:
        print(str(e), file=sys.stderr)
        return 1

    if not result.ok:
        print(result.to_text(), file=sys.stderr)
        return 1

    _write_stdout(result.output)
    return 0


def main(argv=None):
    """Main entry point."""
    args = list(sys.argv[1:] if argv is None else argv)

    headless = "--print" in args
    fail_fast = "--all-errors" not in args
    paths = [a for a in args if a not in ("--print", "--all-errors")]

    # Get file path from command line if provided
    file_path = paths[0] if paths else None
    if file_path and not os.path.exists(file_path):
        print(tr("error.file_not_found", path=file_path), file=sys.stderr)
        sys.exit(1)

    if headless:
        if not file_path:
            print("Usage: bmfont-lua --print [--all-errors] FILE", file=sys.stderr)
            sys.exit(2)
        sys.exit(print_conversion(file_path, fail_fast=fail_fast))

    # Import and run GUI
    from .gui.main_window import run_app
    run_app(file_path)


if __name__ == "__main__":
    main()
