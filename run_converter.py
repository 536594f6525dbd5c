#!/usr/bin/env python
"""
BMFont to Lua Converter - Standalone entry point for PyInstaller.
"""
from bmfont_lua.main import main

if __name__ == "__main__":
    main()
