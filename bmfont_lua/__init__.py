"""
BMFont to Lua Converter - Turns BMFont descriptors into Lua font tables.

Modules:
    core: Descriptor parsing, validation, Lua serialization and file loading
    gui: Graphical user interface
    i18n: Internationalization
"""

__version__ = "1.0.0"
__license__ = "MIT"
