"""
Translation strings for all supported languages.

To add a new language:
1. Add an entry to LANGUAGES dict with code and display name
2. Add a new dict in TRANSLATIONS with the same structure as 'en'
3. Translate all strings

Language codes follow BCP 47 standard (e.g., "en", "pt_BR", "es", "ja")
"""

# Available languages with their display names
LANGUAGES = {
    "en": "English",
    "pt_BR": "Português (Brasil)",
}

# =============================================================================
# ENGLISH (Default)
# =============================================================================
EN = {
    # Window
    "window": {
        "title": "BMFont to Lua Converter",
        "title_with_file": "BMFont to Lua Converter - {filename}",
    },

    # Menu
    "menu": {
        "file": "&File",
        "edit": "&Edit",
        "view": "&View",
        "open": "&Open...",
        "copy": "&Copy Output",
        "exit": "E&xit",
    },

    # Toolbar
    "toolbar": {
        "open": "📂 Open",
        "open_tooltip": "Open a BMFont descriptor (.xml, .fnt, .txt) (Ctrl+O)",
        "copy": "📋 Copy",
        "copy_tooltip": "Copy the Lua table to the clipboard (Ctrl+Shift+C)",
        "copied": "Copied!",
    },

    # Main panel
    "panel": {
        "no_file": "No file selected",
        "drop_hint": "Open or drop a BMFont descriptor to convert it",
        "output": "Lua Output",
        "file_filter": "BMFont Descriptors (*.xml *.fnt *.txt);;All Files (*)",
        "open_title": "Open BMFont Descriptor",
    },

    # Status messages
    "status": {
        "ready": "Ready - Open a .xml, .fnt or .txt file to begin",
        "loading": "Converting {filename}...",
        "success": "Conversion successful!",
        "language_changed": "🌐 Language changed to {language}",
    },

    # Errors
    "error": {
        "invalid_file_type": "Invalid file type. Select .xml, .fnt, or .txt.",
        "read_failed": "Error reading file: {reason}",
        "reading_name": "Error reading {filename}",
        "conversion_failed": "Error during conversion: {error}. Check console for details.",
        "copy_failed": "Failed to copy text to clipboard.",
        "file_not_found": "Error: File not found: {path}",
    },

    # Conversion diagnostics
    "diagnostic": {
        "missing_info": "Missing <info> element.",
        "malformed_info": "Invalid <info> element.",
        "invalid_size": "Missing or invalid 'size' attribute in <info> element.",
        "invalid_char_id": "Found <char> tag with missing or invalid \"id\" attribute:\n{tag}",
        "invalid_char_metrics": "Character data for {id} is missing or invalid.",
        "count_mismatch": (
            "Found <chars count> indicating characters exist, but couldn't parse "
            "any <char .../> elements. Check XML structure."
        ),
        "missing_chars_count": "Expected <chars count=\"...\"> element, but it was not found or invalid.",
        "no_character_data": "No <char.../> elements found and no <chars count=\"...\"> tag detected.",
        "entry_errors": "{errors}",
    },
}

# =============================================================================
# PORTUGUÊS (Brasil)
# =============================================================================
PT_BR = {
    # Window
    "window": {
        "title": "Conversor BMFont para Lua",
        "title_with_file": "Conversor BMFont para Lua - {filename}",
    },

    # Menu
    "menu": {
        "file": "&Arquivo",
        "edit": "&Editar",
        "view": "&Visualizar",
        "open": "&Abrir...",
        "copy": "&Copiar Saída",
        "exit": "Sai&r",
    },

    # Toolbar
    "toolbar": {
        "open": "📂 Abrir",
        "open_tooltip": "Abrir um descritor BMFont (.xml, .fnt, .txt) (Ctrl+O)",
        "copy": "📋 Copiar",
        "copy_tooltip": "Copiar a tabela Lua para a área de transferência (Ctrl+Shift+C)",
        "copied": "Copiado!",
    },

    # Main panel
    "panel": {
        "no_file": "Nenhum arquivo selecionado",
        "drop_hint": "Abra ou arraste um descritor BMFont para convertê-lo",
        "output": "Saída Lua",
        "file_filter": "Descritores BMFont (*.xml *.fnt *.txt);;Todos os Arquivos (*)",
        "open_title": "Abrir Descritor BMFont",
    },

    # Status messages
    "status": {
        "ready": "Pronto - Abra um arquivo .xml, .fnt ou .txt para começar",
        "loading": "Convertendo {filename}...",
        "success": "Conversão concluída!",
        "language_changed": "🌐 Idioma alterado para {language}",
    },

    # Errors
    "error": {
        "invalid_file_type": "Tipo de arquivo inválido. Selecione .xml, .fnt ou .txt.",
        "read_failed": "Erro ao ler o arquivo: {reason}",
        "reading_name": "Erro ao ler {filename}",
        "conversion_failed": "Erro durante a conversão: {error}. Verifique o console para detalhes.",
        "copy_failed": "Falha ao copiar o texto para a área de transferência.",
        "file_not_found": "Erro: Arquivo não encontrado: {path}",
    },

    # Conversion diagnostics
    "diagnostic": {
        "missing_info": "Elemento <info> ausente.",
        "malformed_info": "Elemento <info> inválido.",
        "invalid_size": "Atributo 'size' ausente ou inválido no elemento <info>.",
        "invalid_char_id": "Tag <char> com atributo \"id\" ausente ou inválido:\n{tag}",
        "invalid_char_metrics": "Dados do caractere {id} ausentes ou inválidos.",
        "count_mismatch": (
            "<chars count> indica que existem caracteres, mas nenhum elemento "
            "<char .../> pôde ser lido. Verifique a estrutura do XML."
        ),
        "missing_chars_count": "Elemento <chars count=\"...\"> esperado, mas não encontrado ou inválido.",
        "no_character_data": "Nenhum elemento <char.../> encontrado e nenhuma tag <chars count=\"...\"> detectada.",
        "entry_errors": "{errors}",
    },
}

# All translations indexed by language code
TRANSLATIONS = {
    "en": EN,
    "pt_BR": PT_BR,
}
