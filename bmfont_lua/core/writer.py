"""
Lua Writer - Renders a parsed font as a Lua table literal.

Output layout:

    {
    	Size = 32,
    	Characters = {
    		["A"] = {10, 12, Vector2.new(0, 0), 0, 0, 11},
    		...
    	}
    }

Entry fields are always width, height, atlas position, x offset,
y offset, x advance. Entries follow the descriptor's character order.
"""

from .parser import CharacterMetrics, FontDescriptor


def escape_key(char: str) -> str:
    """Escape backslash and double quote; everything else passes through."""
    return char.replace("\\", "\\\\").replace('"', '\\"')


def format_character_entry(char: str, metrics: CharacterMetrics) -> str:
    """Format one ["c"] = {...} line of the Characters table."""
    return (
        f'\t\t["{escape_key(char)}"] = {{'
        f'{metrics.width}, {metrics.height}, '
        f'Vector2.new({metrics.x}, {metrics.y}), '
        f'{metrics.x_offset}, {metrics.y_offset}, {metrics.x_advance}}}'
    )


def serialize_font(font: FontDescriptor) -> str:
    """Render a FontDescriptor as a Lua table literal."""
    entries = [
        format_character_entry(char, metrics)
        for char, metrics in font.characters.items()
    ]

    output = f"{{\n\tSize = {font.size},\n\tCharacters = {{\n"
    output += ",\n".join(entries)
    output += "\n\t}\n}"
    return output
