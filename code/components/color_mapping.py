"""
Color utilities for the scatterplot matrix.

Variable pairs are coloured from a categorical palette by the index the scene
builder assigned them.
"""

from bokeh.palettes import Category10, Category20, Category20b, Category20c, all_palettes

CATEGORICAL_PALETTES = {
    "Category10": Category10,
    "Category20": Category20,
    "Category20b": Category20b,
    "Category20c": Category20c,
}

DEFAULT_PALETTE = "Category20"


def get_palette(palette_name: str) -> list[str]:
    """
    Largest variant of a Bokeh palette, e.g. all 20 colours of Category20.

    Unknown names fall back to Category20.
    """
    sizes = CATEGORICAL_PALETTES.get(palette_name) or all_palettes.get(palette_name)
    if sizes is None:
        sizes = CATEGORICAL_PALETTES[DEFAULT_PALETTE]
    return list(sizes[max(sizes)])


def categorical_color(index: int, palette_name: str = DEFAULT_PALETTE) -> str:
    """Color for a palette index, cycling when the palette is shorter."""
    palette = get_palette(palette_name)
    return palette[index % len(palette)]
