from .palette import DARK_PALETTE, LIGHT_PALETTE, Palette, palette_for
from .svg import render_svg

__all__ = ["DARK_PALETTE", "LIGHT_PALETTE", "Palette", "palette_for", "render_svg"]
