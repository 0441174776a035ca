# SPDX-License-Identifier: MIT

import re
from typing import Optional

# Muted palette new projects rotate through, in creation order. Tokens keep
# the "bg-[#hex]" form so backups open in the web app with their colors.
PALETTE = [
    "bg-[#D8E2DC]",  # sage
    "bg-[#FFE5D9]",  # peach
    "bg-[#FFCAD4]",  # pink
    "bg-[#F4ACB7]",  # rose
    "bg-[#9D8189]",  # dusky purple
    "bg-[#B7C3C0]",  # gray blue
    "bg-[#E2D1C3]",  # sand
    "bg-[#ECE4DB]",  # linen
    "bg-[#D4A373]",  # tan
]

# Five shades per palette color, lightest first, indexed by entry intensity
INTENSITY_COLORS: dict[str, list[str]] = {
    "#D8E2DC": ["#f1f5f3", "#d8e2dc", "#b7c9be", "#96b0a1", "#759784"],
    "#FFE5D9": ["#fff5f1", "#ffe5d9", "#ffccb8", "#ffb397", "#ff9a76"],
    "#FFCAD4": ["#fff4f6", "#ffcad4", "#ffa6b6", "#ff8298", "#ff5e7a"],
    "#F4ACB7": ["#fdf3f4", "#f4acb7", "#ee8192", "#e8566d", "#e22b48"],
    "#9D8189": ["#f2eff0", "#9d8189", "#836a71", "#6a5359", "#503c41"],
    "#B7C3C0": ["#f4f6f5", "#b7c3c0", "#98a9a5", "#798f8a", "#5a756f"],
    "#E2D1C3": ["#f9f6f4", "#e2d1c3", "#d2b8a5", "#c29f87", "#b28669"],
    "#ECE4DB": ["#faf8f6", "#ece4db", "#decbb9", "#d0b297", "#c29975"],
    "#D4A373": ["#f8f1ea", "#d4a373", "#bf8b56", "#a3723b", "#875920"],
}

# Text color used on top of palette backgrounds
CELL_TEXT_COLOR = "#4A4A4A"
MUTED_COLOR = "bright_black"

# Hex colors, bare or wrapped in a CSS class like "bg-[#D8E2DC]"
_HEX_PATTERN = re.compile(r"#[0-9A-Fa-f]{6}")


def get_palette_color(index: int) -> str:
    """Return the palette color for the index-th project, wrapping around."""
    return PALETTE[index % len(PALETTE)]


def normalize_color(color: str) -> Optional[str]:
    """
    Return the hex color a stored color token refers to, or None.

    Colors are opaque tokens and are not checked when a backup is restored,
    so anything that does not contain a hex color is left unstyled.
    """
    match = _HEX_PATTERN.search(color)
    if match is None:
        return None
    return match.group(0).upper()


def to_color_token(color: str) -> Optional[str]:
    """Turn a user supplied hex color into a stored palette-style token."""
    hex_color = normalize_color(color)
    if hex_color is None:
        return None
    return f"bg-[{hex_color}]"


def get_intensity_color(color: str, intensity: int) -> Optional[str]:
    """
    Return the shade of a palette color for an entry intensity.

    Colors outside the palette have no shades and yield None.
    """
    hex_color = normalize_color(color)
    if hex_color is None:
        return None
    shades = INTENSITY_COLORS.get(hex_color)
    if shades is None:
        return None
    return shades[max(0, min(intensity, len(shades) - 1))]


def get_project_style(color: str) -> str:
    hex_color = normalize_color(color)
    return hex_color if hex_color is not None else ""


def get_cell_style(color: str, intensity: int) -> str:
    shade = get_intensity_color(color, intensity)
    if shade is not None:
        return f"{CELL_TEXT_COLOR} on {shade}"
    hex_color = normalize_color(color)
    if hex_color is not None:
        return f"{CELL_TEXT_COLOR} on {hex_color}"
    return "reverse"
