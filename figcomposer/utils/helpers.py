"""
Helper utility functions and drop-down option lists for figcomposer
"""

import numpy as np
from matplotlib import font_manager

from ..fig.styles import Marker


def to_float_array(values):
    """Convert array-like to float ndarray, coercing invalid entries to NaN."""
    arr = np.asarray(values)
    if np.ma.isMaskedArray(arr):
        arr = np.ma.getdata(arr)
    try:
        return arr.astype(float)
    except (ValueError, TypeError):
        flat = arr.ravel()
        converted = np.empty(flat.shape, dtype=float)
        for i, val in enumerate(flat):
            try:
                converted[i] = float(val)
            except (ValueError, TypeError):
                converted[i] = np.nan
        return converted.reshape(arr.shape)


def enum_options(enum_cls, members=None):
    """(label, member) pairs for a Dropdown or ToggleButtons over an enum."""
    return [(str(m), m) for m in (members if members is not None else enum_cls)]


_font_families = None


def font_family_options():
    """Sorted font family names known to matplotlib's font manager (cached)."""
    global _font_families
    if _font_families is None:
        names = {f.name for f in font_manager.fontManager.ttflist}
        _font_families = sorted(names, key=str.lower)
    return list(_font_families)


# Colour swatches for the colour picker pop-up
COLOR_SWATCHES = [
    ('Black', '#000000'),
    ('Dark gray', '#404040'),
    ('Gray', '#808080'),
    ('Light gray', '#c0c0c0'),
    ('White', '#ffffff'),
    ('Red', '#ff0000'),
    ('Orange', '#ffa500'),
    ('Yellow', '#ffff00'),
    ('Green', '#008000'),
    ('Cyan', '#00ffff'),
    ('Blue', '#0000ff'),
    ('Magenta', '#ff00ff'),
    ('Tab blue', '#1f77b4'),
    ('Tab orange', '#ff7f0e'),
    ('Tab green', '#2ca02c'),
    ('Tab red', '#d62728'),
]

# Marker choices, with the glyph shown on the multi-choice button
MARKER_OPTIONS = [
    ('●  circle', Marker.CIRCLE),
    ('■  box', Marker.BOX),
    ('◆  diamond', Marker.DIAMOND),
    ('⊤  tee', Marker.TEE),
    ('✕  xhair', Marker.XHAIR),
    ('✶  star', Marker.STAR),
    ('⬟  pentagram', Marker.PENTAGRAM),
    ('⬢  hexagon', Marker.HEXAGON),
    ('▲  uptriangle', Marker.UPTRIANGLE),
    ('▼  downtriangle', Marker.DOWNTRIANGLE),
    ('◀  lefttriangle', Marker.LEFTTRIANGLE),
    ('▶  righttriangle', Marker.RIGHTTRIANGLE),
    ('⮝  updart', Marker.UPDART),
    ('⮟  downdart', Marker.DOWNDART),
    ('↑  uparrow', Marker.UPARROW),
    ('↓  downarrow', Marker.DOWNARROW),
    ('—  hlinethru', Marker.HLINETHRU),
    ('|  linethru', Marker.LINETHRU),
    ('╵  lineup', Marker.LINEUP),
    ('╷  linedown', Marker.LINEDOWN),
    ('[  bracket', Marker.BRACKET),
]

# Special characters offered by the host's character palette
SPECIAL_CHARACTERS = "αβγδεζηθλμνπρστφχψωΔΣΦΩ°±×÷≤≥≠≈∞µ√∫∂"
