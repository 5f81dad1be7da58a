"""The 256-colour terminal palette used for compact colour blocks."""

_STANDARD = (
    0x000000, 0x800000, 0x008000, 0x808000, 0x000080, 0x800080, 0x008080, 0xC0C0C0,
    0x808080, 0xFF0000, 0x00FF00, 0xFFFF00, 0x0000FF, 0xFF00FF, 0x00FFFF, 0xFFFFFF,
)

_LEVELS = (0x00, 0x5F, 0x87, 0xAF, 0xD7, 0xFF)

_CUBE = tuple(
    (r << 16) | (g << 8) | b for r in _LEVELS for g in _LEVELS for b in _LEVELS
)

_GRAYS = (
    0x080808, 0x121212, 0x1C1C1C, 0x262626, 0x303030, 0x3A3A3A, 0x444444, 0x4E4E4E,
    0x585858, 0x606060, 0x666666, 0x767676, 0x808080, 0x8A8A8A, 0x949494, 0x9E9E9E,
    0xA8A8A8, 0xB2B2B2, 0xBCBCBC, 0xC6C6C6, 0xD0D0D0, 0xDADADA, 0xE4E4E4, 0xEEEEEE,
)

_COLORS = _STANDARD + _CUBE + _GRAYS

# A colour listed more than once maps to its lowest index.
_INDEX = {}
for _i, _c in enumerate(_COLORS):
    _INDEX.setdefault(_c, _i)


def to8(color):
    """Palette index of a 0xRRGGBB colour, or None if it is not in the palette."""
    return _INDEX.get(color)


def to24(index):
    """The 0xRRGGBB colour at a palette index."""
    if not 0 <= index < len(_COLORS):
        raise ValueError(f"palette index out of range: {index}")
    return _COLORS[index]