"""
Hex color parsing for palette previews.

Parsing never fails: anything that cannot be decoded renders as black.
"""

from __future__ import annotations
import string

RGB = tuple[int, int, int]

BLACK: RGB = (0, 0, 0)
WHITE: RGB = (255, 255, 255)

# xterm 256-color cube channel levels (indices 16-231)
_CUBE_LEVELS = (0, 95, 135, 175, 215, 255)


def parse_color(token: str) -> RGB:
    """
    Convert a color token to an RGB tuple.

    Accepts '#rrggbb', '0xrrggbb' or bare digits. Inputs with fewer than
    six digits are padded by repeating their first digit, so 'f' becomes
    'ffffff' and 'abc' becomes 'abcaaa'.

    Args:
        token: Color string from a theme file

    Returns:
        (r, g, b) tuple, black for empty or undecodable input
    """
    # '#fff' is the shortest meaningful token
    if not token or len(token) < 3:
        return BLACK

    digits = token
    if digits.startswith("#"):
        digits = digits[1:]
    elif digits.startswith("0x"):
        digits = digits[2:]

    if not digits:
        return BLACK

    if len(digits) < 6:
        digits += digits[0] * (6 - len(digits))

    if len(digits) % 2 or not all(c in string.hexdigits for c in digits):
        return BLACK

    channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
    return channels[0], channels[1], channels[2]


def luminance(rgb: RGB) -> float:
    """Relative luminance (WCAG 2.0), 0.0 for black to 1.0 for white."""
    r, g, b = (
        c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4
        for c in (c / 255 for c in rgb)
    )
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(rgb1: RGB, rgb2: RGB) -> float:
    lum1 = luminance(rgb1)
    lum2 = luminance(rgb2)
    return (max(lum1, lum2) + 0.05) / (min(lum1, lum2) + 0.05)


def readable_text(background: RGB) -> RGB:
    """Pick black or white text, whichever contrasts more with background."""
    if contrast_ratio(background, BLACK) >= contrast_ratio(background, WHITE):
        return BLACK
    return WHITE


def nearest_xterm256(rgb: RGB) -> int:
    """
    Map an RGB color to the closest xterm 256-color palette index.

    Only the color cube (16-231) and the greyscale ramp (232-255) are
    considered; the first 16 entries depend on the terminal's own theme.
    """
    def nearest_level(c: int) -> int:
        return min(range(6), key=lambda i: abs(_CUBE_LEVELS[i] - c))

    ri, gi, bi = (nearest_level(c) for c in rgb)
    cube = (_CUBE_LEVELS[ri], _CUBE_LEVELS[gi], _CUBE_LEVELS[bi])
    cube_index = 16 + ri * 36 + gi * 6 + bi

    grey_avg = sum(rgb) // 3
    grey_step = min(23, max(0, (grey_avg - 8 + 5) // 10))
    grey_value = 8 + grey_step * 10
    grey_index = 232 + grey_step

    def distance(other: RGB) -> int:
        return sum((a - b) ** 2 for a, b in zip(rgb, other))

    if distance((grey_value,) * 3) < distance(cube):
        return grey_index
    return cube_index


# Approximate RGB of the 8 basic terminal colors, in curses COLOR_* order
_BASIC_COLORS: tuple[RGB, ...] = (
    (0, 0, 0),
    (205, 0, 0),
    (0, 205, 0),
    (205, 205, 0),
    (0, 0, 238),
    (205, 0, 205),
    (0, 205, 205),
    (229, 229, 229),
)


def nearest_basic(rgb: RGB) -> int:
    """Index 0-7 of the closest basic terminal color."""
    return min(
        range(len(_BASIC_COLORS)),
        key=lambda i: sum((a - b) ** 2 for a, b in zip(rgb, _BASIC_COLORS[i])),
    )
