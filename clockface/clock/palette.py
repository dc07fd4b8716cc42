"""Colour palettes for the clock face."""
from typing import Dict, NamedTuple, Optional, Tuple
from PIL import ImageColor

RGB = Tuple[int, int, int]


class Palette(NamedTuple):
    """Colour roles used when drawing the clock."""

    primary: RGB
    secondary: RGB
    tertiary: RGB
    surface: RGB
    on_surface: RGB
    background: RGB

    def with_overrides(self, overrides: Optional[Dict[str, str]]) -> 'Palette':
        """
        Return a copy with some roles replaced.

        Args:
            overrides: Mapping of role name to a colour string ("#RRGGBB",
                "rgb(...)" or a named colour)

        Raises:
            ValueError: for an unknown role, an unparseable colour or
                overrides that are not a mapping
        """
        if not overrides:
            return self
        if not isinstance(overrides, dict):
            raise ValueError(f"Colour overrides must be a mapping, got {overrides!r}")

        changes = {}
        for role, value in overrides.items():
            if role not in self._fields:
                raise ValueError(f"Unknown palette role: {role}")
            changes[role] = parse_color(value)
        return self._replace(**changes)


def parse_color(value) -> RGB:
    """Parse a colour string or an RGB sequence into an RGB tuple."""
    if isinstance(value, (list, tuple)) and len(value) == 3:
        try:
            rgb = tuple(int(channel) for channel in value)
        except (TypeError, ValueError):
            raise ValueError(f"Invalid colour: {value!r}") from None
        if not all(0 <= channel <= 255 for channel in rgb):
            raise ValueError(f"Colour channels must be 0-255: {value!r}")
        return rgb
    try:
        return ImageColor.getrgb(str(value))[:3]
    except ValueError:
        raise ValueError(f"Invalid colour: {value!r}") from None


LIGHT = Palette(
    primary=parse_color("#6750A4"),
    secondary=parse_color("#625B71"),
    tertiary=parse_color("#7D5260"),
    surface=parse_color("#F3EDF7"),
    on_surface=parse_color("#1D1B20"),
    background=parse_color("#FFFFFF"),
)

DARK = Palette(
    primary=parse_color("#D0BCFF"),
    secondary=parse_color("#CCC2DC"),
    tertiary=parse_color("#EFB8C8"),
    surface=parse_color("#211F26"),
    on_surface=parse_color("#E6E0E9"),
    background=parse_color("#141218"),
)

PALETTES = {
    'light': LIGHT,
    'dark': DARK,
}


def get_palette(name: str = 'light', overrides: Optional[Dict[str, str]] = None) -> Palette:
    """Look up a built-in palette by name and apply colour overrides."""
    if name not in PALETTES:
        raise ValueError(f"Unknown palette '{name}', expected one of: {', '.join(PALETTES)}")
    return PALETTES[name].with_overrides(overrides)
