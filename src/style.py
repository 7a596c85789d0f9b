from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping

from .canvas import SColor
from .constants import (DEFAULT_DIAMETER, DEFAULT_KERNING, DEFAULT_FILL, DEFAULT_FONT_FAMILY,
                        DEFAULT_FONT_SIZE, DEFAULT_FONT_WEIGHT, DEFAULT_FONT_STYLE,
                        EMPTY_TRIM_POLICIES, STROKE_MITER_LIMIT)
from .exceptions import ConfigurationError
from .metrics import FontDeclaration


Color = list[float] | tuple[float] | str


# host property names -> TextStyle fields
_OPTION_ALIASES = {
    'fill': 'fill_color',
    'fillColor': 'fill_color',
    'fontFamily': 'font_family',
    'fontSize': 'font_size',
    'fontWeight': 'font_weight',
    'fontStyle': 'font_style',
    'strokeStyle': 'stroke_color',
    'strokeColor': 'stroke_color',
    'strokeWidth': 'stroke_width',
}


@dataclass(frozen=True)
class TextStyle:
    '''
    Everything needed to lay out one curved text.

    Attributes:
        text (str): The text to draw. May be empty.
        diameter (float): Diameter of the circle and side of the square surface, in pixels.
        kerning (float): Extra spacing between neighbouring glyphs, in pixels along the arc.
        flipped (bool): False draws inward facing text centered at the top of the circle,
            True draws outward facing text centered at the bottom.
        fill_color (str | tuple): Glyph fill color.
        font_family (str): Font family name.
        font_size (float): Font size in pixels.
        font_weight (str | int): Font weight, e.g. 'normal', 'bold' or 700.
        font_style (str): '', 'italic' or 'oblique'.
        stroke_color (str | tuple | None): Glyph outline color, None for no outline.
        stroke_width (float): Glyph outline width in pixels.
    '''
    text: str = ''
    diameter: float = DEFAULT_DIAMETER
    kerning: float = DEFAULT_KERNING
    flipped: bool = False
    fill_color: Color = DEFAULT_FILL
    font_family: str = DEFAULT_FONT_FAMILY
    font_size: float = DEFAULT_FONT_SIZE
    font_weight: str | int = DEFAULT_FONT_WEIGHT
    font_style: str = DEFAULT_FONT_STYLE
    stroke_color: Color | None = None
    stroke_width: float = 0
    font: FontDeclaration = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not self.diameter > 0:
            raise ConfigurationError(f'Diameter must be positive: {self.diameter}')
        if self.stroke_width < 0:
            raise ConfigurationError(f'Stroke width must not be negative: {self.stroke_width}')
        SColor(self.fill_color)
        if self.stroke_color is not None:
            SColor(self.stroke_color)
        object.__setattr__(self, 'font', FontDeclaration(self.font_family, self.font_size,
                                                         self.font_weight, self.font_style))

    @property
    def has_stroke(self) -> bool:
        '''True if glyph outlines are drawn: a stroke color and a positive width are both set.'''
        return self.stroke_color is not None and self.stroke_width > 0

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> 'TextStyle':
        '''
        Build a style from a host property bag.

        Both the host's camelCase names (`fontFamily`, `strokeStyle`, ...) and the field names
        are accepted. Missing or falsy values (None, '', 0, False) fall back to the defaults, as a
        host writing `options.diameter || 250` expects; unknown keys are ignored.

        Args:
            options (Mapping[str, Any]): The host properties.

        Returns:
            TextStyle: The style.
        '''
        names = {f.name for f in fields(cls) if f.init}
        values = {}
        for key, value in options.items():
            name = _OPTION_ALIASES.get(key, key)
            if name in names and value:
                values[name] = value
        return cls(**values)

    def replace(self, **changes) -> 'TextStyle':
        '''Copy of the style with some fields changed; host property names are accepted.'''
        return replace(self, **{_OPTION_ALIASES.get(k, k): v for k, v in changes.items()})

    def to_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self) if f.init}


class LayoutParameters:
    '''
    A class to encapsulate rendering policy shared by all layouts of an engine.
    '''
    def __init__(self,
                antialias: bool=True,
                empty_trim: str='zero',
                miter_limit: float=STROKE_MITER_LIMIT
                ):
        '''
        Initialize a LayoutParameters instance.

        Args:
            antialias (bool, optional): Whether glyph edges are antialiased. Defaults to True.
            empty_trim (str, optional): What the host adapter does when there is nothing to trim.
                'zero' keeps a zero-size surface, 'original' keeps the untrimmed surface and
                'raise' propagates EmptyTrimTarget. Defaults to 'zero'.
            miter_limit (float, optional): Miter limit of glyph outlines. Defaults to 2.

        Raises:
            ConfigurationError: If a value is out of range.
        '''
        if empty_trim not in EMPTY_TRIM_POLICIES:
            raise ConfigurationError(f'empty_trim must be one of {EMPTY_TRIM_POLICIES}, not {empty_trim!r}')
        if not miter_limit > 0:
            raise ConfigurationError(f'Miter limit must be positive: {miter_limit}')
        self._antialias = antialias
        self._empty_trim = empty_trim
        self._miter_limit = miter_limit

    @property
    def antialias(self): return self._antialias
    @property
    def empty_trim(self): return self._empty_trim
    @property
    def miter_limit(self): return self._miter_limit
