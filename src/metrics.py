'''
    Font declarations and text measurement.

    Layout only needs two numbers from a font: the line height of the text and the
    advance width of every glyph. `TextMetrics` is that capability; `SkiaTextMetrics`
    answers it from the same Skia font used for drawing and `TableTextMetrics` from
    a fixed reference table.
'''

from dataclasses import dataclass
from typing import Protocol

import skia

from .convert import convert_style
from .exceptions import ConfigurationError


@dataclass(frozen=True)
class FontDeclaration:
    '''
    The font a text is measured and drawn with.

    Attributes:
        family (str): Font family name, e.g. 'Arial'.
        size (float): Font size in pixels.
        weight (str | int): CSS or Skia weight name, or a numeric weight 100-1000.
        style (str): '', 'normal', 'italic' or 'oblique'.
    '''
    family: str
    size: float
    weight: str | int = 'normal'
    style: str = ''

    def __post_init__(self):
        if not self.size > 0:
            raise ConfigurationError(f'Font size must be positive: {self.size}')
        # fail early on unknown values
        convert_style('font_weight', self.weight)
        convert_style('font_slant', self.style)

    @property
    def css(self) -> str:
        '''Declaration in CSS font shorthand order, e.g. "italic bold 24px Arial".'''
        size = f'{self.size:g}px'
        return ' '.join(str(part) for part in (self.style, self.weight, size, self.family) if part != '')

    def __str__(self) -> str:
        return self.css


class TextMetrics(Protocol):
    '''
    Text measurement capability required by the layout engine.
    '''
    def measure_line_height(self, font: FontDeclaration) -> float: ...

    def measure_glyph_width(self, char: str, font: FontDeclaration) -> float: ...


def make_font(font: FontDeclaration) -> skia.Font:
    '''
    Create the Skia font for a declaration.

    Args:
        font (FontDeclaration): The declaration to resolve.

    Returns:
        skia.Font: A font at the declared size with subpixel positioning and no hinting.

    Raises:
        ConfigurationError: If no typeface can be created.
    '''
    font_style = skia.FontStyle(weight=convert_style('font_weight', font.weight),
                                width=skia.FontStyle.kNormal_Width,
                                slant=convert_style('font_slant', font.style))
    typeface = skia.Typeface(font.family, font_style)
    if typeface is None:
        raise ConfigurationError(f'No typeface available for "{font}"')
    skia_font = skia.Font(typeface, font.size)
    skia_font.setEdging(skia.Font.Edging.kAntiAlias)
    skia_font.setHinting(skia.FontHinting.kNone)
    skia_font.setSubpixel(True)
    return skia_font


class SkiaTextMetrics:
    '''
    Measures text with Skia fonts.

    The line height is the font's recommended line spacing (ascent + descent + leading),
    which is what a browser reports as the height of a single line of text set in that
    font. Fonts are created once per declaration.
    '''
    def __init__(self):
        self._fonts: dict[FontDeclaration, skia.Font] = {}

    def font(self, font: FontDeclaration) -> skia.Font:
        if font not in self._fonts:
            self._fonts[font] = make_font(font)
        return self._fonts[font]

    def measure_line_height(self, font: FontDeclaration) -> float:
        return self.font(font).getSpacing()

    def measure_glyph_width(self, char: str, font: FontDeclaration) -> float:
        return self.font(font).measureText(char)


class TableTextMetrics:
    '''
    Measures text from a fixed table of widths.

    Useful as a reference when the exact geometry has to be known in advance. Widths and
    line height are given for a font size of 1 and scale linearly with the declared size.

    Example:
        >>> metrics = TableTextMetrics(line_height=1.2, widths={'A': 0.6, 'B': 0.55}, default_width=0.5)
        >>> metrics.measure_glyph_width('A', FontDeclaration('Arial', 20))
        12.0
    '''
    def __init__(self, line_height: float, widths: dict[str, float] | None = None, default_width: float = 0.5):
        '''
        Args:
            line_height (float): Line height per unit of font size.
            widths (dict[str, float], optional): Advance width per character, per unit of font size.
            default_width (float, optional): Width of characters missing from `widths`.
        '''
        self._line_height = line_height
        self._widths = dict(widths or {})
        self._default_width = default_width

    def measure_line_height(self, font: FontDeclaration) -> float:
        return self._line_height * font.size

    def measure_glyph_width(self, char: str, font: FontDeclaration) -> float:
        return self._widths.get(char, self._default_width) * font.size
