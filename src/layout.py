'''
    Circular text layout.

    Glyphs are placed one after another along a circle. Each glyph occupies an angle equal
    to its advance width divided by the effective radius, kerning adds a constant angle
    between neighbours, and the whole run is centered on the start angle before drawing.
'''

from dataclasses import dataclass
from math import pi

import skia

from .canvas import RasterSurface, create_paint
from .constants import CLOCKWISE, FLIPPED_START_ANGLE
from .convert import int_ceil
from .exceptions import ConfigurationError
from .log import get_logger
from .metrics import SkiaTextMetrics, TextMetrics, make_font
from .style import LayoutParameters, TextStyle
from .transform import CanvasTransform


logger = get_logger(__name__)


@dataclass(frozen=True)
class GlyphPlacement:
    '''
    Angular footprint of one character on the arc.

    Attributes:
        char (str): The character.
        half_width (float): Half of the advance width, in pixels.
        half_angle (float): Angular half-extent at the effective radius, in radians.
        gap_angle (float): Kerning angle following the glyph; 0 for the last glyph.
    '''
    char: str
    half_width: float
    half_angle: float
    gap_angle: float

    @property
    def extent(self) -> float:
        return 2 * self.half_angle + self.gap_angle


@dataclass(frozen=True)
class ArcPlan:
    '''
    Geometry of a curved text, computed before anything is drawn.

    Attributes:
        placements (tuple[GlyphPlacement, ...]): Glyphs in drawing order.
        start_angle (float): 0 for inward facing text, pi for outward facing text.
        direction (int): Rotation direction between glyphs, always CLOCKWISE.
        inward_facing (bool): Whether glyphs face the center.
        text_height (float): Line height of the text in its font.
        effective_radius (float): Placement radius, diameter / 2 - text_height.
        glyph_offset (float): Signed distance of glyph centers from the circle center
            along the rotated y-axis.
    '''
    placements: tuple[GlyphPlacement, ...]
    start_angle: float
    direction: int
    inward_facing: bool
    text_height: float
    effective_radius: float
    glyph_offset: float

    @property
    def span(self) -> float:
        '''Total angle covered by glyphs and kerning gaps.'''
        return sum(p.extent for p in self.placements)

    @property
    def frame_rotation(self) -> float:
        '''Rotation applied before the first glyph so that the run is centered.'''
        outward_turn = 0.0 if self.inward_facing else pi
        return self.start_angle + outward_turn - self.direction * self.span / 2

    @property
    def text(self) -> str:
        return ''.join(p.char for p in self.placements)


def plan_arc(style: TextStyle, metrics: TextMetrics) -> ArcPlan:
    '''
    Compute where every glyph of a style goes.

    Args:
        style (TextStyle): The text and its style.
        metrics (TextMetrics): Measures line height and glyph widths.

    Returns:
        ArcPlan: The placement of the glyphs.

    Raises:
        ConfigurationError: If the measurement fails or the text does not fit the diameter.
    '''
    try:
        text_height = metrics.measure_line_height(style.font)
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f'Cannot measure text in "{style.font}": {e}') from e

    radius = style.diameter / 2 - text_height
    if radius <= 0:
        raise ConfigurationError(f'Diameter {style.diameter} is too small for a line height of {text_height:.2f}px')

    inward_facing = not style.flipped
    text = style.text[::-1] if inward_facing else style.text

    placements = []
    for i, char in enumerate(text):
        try:
            half_width = metrics.measure_glyph_width(char, style.font) / 2
        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(f'Cannot measure "{char}" in "{style.font}": {e}') from e
        gap = style.kerning if i < len(text) - 1 else 0
        placements.append(GlyphPlacement(char, half_width, half_width / radius, gap / radius))

    offset = style.diameter / 2 - text_height / 2
    return ArcPlan(placements=tuple(placements),
                   start_angle=0.0 if inward_facing else FLIPPED_START_ANGLE,
                   direction=CLOCKWISE,
                   inward_facing=inward_facing,
                   text_height=text_height,
                   effective_radius=radius,
                   glyph_offset=-offset if inward_facing else offset)


class CircularTextLayoutEngine:
    '''
    Draws text along a circle into a new square raster surface.

    Example:
        >>> engine = CircularTextLayoutEngine()
        >>> surface = engine.layout(TextStyle(text='ADD HEADING TEXT', diameter=544, font_family='Arial', font_size=93))
        >>> surface.size
        (544, 544)
    '''
    def __init__(self,
                metrics: TextMetrics | None = None,
                parameters: LayoutParameters = LayoutParameters()):
        '''
        Args:
            metrics (TextMetrics, optional): Text measurement. Defaults to Skia font metrics,
                which keeps measurement and drawing on the same font.
            parameters (LayoutParameters, optional): Rendering policy.
        '''
        self._metrics = metrics if metrics is not None else SkiaTextMetrics()
        self._parameters = parameters

    @property
    def metrics(self) -> TextMetrics: return self._metrics
    @property
    def parameters(self) -> LayoutParameters: return self._parameters


    def plan(self, style: TextStyle) -> ArcPlan:
        return plan_arc(style, self._metrics)


    def layout(self, style: TextStyle) -> RasterSurface:
        '''
        Draw the curved text of a style.

        Args:
            style (TextStyle): The text and its style.

        Returns:
            RasterSurface: A square, untrimmed surface of side `ceil(style.diameter)`.

        Raises:
            ConfigurationError: If the text cannot be measured, the font cannot be created
                or the diameter is too small for the font.
        '''
        plan = self.plan(style)
        side = int_ceil(style.diameter)
        surface = skia.Surface(side, side)
        if surface is None:
            raise ConfigurationError(f'Cannot allocate a {side}x{side} surface')

        font = make_font(style.font)
        font.setEdging(skia.Font.Edging.kAntiAlias if self._parameters.antialias else skia.Font.Edging.kAlias)
        # center glyphs on their anchor like a middle baseline would
        font_metrics = font.getMetrics()
        baseline_shift = -(font_metrics.fAscent + font_metrics.fDescent) / 2

        fill = create_paint(style.fill_color, antialias=self._parameters.antialias)
        stroke = None
        if style.has_stroke:
            stroke = create_paint(style.stroke_color,
                                  width=style.stroke_width,
                                  style='stroke',
                                  miter=self._parameters.miter_limit,
                                  antialias=self._parameters.antialias)

        with surface as canvas:
            canvas.clear(skia.Color4f.kTransparent)
            tr = CanvasTransform(canvas)
            tr.translate(style.diameter / 2, style.diameter / 2)
            tr.rotate(plan.frame_rotation)
            for glyph in plan.placements:
                tr.rotate(glyph.half_angle * plan.direction)
                x = -font.measureText(glyph.char) / 2
                y = plan.glyph_offset + baseline_shift
                if stroke is not None:
                    canvas.drawString(glyph.char, x, y, font, stroke)
                canvas.drawString(glyph.char, x, y, font, fill)
                tr.rotate((glyph.half_angle + glyph.gap_angle) * plan.direction)

        logger.debug('Curved text laid out',
                     glyphs=len(plan.placements),
                     span=round(plan.span, 4),
                     rotation=round(tr.rotation, 4),
                     flipped=style.flipped,
                     size=side)
        return RasterSurface.from_skia_surface(surface)
