import skia
import PIL.Image

from .canvas import RasterSurface
from .exceptions import EmptyTrimTarget
from .layout import CircularTextLayoutEngine
from .log import get_logger
from .style import TextStyle
from .trim import RasterTrimmer


logger = get_logger(__name__)


class CurvedText:
    '''
    A drawable curved text for hosts with a mutable-property object model.

    The object keeps its current style, lays it out and trims it whenever the style
    changes, and exposes the trimmed size as `width` and `height`. Drawing blits the
    surface centered on the canvas origin.

    Example:
        >>> text = CurvedText(text='ADD HEADING TEXT', diameter=544, fontFamily='Arial',
        ...                   fontSize=100, fontWeight='bold', fill='#000000')
        >>> text.set_text('CURVED').save('curved.png')
    '''
    def __init__(self,
                engine: CircularTextLayoutEngine | None = None,
                trimmer: RasterTrimmer | None = None,
                **options):
        '''
        Args:
            engine (CircularTextLayoutEngine, optional): Layout engine. A Skia based engine
                is created if not given.
            trimmer (RasterTrimmer, optional): Trimmer. Defaults to a new RasterTrimmer.
            **options: Style properties, see TextStyle.from_options.
        '''
        self._engine = engine if engine is not None else CircularTextLayoutEngine()
        self._trimmer = trimmer if trimmer is not None else RasterTrimmer()
        self._style = TextStyle.from_options(options)
        self._surface = RasterSurface.blank()
        self.update_dimensions()

    @property
    def style(self) -> TextStyle: return self._style
    @property
    def text(self) -> str: return self._style.text
    @property
    def surface(self) -> RasterSurface: return self._surface
    @property
    def width(self) -> int: return self._surface.width
    @property
    def height(self) -> int: return self._surface.height


    def set_text(self, text: str) -> 'CurvedText':
        return self.set(text=text)


    def set(self, **changes) -> 'CurvedText':
        '''
        Change style properties and re-render.

        Args:
            **changes: TextStyle fields or host property names.

        Returns:
            CurvedText: self, for chaining.
        '''
        self._style = self._style.replace(**changes)
        return self.update_dimensions()


    def update_dimensions(self) -> 'CurvedText':
        '''
        Lay out and trim the current style.

        Returns:
            CurvedText: self, for chaining.

        Raises:
            EmptyTrimTarget: If there is nothing visible and the empty trim policy is 'raise'.
        '''
        surface = self._engine.layout(self._style)
        try:
            self._surface = self._trimmer.trim(surface)
        except EmptyTrimTarget:
            policy = self._engine.parameters.empty_trim
            if policy == 'raise':
                raise
            logger.debug('Nothing visible to trim', policy=policy, text=self._style.text)
            self._surface = surface if policy == 'original' else RasterSurface.blank()
        return self


    def render(self, canvas: skia.Canvas) -> None:
        '''
        Draw the text centered on the origin of a Skia canvas.

        The style is laid out again before drawing since the host may have changed
        it without notice.

        Args:
            canvas (skia.Canvas): The destination canvas.
        '''
        self.update_dimensions()
        if self.width == 0 or self.height == 0:
            return
        canvas.drawImage(self._surface.to_skia_image(), -self.width / 2, -self.height / 2)


    def to_pil(self) -> PIL.Image.Image:
        return self._surface.to_pil()


    def save(self, path: str) -> None:
        self._surface.save(path)


    def to_dict(self) -> dict:
        '''
        Style properties and current size as plain values.
        '''
        return dict(self._style.to_dict(), width=self.width, height=self.height)


    def __repr__(self) -> str:
        return f'CurvedText({self._style.text!r}, {self.width}x{self.height})'
