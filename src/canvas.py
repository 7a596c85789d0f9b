import skia
import numpy as np
import PIL.Image
from colour import Color

from .convert import convert_style
from .exceptions import ConfigurationError, RasterAccessError


def check_RGB() -> bool:
    '''
    Check if Skia raster surfaces store pixels in RGBA (and not BGRA) order.

    Returns:
        bool: True if the red channel comes first, False otherwise.
    '''
    surface = skia.Surface(3, 3)
    with surface as canvas:
        canvas.drawRect(skia.Rect(0, 0 , 3, 3), skia.Paint(Color=skia.ColorRED, Style=skia.Paint.kFill_Style))
    image = surface.makeImageSnapshot()
    np_image = np.frombuffer(image.tobytes(), dtype=np.uint8).reshape(3, 3, 4)
    return np_image[1, 1, 0] != 0


_RGB = check_RGB()


class SColor():
    '''
    A class to convert different color representations into a Skia Color4f object.

    This class accepts a color as a string (e.g. "red", "#FF0000") or as a list/tuple of
    three or four numbers (floats between 0.0 and 1.0). If four values are provided,
    the fourth is interpreted as the alpha channel.
    '''
    def __init__(self, color: list[float] | tuple[float] | str):
        '''
        Initialize an SColor instance with the given color.

        Args:
            color (list[float] | tuple[float] | str):
                The color value to be processed. If a list or tuple is provided, it must
                contain either three or four values (all within 0.0 and 1.0). A string value is
                expected to be a color name or hex code that the colour package can parse.

        Raises:
            ConfigurationError: If the color cannot be interpreted.
        '''
        self.__alpha = 1.0
        if isinstance(color, str):
            try:
                self.__cColor = Color(color)
            except ValueError:
                raise ConfigurationError(f'Unknown color: {color}') from None
        elif isinstance(color, (list, tuple)):
            if not all(0.0 <= c <= 1.0 for c in color):
                raise ConfigurationError(f'All color values must be between 0.0 and 1.0: {color}')
            if len(color) not in (3, 4):
                raise ConfigurationError(f'Color must have three or four parameters: {color}')
            self.__cColor = Color(rgb=tuple(color[:3]))
            if len(color) == 4:
                self.__alpha = color[3]
        else:
            raise ConfigurationError(f'Unsupported color value: {color!r}')

        self.sColor = skia.Color4f(self.__cColor.red, self.__cColor.green, self.__cColor.blue, self.__alpha)

    @property
    def color(self): return self.sColor

    @property
    def rgba(self) -> tuple[int, int, int, int]:
        '''Color as 8-bit RGBA channels.'''
        return tuple(int(round(c * 255)) for c in (self.sColor.fR, self.sColor.fG, self.sColor.fB, self.sColor.fA))


def create_paint(color: list[float] | tuple[float] | str = 'black',
                width: float = 0.0,
                style: str = 'fill',
                linejoin: str = 'miter',
                miter: float = 4.0,
                antialias: bool = True) -> skia.Paint:
    '''
    Create a Skia Paint object for filling or stroking glyphs.

    Args:
        color (list[float] | tuple[float] | str, optional): The paint color. Defaults to 'black'.
        width (float, optional): The stroke width. Ignored for fills. Defaults to 0.0.
        style (str, optional): The paint style ('fill' or 'stroke'). Defaults to 'fill'.
        linejoin (str, optional): The style for line join ('miter', 'round', 'bevel'). Defaults to 'miter'.
        miter (float, optional): The stroke miter limit. Defaults to 4.0.
        antialias (bool, optional): Whether edges are antialiased. Defaults to True.

    Returns:
        skia.Paint: A configured Skia Paint object.
    '''
    return skia.Paint(Color=SColor(color).color,
                            StrokeWidth=width,
                            Style=convert_style('style', style),
                            StrokeJoin=convert_style('join', linejoin),
                            StrokeMiter=miter,
                            AntiAlias=antialias
                            )


class RasterSurface:
    '''
    An owned RGBA pixel buffer.

    Pixels are kept as a NumPy array of shape (height, width, 4) in R, G, B, A order with
    premultiplied alpha, as Skia produces them. Every transformation returns a new surface;
    a surface is never shared between the layout engine, the trimmer and the caller.
    '''
    def __init__(self, pixels: np.ndarray):
        '''
        Args:
            pixels (np.ndarray): A uint8 array of shape (height, width, 4).

        Raises:
            RasterAccessError: If the array does not hold RGBA pixel data.
        '''
        if not isinstance(pixels, np.ndarray) or pixels.ndim != 3 or pixels.shape[2] != 4:
            raise RasterAccessError(f'expected a (height, width, 4) array, got {getattr(pixels, "shape", type(pixels))}')
        if pixels.dtype != np.uint8:
            raise RasterAccessError(f'expected uint8 pixels, got {pixels.dtype}')
        self._pixels = pixels


    @classmethod
    def blank(cls, width: int = 0, height: int = 0) -> 'RasterSurface':
        '''
        Create a fully transparent surface.
        '''
        return cls(np.zeros((height, width, 4), dtype=np.uint8))


    @classmethod
    def from_skia_surface(cls, surface: skia.Surface) -> 'RasterSurface':
        '''
        Copy the pixels of a Skia surface.

        Args:
            surface (skia.Surface): The surface to read.

        Returns:
            RasterSurface: A new surface holding the RGBA pixels.

        Raises:
            RasterAccessError: If the pixels cannot be read back.
        '''
        image = surface.makeImageSnapshot()
        if image is None:
            raise RasterAccessError('surface snapshot is not available')
        try:
            np_image = np.frombuffer(image.tobytes(), dtype=np.uint8).reshape(image.height(), image.width(), 4)
        except ValueError as e:
            raise RasterAccessError(str(e)) from e
        return cls((np_image[:,:,[2,1,0,3]] if not _RGB else np_image).copy())

    @property
    def width(self) -> int: return self._pixels.shape[1]
    @property
    def height(self) -> int: return self._pixels.shape[0]
    @property
    def size(self) -> tuple[int, int]: return (self.width, self.height)

    @property
    def pixels(self) -> np.ndarray:
        '''Read-only RGBA view of the buffer.'''
        view = self._pixels.view()
        view.flags.writeable = False
        return view

    @property
    def alpha(self) -> np.ndarray:
        '''Read-only view of the alpha channel, shape (height, width).'''
        return self.pixels[:, :, 3]

    @property
    def is_empty(self) -> bool:
        '''True if no pixel has a non-zero alpha.'''
        return not np.any(self._pixels[:, :, 3])


    def crop(self, x: int, y: int, width: int, height: int) -> 'RasterSurface':
        '''
        Copy a rectangular region into a new surface.

        Args:
            x (int): Left edge of the region.
            y (int): Top edge of the region.
            width (int): Region width.
            height (int): Region height.

        Returns:
            RasterSurface: The cropped surface.

        Raises:
            RasterAccessError: If the region does not lie inside the surface.
        '''
        if x < 0 or y < 0 or width < 0 or height < 0 or x + width > self.width or y + height > self.height:
            raise RasterAccessError(f'region ({x}, {y}, {width}, {height}) outside of {self.width}x{self.height} surface')
        return RasterSurface(self._pixels[y:y+height, x:x+width].copy())


    def to_skia_image(self) -> skia.Image:
        '''
        Convert the surface to a Skia image for compositing.

        Raises:
            RasterAccessError: If the surface has no pixels.
        '''
        if self.width == 0 or self.height == 0:
            raise RasterAccessError('cannot create an image from a zero-size surface')
        image_info = skia.ImageInfo.Make(
            self.width,
            self.height,
            skia.ColorType.kRGBA_8888_ColorType,
            skia.AlphaType.kPremul_AlphaType,
            skia.ColorSpace.MakeSRGB()
        )

        row_bytes = self.width * 4
        pixel_buffer = bytearray(self._pixels.tobytes())
        surface = skia.Surface.MakeRasterDirect(image_info, pixel_buffer, row_bytes)
        return surface.makeImageSnapshot()


    def to_pil(self) -> PIL.Image.Image:
        return PIL.Image.fromarray(self._pixels.copy())


    def save(self, path: str) -> None:
        '''
        Write the surface as a PNG file.

        Raises:
            RasterAccessError: If the surface has no pixels.
        '''
        if self.width == 0 or self.height == 0:
            raise RasterAccessError('cannot save a zero-size surface')
        self.to_pil().save(path, format='PNG', compress_level=5)


    def __repr__(self) -> str:
        return f'RasterSurface({self.width}x{self.height})'
