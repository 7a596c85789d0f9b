'''Exception hierarchy for curvedtext.'''


class CurvedTextError(Exception):
    '''Base exception for all curvedtext errors.'''

    pass


class ConfigurationError(CurvedTextError, ValueError):
    '''Invalid style or missing rendering capability. Not recoverable.'''

    pass


class TrimError(CurvedTextError):
    '''Errors raised while cropping a raster surface.'''

    pass


class EmptyTrimTarget(TrimError):
    '''The surface has no pixel with a non-zero alpha channel.'''

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        super().__init__(f"Nothing to trim: {width}x{height} surface is fully transparent")


class RasterAccessError(TrimError):
    '''Pixel data of a surface could not be read or written.'''

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Raster access failed: {reason}")
