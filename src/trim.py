'''
    Cropping of raster surfaces to their visible content.
'''

import numpy as np

from .canvas import RasterSurface
from .exceptions import EmptyTrimTarget, RasterAccessError
from .log import get_logger


logger = get_logger(__name__)


class RasterTrimmer:
    '''
    Crops a surface to the smallest rectangle holding all pixels with a non-zero alpha.

    The horizontal and vertical extents are found independently: every x coordinate of a
    visible pixel goes into one set and every y coordinate into another, and each set
    contributes its own minimum and maximum.
    '''

    def bounding_box(self, surface: RasterSurface) -> tuple[int, int, int, int]:
        '''
        Find the visible region of a surface.

        Args:
            surface (RasterSurface): The surface to scan.

        Returns:
            tuple[int, int, int, int]: The region as (x, y, width, height).

        Raises:
            EmptyTrimTarget: If every pixel is fully transparent.
            RasterAccessError: If the pixels cannot be read.
        '''
        alpha = surface.alpha
        xs = np.flatnonzero(alpha.any(axis=0))
        ys = np.flatnonzero(alpha.any(axis=1))
        if xs.size == 0 or ys.size == 0:
            raise EmptyTrimTarget(surface.width, surface.height)
        min_x, max_x = int(xs[0]), int(xs[-1])
        min_y, max_y = int(ys[0]), int(ys[-1])
        return min_x, min_y, max_x - min_x + 1, max_y - min_y + 1


    def trim(self, surface: RasterSurface) -> RasterSurface:
        '''
        Crop a surface to its visible region.

        A surface whose pixels cannot be accessed is returned unchanged, so that a render
        degrades to the untrimmed square instead of failing.

        Args:
            surface (RasterSurface): The surface to crop. It is not modified.

        Returns:
            RasterSurface: The cropped surface, or `surface` itself if it could not be read.

        Raises:
            EmptyTrimTarget: If every pixel is fully transparent.
        '''
        try:
            x, y, width, height = self.bounding_box(surface)
            trimmed = surface.crop(x, y, width, height)
        except RasterAccessError as e:
            logger.warning('Trim skipped, keeping untrimmed surface',
                           reason=e.reason,
                           width=surface.width,
                           height=surface.height)
            return surface
        logger.debug('Surface trimmed', box=(x, y, width, height))
        return trimmed


_default_trimmer = RasterTrimmer()


def trim(surface: RasterSurface) -> RasterSurface:
    '''
    Crop a surface to its visible region with the default trimmer.
    '''
    return _default_trimmer.trim(surface)
