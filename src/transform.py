import skia

from .convert import rad_to_deg


class CanvasTransform:
    '''
    A wrapper around a Skia canvas for the transformations used by arc layout.

    Angles are given in radians; Skia itself rotates in degrees. The accumulated
    rotation is kept so the final glyph position can be reported.
    '''
    def __init__(self, canvas: skia.Canvas):
        '''
        Initializes the CanvasTransform instance.

        Args:
            canvas (skia.Canvas): The canvas whose matrix is transformed.
        '''
        self._canvas = canvas
        self._rotation = 0.0


    @property
    def rotation(self) -> float:
        '''Total rotation applied so far, in radians.'''
        return self._rotation


    def translate(self, x: float, y: float):
        '''
        Translates the canvas by a specified offset.

        Args:
            x (float): Translation offset along the x-axis.
            y (float): Translation offset along the y-axis.
        '''
        self._canvas.translate(x, y)


    def rotate(self, angle: float):
        '''
        Rotates the canvas around the current origin.

        Args:
            angle (float): The angle to rotate in radians. Positive is clockwise on screen.
        '''
        self._rotation += angle
        self._canvas.rotate(rad_to_deg(angle))
