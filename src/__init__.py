'''
curvedtext

Text along a circular arc, rendered into a trimmed raster surface.
'''

__author__ = 'Vojtech Bartl, Adam Herout'
__credits__ = 'FIT BUT'


from .canvas import RasterSurface, SColor
from .curved import CurvedText
from .exceptions import CurvedTextError, ConfigurationError, TrimError, EmptyTrimTarget, RasterAccessError
from .layout import CircularTextLayoutEngine, ArcPlan, GlyphPlacement, plan_arc
from .log import configure_logging
from .metrics import FontDeclaration, TextMetrics, SkiaTextMetrics, TableTextMetrics
from .style import TextStyle, LayoutParameters
from .trim import RasterTrimmer, trim

__all__ = ['RasterSurface', 'SColor', 'CurvedText', 'CurvedTextError', 'ConfigurationError', 'TrimError',
           'EmptyTrimTarget', 'RasterAccessError', 'CircularTextLayoutEngine', 'ArcPlan', 'GlyphPlacement',
           'plan_arc', 'configure_logging', 'FontDeclaration', 'TextMetrics', 'SkiaTextMetrics',
           'TableTextMetrics', 'TextStyle', 'LayoutParameters', 'RasterTrimmer', 'trim']
