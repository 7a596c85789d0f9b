from math import pi

# layout always proceeds clockwise; flipping changes facing only
CLOCKWISE = -1

FLIPPED_START_ANGLE = pi
STROKE_MITER_LIMIT = 2.0

DEFAULT_DIAMETER = 250
DEFAULT_KERNING = 0
DEFAULT_FILL = '#000'
DEFAULT_FONT_FAMILY = 'Times New Roman'
DEFAULT_FONT_SIZE = 24
DEFAULT_FONT_WEIGHT = 'normal'
DEFAULT_FONT_STYLE = ''

EMPTY_TRIM_POLICIES = ('zero', 'original', 'raise')
