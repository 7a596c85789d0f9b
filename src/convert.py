import skia
from math import ceil, degrees

from .exceptions import ConfigurationError

__converts = {'join' :
                {
                'miter' : skia.Paint.kMiter_Join,
                'round' : skia.Paint.kRound_Join,
                'bevel' : skia.Paint.kBevel_Join
                },
            'style' :
                {
                'fill' : skia.Paint.kFill_Style,
                'stroke' : skia.Paint.kStroke_Style
                },
            'font_weight' :
                {
                'thin' : skia.FontStyle.kThin_Weight,
                'extra_light' : skia.FontStyle.kExtraLight_Weight,
                'lighter' : skia.FontStyle.kLight_Weight,
                'light' : skia.FontStyle.kLight_Weight,
                'normal' : skia.FontStyle.kNormal_Weight,
                '' : skia.FontStyle.kNormal_Weight,
                'medium' : skia.FontStyle.kMedium_Weight,
                'semi_bold' : skia.FontStyle.kSemiBold_Weight,
                'bold' : skia.FontStyle.kBold_Weight,
                'bolder' : skia.FontStyle.kExtraBold_Weight,
                'extra_bold' : skia.FontStyle.kExtraBold_Weight,
                'black' : skia.FontStyle.kBlack_Weight,
                'extra_black' : skia.FontStyle.kExtraBlack_Weight,
                100 : skia.FontStyle.kThin_Weight,
                200 : skia.FontStyle.kExtraLight_Weight,
                300 : skia.FontStyle.kLight_Weight,
                400 : skia.FontStyle.kNormal_Weight,
                500 : skia.FontStyle.kMedium_Weight,
                600 : skia.FontStyle.kSemiBold_Weight,
                700 : skia.FontStyle.kBold_Weight,
                800 : skia.FontStyle.kExtraBold_Weight,
                900 : skia.FontStyle.kBlack_Weight,
                1000 : skia.FontStyle.kExtraBlack_Weight,
                },
            'font_slant' :
                {
                '' : skia.FontStyle.kUpright_Slant,
                'normal' : skia.FontStyle.kUpright_Slant,
                'upright' : skia.FontStyle.kUpright_Slant,
                'italic' : skia.FontStyle.kItalic_Slant,
                'oblique' : skia.FontStyle.kOblique_Slant
                }
            }


def convert_style(conv_type: str, value: str | int):
    '''
    Converts a style-related value to its corresponding Skia enum value.

    CSS spellings are accepted for font values ('bold', '700', 'italic', ...).

    Args:
        conv_type (str): The type of conversion. Must be one of:
                        'join', 'style', 'font_weight', 'font_slant'.
        value (str | int): The value to convert.

    Returns:
        The corresponding Skia enum value (e.g., skia.FontStyle.kBold_Weight).

    Raises:
        ConfigurationError: If the value is unknown for the given conversion type.
    '''
    assert conv_type in __converts, f'Wrong convert type {conv_type}!'
    key = value
    if isinstance(value, str):
        key = value.strip().lower().replace('-', '_')
        if key.isdigit():
            key = int(key)
    try:
        return __converts[conv_type][key]
    except (KeyError, TypeError):
        raise ConfigurationError(f'Unknown {conv_type.replace("_", " ")}: {value!r}') from None


def int_ceil(v: float) -> int: return int(ceil(v))


def rad_to_deg(angle: float) -> float: return degrees(angle)
