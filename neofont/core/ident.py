"""
neofont.core.ident - applet identifier ranges

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

# the device uses the 16-bit ident to tell applets apart
# these ranges are conventions only and are not enforced by the codec

# unregistered (user) applets
USER_MIN = 0x7170
USER_MAX = 0x717f

# group range, includes the user range
GROUP_MIN = 0x7100
GROUP_MAX = 0x717f

# AS/RL range
AS_MIN = 0xa000
AS_MAX = 0xafff


IDENT_RANGES = {
    'user': (USER_MIN, USER_MAX),
    'group': (GROUP_MIN, GROUP_MAX),
    'as': (AS_MIN, AS_MAX),
}


def ident_ranges(ident):
    """Names of the documented ranges that contain `ident`."""
    return tuple(
        _name for _name, (_low, _high) in IDENT_RANGES.items()
        if _low <= ident <= _high
    )
