from enum import Enum


class ItemType(Enum):
    '''Type of a game item, saved as the first four bytes of its stream.'''
    SURFACE      = 0
    FLIPPER      = 1
    TIMER        = 2
    PLUNGER      = 3
    TEXTBOX      = 4
    BUMPER       = 5
    TRIGGER      = 6
    LIGHT        = 7
    KICKER       = 8
    DECAL        = 9
    GATE         = 10
    SPINNER      = 11
    RAMP         = 12
    TABLE        = 13
    LIGHT_CENTER = 14
    DRAG_POINT   = 15
    COLLECTION   = 16
    DISP_REEL    = 17
    LIGHT_SEQ    = 18
    PRIMITIVE    = 19
    FLASHER      = 20
    RUBBER       = 21
    HIT_TARGET   = 22
    INVALID      = 0xffffffff
