from enum import Flag


class Compliant(Flag):
    '''It indicates which degree of compliantness the data must reflect the format'''
    NONE  = 0
    ENUM  = 1 << 0
    INHERIT = 1 << 1
    PADDING = 1 << 2  # reserved bytes must be zero
