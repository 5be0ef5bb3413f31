"""
Zone Enumeration
"""

import enum


class Zone(enum.Enum):
    """Geographic partition of the governed district"""
    NORTH = 'NORTH'
    SOUTH = 'SOUTH'
    EAST = 'EAST'
    WEST = 'WEST'
    CENTRAL = 'CENTRAL'
    # Outside the district, or no coordinates reported
    UNASSIGNED = 'UNASSIGNED'
