"""
Zone Classification

Maps GPS coordinates to the Coimbatore District zone responsible for them.

    NORTH   - Mettupalayam, Annur, Karamadai, Thudiyalur, Saravanampatti
    SOUTH   - Pollachi, Valparai, Anaimalai, Kinathukadavu, Aliyar Dam
    EAST    - Sulur, Palladam, Avinashi border, Tiruppur border
    WEST    - Madukkarai, Thondamuthur, Coimbatore West
    CENTRAL - Gandhipuram, RS Puram, Peelamedu, Singanallur, Ukkadam

Every input maps to a zone; coordinates that are missing or fall outside
the district bounding box map to UNASSIGNED.
"""

import logging
from civic.models.zone import Zone

logger = logging.getLogger(__name__)

# District outer bounds (inclusive)
DISTRICT_LAT_MIN = 10.25
DISTRICT_LAT_MAX = 11.35
DISTRICT_LNG_MIN = 76.65
DISTRICT_LNG_MAX = 77.45

# Zone thresholds (strict)
NORTH_LAT_THRESHOLD = 11.05
SOUTH_LAT_THRESHOLD = 10.85
EAST_LNG_THRESHOLD = 77.10
WEST_LNG_THRESHOLD = 76.95

ZONE_DESCRIPTIONS = {
    Zone.NORTH: 'North Zone - Mettupalayam, Annur, Karamadai, Thudiyalur, Saravanampatti',
    Zone.SOUTH: 'South Zone - Pollachi, Valparai, Anaimalai, Kinathukadavu, Aliyar Dam',
    Zone.EAST: 'East Zone - Sulur, Palladam, Avinashi Road, Tiruppur Border',
    Zone.WEST: 'West Zone - Madukkarai, Thondamuthur, Coimbatore West',
    Zone.CENTRAL: 'Central Zone - Gandhipuram, RS Puram, Peelamedu, Singanallur, Ukkadam',
    Zone.UNASSIGNED: 'Unassigned - Outside Coimbatore District or no coordinates',
}


def classify(latitude, longitude):
    """Return the zone for a coordinate pair.

    Args:
        latitude: GPS latitude in degrees, or None
        longitude: GPS longitude in degrees, or None

    Returns:
        Zone member; never raises
    """
    if latitude is None or longitude is None:
        logger.debug('No coordinates - zone set to UNASSIGNED')
        return Zone.UNASSIGNED

    # NaN fails every comparison and lands here as well
    if not (DISTRICT_LAT_MIN <= latitude <= DISTRICT_LAT_MAX
            and DISTRICT_LNG_MIN <= longitude <= DISTRICT_LNG_MAX):
        logger.debug('Coordinates (%s, %s) outside district', latitude, longitude)
        return Zone.UNASSIGNED

    if latitude > NORTH_LAT_THRESHOLD:
        zone = Zone.NORTH
    elif latitude < SOUTH_LAT_THRESHOLD:
        zone = Zone.SOUTH
    # City belt: latitude within [10.85, 11.05]
    elif longitude > EAST_LNG_THRESHOLD:
        zone = Zone.EAST
    elif longitude < WEST_LNG_THRESHOLD:
        zone = Zone.WEST
    else:
        zone = Zone.CENTRAL

    logger.debug('Zone %s detected for (%s, %s)', zone.name, latitude, longitude)
    return zone


def describe(zone):
    """Human-readable label for a zone."""
    return ZONE_DESCRIPTIONS[zone]


def list_zones():
    return [{'zone': zone.name, 'description': describe(zone)} for zone in Zone]
