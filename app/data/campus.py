# path: wits-campus-map/app/data/campus.py

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union
import json

from pydantic import ValidationError

from app.core.exceptions import CampusDataError
from app.core.logging_config import get_logger
from app.models.campus_models import CampusMap, Pathway, Venue

logger = get_logger(__name__)


# University of the Witwatersrand, (lon, lat)
CAMPUS_CENTER = (28.0305, -26.1929)

_VENUE_ROWS = [
    # East Campus
    ("great-hall", "Great Hall", (28.030374, -26.191809)),
    ("solomon-mahlangu", "Solomon Mahlangu House", (28.030618, -26.192717)),
    ("wartenweiler-library", "Wartenweiler Library", (28.030784, -26.191099)),
    ("matrix-union", "The Matrix", (28.030744, -26.190004)),
    ("origins-centre", "Origins Centre", (28.028362, -26.192953)),
    ("bidvest-stadium", "Bidvest Stadium", (28.0330, -26.1905)),
    ("planetarium", "Wits Anglo American Digital Dome", (28.028316, -26.188472)),
    ("mens-res", "Men's Residence", (28.030410, -26.188852)),
    ("mens-res-2", "Men's Residence 2", (28.029517, -26.188880)),
    ("library-lawns", "Library Lawns", (28.030053, -26.190707)),
    ("sunnyside", "Sunnyside Residence", (28.031615, -26.189722)),
    ("jubilee", "Jubilee Hall", (28.032408, -26.188388)),
    ("rsb", "RSB", (28.030376, -26.192157)),
    ("thembi", "Thembiso", (28.029570, -26.191123)),
    ("wcco", "WCCO", (28.030786, -26.188163)),
    ("dj-du-plessis", "DJ du Plessis", (28.024073, -26.188209)),
    ("john-moffat", "John Moffat", (28.029308, -26.190220)),
    ("william-library", "William Cullen Library", (28.029362, -26.190694)),
    ("clinic", "Wits Clinic", (28.031371, -26.190398)),
    ("umthombo-building", "Umthombo Building", (28.030708, -26.190502)),
    ("old-mutual", "Old Mutual Sports Hall", (28.029247, -26.189600)),
    ("amic-dec", "Amic Dec", (28.028330, -26.190989)),
    ("rugby-stadium", "Wits Rugby Stadium", (28.030957, -26.187265)),
    ("fnb-stadium", "Wits FNB Stadium", (28.028122, -26.188172)),
    ("biology", "Biology", (28.031558, -26.190959)),
    ("ols", "OLS", (28.032013, -26.191473)),
    ("gatehouse", "Gatehouse", (28.031998, -26.192003)),
    ("wits-theater", "Wits Theater", (28.031724, -26.192798)),
    ("wits-school-of-art", "Wits School of the Art", (28.032859, -26.192060)),
    ("wits-art-museum", "Wits Art Museum", (28.032651, -26.192799)),
    ("humphrey-raikes", "Humphrey Raikes", (28.031162, -26.192109)),
    ("international-house", "International House", (28.0325, -26.1950)),

    # West Campus
    ("chamber-mines", "ARM Building", (28.027219, -26.191756)),
    ("commerce-building", "Commerce Building", (28.026376, -26.189375)),
    ("law-building", "Law Building", (28.0280, -26.1925)),
    ("management-building", "Management Building", (28.0282, -26.1928)),
    ("kambule-building", "TW Kambule MSB", (28.026542, -26.190125)),
    ("barnato-residence", "Barnato Residence", (28.025023, -26.1869235)),
    ("david-webster", "David Webster Residence", (28.025968, -26.186825)),
    ("west-village", "West Campus Village", (28.023995, -26.187372)),
    ("convocation-dh", "Convocation DH", (28.024077, -26.186835)),
    ("main-dh", "Main DH", (28.030731, -26.189531)),
    ("flower-hall", "Flower Hall", (28.026051, -26.191734)),
    ("tower-building", "Tower Building", (28.025879, -26.189633)),
    ("fnb-building", "FNB Building", (28.026673, -26.188551)),
    ("new-commerce-building", "NCB", (28.026597, -26.189738)),
    ("msl", "MSL", (28.026814, -26.190504)),
    ("physics-labs", "Physics Labs", (28.025928, -26.190838)),
    ("physics-building", "Physics Building", (28.031225, -26.191683)),
    ("science-stadium", "Science Stadium", (28.025167, -26.190533)),
    ("hall-29", "Hall 29", (28.025988, -26.186331)),
    ("gym-courts", "Gym and Squash Courts", (28.026890, -26.186250)),
    ("jimmys", "Jimmy's", (28.025950, -26.188774)),
    ("pimd", "PIMD", (28.024261, -26.188963)),
    ("richard", "Richard Ward", (28.029595, -26.192958)),
    ("evolution", "Evolution Studies Institute", (28.029019, -26.193095)),
    ("chamber", "Chamber of Mines", (28.026775, -26.191645)),
    ("genmin-lab", "Genmin Lab", (28.025928, -26.191311)),
    ("umthonjeni", "Umthonjeni", (28.031972, -26.190942)),
    ("high-voltage-lab", "High Voltage Lab", (28.025696, -26.191584)),
    ("wits-postgrad-club", "Wits Postgraduates Club", (28.028741, -26.192436)),
    ("wits-law-clinic", "Wits Law Clinic", (28.025277, -26.189251)),
    ("commerce-library", "Commerce Library", (28.025627, -26.189442)),
    ("ccdu", "CCDU", (28.026995, -26.190858)),
]

_PATHWAY_ROWS = [
    # Main walkways
    ("Main East Walkway", [
        (28.0305, -26.1935), (28.0305, -26.1920), (28.0305, -26.1900), (28.0305, -26.1885),
    ]),
    ("Library Walkway", [
        (28.0295, -26.1910), (28.0305, -26.1910), (28.0315, -26.1910),
    ]),
    ("Great Walk", [
        (28.032219, -26.191168), (28.031636, -26.191396), (28.031124, -26.191301), (28.030304, -26.191678),
        (28.029561, -26.191474), (28.029005, -26.191759), (28.027344, -26.191560), (28.027298, -26.191115),
    ]),
    ("West Campus Connector", [
        (28.0265, -26.1915), (28.0265, -26.1900), (28.0265, -26.1885), (28.0265, -26.1870),
    ]),
    ("North-South Connector", [
        (28.0280, -26.1920), (28.0280, -26.1900), (28.0280, -26.1880),
    ]),
    ("Matrix Plaza", [
        (28.0305, -26.1895), (28.0310, -26.1895), (28.0315, -26.1895),
    ]),
    ("Commerce Square", [
        (28.0260, -26.1895), (28.0265, -26.1895), (28.0270, -26.1895),
    ]),
]

CAMPUS_VENUES = tuple(
    Venue(id=venue_id, name=name, coordinates=coords) for venue_id, name, coords in _VENUE_ROWS
)

PATHWAYS = tuple(Pathway(name=name, coordinates=coords) for name, coords in _PATHWAY_ROWS)

BUILTIN_CAMPUS = CampusMap(center=CAMPUS_CENTER, venues=CAMPUS_VENUES, pathways=PATHWAYS)


def load_campus_map(path: Optional[Union[str, Path]] = None) -> CampusMap:
    """
    Campus registry from a JSON file, or the built-in Wits data when no path is given.

    The file holds {"center": [lon, lat], "venues": [...], "pathways": [...]}
    using the same record shapes as the API.
    """
    if not path:
        logger.info(
            "Using built-in campus data: %d venues, %d pathways",
            len(BUILTIN_CAMPUS.venues), len(BUILTIN_CAMPUS.pathways),
        )
        return BUILTIN_CAMPUS

    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise CampusDataError(f"Cannot read campus data: {e}", path=str(path)) from e

    try:
        campus = CampusMap.model_validate(raw)
    except ValidationError as e:
        raise CampusDataError(f"Invalid campus data: {e.error_count()} error(s)", path=str(path)) from e

    logger.info(
        "Loaded campus data from %s: %d venues, %d pathways",
        path, len(campus.venues), len(campus.pathways),
    )
    return campus
