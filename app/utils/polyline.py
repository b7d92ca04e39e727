# path: wits-campus-map/app/utils/polyline.py

from __future__ import annotations

from typing import List, Sequence, Tuple


def _encode_value(value: int) -> str:
    value = ~(value << 1) if value < 0 else value << 1
    chunks = []
    while value >= 0x20:
        chunks.append(chr((0x20 | (value & 0x1F)) + 63))
        value >>= 5
    chunks.append(chr(value + 63))
    return "".join(chunks)


def encode_polyline(points_lonlat: Sequence[Sequence[float]], precision: int = 5) -> str:
    """
    Google encoded-polyline string for (lng, lat) points.

    The format stores latitude first, so the pairs are swapped on the way out.
    """
    factor = 10 ** precision
    out = []
    prev_lat = 0
    prev_lng = 0
    for lng, lat in points_lonlat:
        lat_i = int(round(lat * factor))
        lng_i = int(round(lng * factor))
        out.append(_encode_value(lat_i - prev_lat))
        out.append(_encode_value(lng_i - prev_lng))
        prev_lat, prev_lng = lat_i, lng_i
    return "".join(out)


def decode_polyline(encoded: str, precision: int = 5) -> List[Tuple[float, float]]:
    """Decode a Google encoded polyline into (lng, lat) points."""
    factor = 10 ** precision
    points: List[Tuple[float, float]] = []
    index = 0
    lat = 0
    lng = 0
    length = len(encoded)

    while index < length:
        deltas = []
        for _ in range(2):
            shift = 0
            result = 0
            while True:
                if index >= length:
                    raise ValueError("Truncated polyline string")
                b = ord(encoded[index]) - 63
                index += 1
                result |= (b & 0x1F) << shift
                shift += 5
                if b < 0x20:
                    break
            deltas.append(~(result >> 1) if result & 1 else result >> 1)
        lat += deltas[0]
        lng += deltas[1]
        points.append((lng / factor, lat / factor))

    return points
