"""
Unit Tests for the encoded polyline codec
"""
import pytest

from app.utils.polyline import decode_polyline, encode_polyline


# Reference example from the encoded polyline format documentation
REFERENCE = "_p~iF~ps|U_ulLnnqC_mqNvxq`@"
REFERENCE_POINTS = [(-120.2, 38.5), (-120.95, 40.7), (-126.453, 43.252)]


class TestPolyline:

    def test_decode_reference(self):
        decoded = decode_polyline(REFERENCE)

        assert len(decoded) == len(REFERENCE_POINTS)
        for got, expected in zip(decoded, REFERENCE_POINTS):
            assert got == pytest.approx(expected)

    def test_encode_reference(self):
        assert encode_polyline(REFERENCE_POINTS) == REFERENCE

    def test_empty(self):
        assert encode_polyline([]) == ""
        assert decode_polyline("") == []

    def test_campus_route_survives_at_five_decimals(self):
        route = [(28.030374, -26.191809), (28.0305, -26.1910), (28.030784, -26.191099)]

        decoded = decode_polyline(encode_polyline(route))

        assert len(decoded) == len(route)
        for got, expected in zip(decoded, route):
            assert got == pytest.approx(expected, abs=1e-5)

    def test_truncated_string(self):
        with pytest.raises(ValueError):
            decode_polyline(REFERENCE[:-1])
