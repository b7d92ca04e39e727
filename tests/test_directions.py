"""
Unit Tests for directions assembly
"""
import pytest

from app.core.exceptions import InvalidRouteRequestError, VenueNotFoundError
from app.models.route_models import RouteRequest
from app.services.directions import get_directions, round_half_up


class TestRoundHalfUp:

    @pytest.mark.parametrize("meters, expected", [
        (0.0, 0),
        (12.49, 12),
        (12.5, 13),
        (13.5, 14),
        (88.92, 89),
    ])
    def test_halves_round_up(self, meters, expected):
        assert round_half_up(meters) == expected


class TestGetDirections:

    def test_rounded_distance_matches_total(self, campus):
        request = RouteRequest(start_venue_id="great-hall", end_venue_id="ccdu")

        response = get_directions("r-1", request, campus)

        assert response.route_id == "r-1"
        assert response.distance_rounded_m == int(response.total_distance_m + 0.5)

    def test_same_venue_rejected(self, campus):
        request = RouteRequest(start_venue_id="ccdu", end_venue_id="ccdu")

        with pytest.raises(InvalidRouteRequestError):
            get_directions("r-2", request, campus)

    def test_unknown_venue_rejected(self, campus):
        request = RouteRequest(start_venue_id="ccdu", end_venue_id="nowhere")

        with pytest.raises(VenueNotFoundError):
            get_directions("r-3", request, campus)
