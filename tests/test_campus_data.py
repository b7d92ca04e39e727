"""
Unit Tests for campus registry data and loading
"""
import json

import pytest
from pydantic import ValidationError

from app.core.exceptions import CampusDataError
from app.data.campus import BUILTIN_CAMPUS, CAMPUS_CENTER, load_campus_map
from app.models.campus_models import CampusMap, Venue
from app.utils.validation import is_valid_coordinate, is_valid_venue


class TestBuiltinCampus:

    def test_center(self):
        assert CAMPUS_CENTER == (28.0305, -26.1929)
        assert is_valid_coordinate(CAMPUS_CENTER)

    def test_venues_are_valid(self):
        assert len(BUILTIN_CAMPUS.venues) == 64
        for venue in BUILTIN_CAMPUS.venues:
            assert is_valid_venue(venue)

    def test_pathways_are_valid(self):
        assert len(BUILTIN_CAMPUS.pathways) == 7
        for pathway in BUILTIN_CAMPUS.pathways:
            assert pathway.name
            assert len(pathway.coordinates) >= 2
            for coord in pathway.coordinates:
                assert is_valid_coordinate(coord)

    def test_no_path_uses_builtin(self):
        assert load_campus_map(None) is BUILTIN_CAMPUS


class TestLoadCampusMap:

    def _write(self, tmp_path, payload) -> str:
        path = tmp_path / "campus.json"
        path.write_text(json.dumps(payload), encoding="utf-8")
        return str(path)

    def test_loads_json_file(self, tmp_path):
        path = self._write(tmp_path, {
            "center": [1.0, 2.0],
            "venues": [{"id": "a", "name": "A", "coordinates": [1.0, 2.0]}],
            "pathways": [{"name": "P", "coordinates": [[0.0, 0.0], [1.0, 1.0]]}],
        })

        campus = load_campus_map(path)

        assert campus.center == (1.0, 2.0)
        assert campus.venues[0].id == "a"
        assert campus.pathways[0].coordinates == ((0.0, 0.0), (1.0, 1.0))

    def test_missing_file(self, tmp_path):
        with pytest.raises(CampusDataError) as exc_info:
            load_campus_map(tmp_path / "missing.json")

        assert exc_info.value.code == "CAMPUS_DATA_ERROR"

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "campus.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(CampusDataError):
            load_campus_map(path)

    def test_non_utf8_file(self, tmp_path):
        path = tmp_path / "campus.json"
        path.write_bytes(b"\xff\xfe\x00{bad")

        with pytest.raises(CampusDataError):
            load_campus_map(path)

    def test_out_of_range_coordinates(self, tmp_path):
        path = self._write(tmp_path, {
            "center": [1.0, 2.0],
            "venues": [{"id": "a", "name": "A", "coordinates": [190.0, 2.0]}],
        })

        with pytest.raises(CampusDataError):
            load_campus_map(path)


class TestCampusModels:

    def test_duplicate_venue_ids_rejected(self):
        venue = Venue(id="a", name="A", coordinates=(0.0, 0.0))

        with pytest.raises(ValidationError):
            CampusMap(center=(0.0, 0.0), venues=[venue, venue])

    def test_venues_are_immutable(self):
        venue = Venue(id="a", name="A", coordinates=(0.0, 0.0))

        with pytest.raises(ValidationError):
            venue.name = "B"
