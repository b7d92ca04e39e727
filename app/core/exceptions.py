"""
Custom Exceptions for the Wits Campus Map
=========================================

Raised at the service/API boundary only. Geometry and routing helpers never
raise for missing pathway data; they return None or an empty list instead.

Usage:
    from app.core.exceptions import VenueNotFoundError

    venue = find_venue_by_id(venue_id, campus.venues)
    if venue is None:
        raise VenueNotFoundError(venue_id)
"""

from typing import Optional, Any, Dict


class CampusMapError(Exception):
    """Base exception for all campus map errors"""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details
        }


class VenueNotFoundError(CampusMapError):
    """No venue matches the given id or name"""

    status_code = 404

    def __init__(self, venue_ref: str, field: str = "id"):
        super().__init__(
            f"Venue not found: {venue_ref}",
            code="VENUE_NOT_FOUND",
            details={field: venue_ref}
        )


class InvalidRouteRequestError(CampusMapError):
    """Directions request cannot be served as asked"""

    status_code = 400

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="INVALID_ROUTE_REQUEST", details=details)


class CampusDataError(CampusMapError):
    """Campus venue/pathway data could not be loaded"""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(
            message,
            code="CAMPUS_DATA_ERROR",
            details={"path": path} if path else None
        )
