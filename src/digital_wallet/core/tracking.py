"""
Static location data for the "Where is?" map.
"""

import uuid
from enum import Enum
from typing import List, Tuple

from ..utils.config import MapConfig


class AnnotationType(Enum):
    """What a map pin stands for."""
    CARD = "card"
    USER = "user"

    @property
    def label(self) -> str:
        return "Card" if self is AnnotationType.CARD else "You"


class MapRegion:
    """A rectangular map region given by its center and span in degrees."""

    def __init__(self, latitude: float, longitude: float, latitude_delta: float, longitude_delta: float) -> None:
        if latitude_delta <= 0 or longitude_delta <= 0:
            raise ValueError("Region span must be positive")
        self.latitude = latitude
        self.longitude = longitude
        self.latitude_delta = latitude_delta
        self.longitude_delta = longitude_delta

    def contains(self, latitude: float, longitude: float) -> bool:
        return (abs(latitude - self.latitude) <= self.latitude_delta / 2
                and abs(longitude - self.longitude) <= self.longitude_delta / 2)

    def project(self, latitude: float, longitude: float, width: float, height: float) -> Tuple[float, float]:
        """
        Map a coordinate to pixel space of a width x height panel.

        North is up. The region center lands in the middle of the panel.
        """
        x = (longitude - self.longitude) / self.longitude_delta * width + width / 2
        y = (self.latitude - latitude) / self.latitude_delta * height + height / 2
        return x, y


class TrackingLocation:
    """A fixed pin on the map."""

    def __init__(self, latitude: float, longitude: float, annotation_type: AnnotationType) -> None:
        self.id = str(uuid.uuid4())
        self.latitude = latitude
        self.longitude = longitude
        self.annotation_type = annotation_type

    @property
    def label(self) -> str:
        return self.annotation_type.label

    def __repr__(self) -> str:
        return f"TrackingLocation({self.label}, {self.latitude}, {self.longitude})"


def default_region() -> MapRegion:
    """Region that fits both pins."""
    return MapRegion(
        MapConfig.CENTER_LATITUDE,
        MapConfig.CENTER_LONGITUDE,
        MapConfig.LATITUDE_DELTA,
        MapConfig.LONGITUDE_DELTA
    )


def dummy_locations() -> List[TrackingLocation]:
    """The user's and the physical card's positions."""
    return [
        TrackingLocation(latitude, longitude, AnnotationType(kind))
        for kind, latitude, longitude in MapConfig.LOCATIONS
    ]
