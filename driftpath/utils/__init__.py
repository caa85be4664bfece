"""Mini README: Utility helper functions for Driftpath.

Exports the GeoJSON helpers behind the overlay export and the ingestion
of vertices from a drawn LineString or MultiPoint file.
"""

from .geojson import coordinates_from_geojson, paths_to_geojson

__all__ = ["coordinates_from_geojson", "paths_to_geojson"]
