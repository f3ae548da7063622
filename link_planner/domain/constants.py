"""Constants used across the application."""

import os
from pathlib import Path

# Output directory - configurable via environment variable
# Default: 'output_data' in current working directory
OUTPUT_DATA_DIR = os.getenv("OUTPUT_DATA_DIR", str(Path.cwd() / "output_data"))

# Physical constants
# Simplified value, precise enough for clearance visualization
SPEED_OF_LIGHT = 3e8  # m/s
EARTH_RADIUS_M = 6371000.0  # Mean radius, same as Leaflet's CRS.Earth.R
GHZ = 1e9

# Spherical Web-Mercator (EPSG:3857)
MERCATOR_RADIUS_M = 6378137.0
MERCATOR_MAX_LATITUDE = 85.0511287798
TILE_SIZE_PX = 256
MIN_ZOOM = 0
MAX_ZOOM = 19

# Planner defaults
DEFAULT_FREQUENCY_GHZ = 5.8  # Common for outdoor links
DEFAULT_MAP_CENTER = (13.027, 77.545)  # Bangalore office
DEFAULT_MAP_ZOOM = 15
DEFAULT_VIEWPORT_SIZE = (1024, 768)
