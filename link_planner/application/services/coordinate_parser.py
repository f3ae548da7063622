import re

from link_planner.domain.models.geo import Coordinates
from link_planner.domain.validators import validate_coordinates

_HEMISPHERE_SIGNS = {"N": 1, "E": 1, "S": -1, "W": -1}
_TOKEN_RE = re.compile(r"[+-]?\d+(?:\.\d+)?|[NSEW]", re.IGNORECASE)


class CoordinateParser:
    """
    Parses tower positions typed on the command line.

    Accepted per position: decimal degrees ("13.027 77.545"), decimal degrees
    with hemisphere letters ("13.027N 77.545E") and degrees-minutes-seconds
    ("13°01'37.2\"N 77°32'42\"E"). Several positions may be separated by
    semicolons or newlines.
    """

    def parse(self, text: str) -> Coordinates:
        values = self._parse_values(text)
        if len(values) != 2:
            raise ValueError(
                f"Expected latitude and longitude, got {len(values)} value(s) in {text!r}"
            )
        coord = Coordinates(lat=values[0], lon=values[1])
        validate_coordinates(coord)
        return coord

    def parse_many(self, text: str) -> list[Coordinates]:
        chunks = [chunk for chunk in re.split(r"[;\n]", text) if chunk.strip()]
        if not chunks:
            raise ValueError("Input cannot be empty.")
        return [self.parse(chunk) for chunk in chunks]

    @staticmethod
    def format(coord: Coordinates, precision: int = 6) -> str:
        lat_h = "N" if coord.lat >= 0 else "S"
        lon_h = "E" if coord.lon >= 0 else "W"
        return (
            f"{abs(coord.lat):.{precision}f}° {lat_h}, "
            f"{abs(coord.lon):.{precision}f}° {lon_h}"
        )

    def _parse_values(self, text: str) -> list[float]:
        tokens = _TOKEN_RE.findall(re.sub(r"""[°'"]""", " ", text.replace(",", " ")))

        values: list[float] = []
        numbers: list[float] = []
        for token in tokens:
            hemisphere = token.upper()
            if hemisphere in _HEMISPHERE_SIGNS:
                if not numbers:
                    raise ValueError(f"Hemisphere {hemisphere} without a value")
                values.append(self._combine(numbers) * _HEMISPHERE_SIGNS[hemisphere])
                numbers = []
            else:
                numbers.append(float(token))

        if numbers:
            if values:
                # "13.0N 77.5" - trailing value without hemisphere
                values.append(self._combine(numbers))
            elif len(numbers) in (2, 4, 6):
                # Plain decimal pair or unlabelled DM/DMS pairs
                half = len(numbers) // 2
                values.extend(
                    [self._combine(numbers[:half]), self._combine(numbers[half:])]
                )
            else:
                values.extend(numbers)
        return values

    @staticmethod
    def _combine(parts: list[float]) -> float:
        """Degrees, optional minutes and seconds to decimal degrees."""
        if len(parts) > 3:
            raise ValueError(f"Too many components for one coordinate: {parts}")
        degrees, minutes, seconds = (parts + [0.0, 0.0])[:3]
        if not (0 <= minutes < 60 and 0 <= seconds < 60):
            raise ValueError(
                "Invalid DMS coordinate: minutes or seconds out of range"
            )
        sign = -1 if degrees < 0 else 1
        return sign * (abs(degrees) + minutes / 60.0 + seconds / 3600.0)
