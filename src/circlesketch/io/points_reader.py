"""Reader for YAML points files.

A points file is a mapping with a single ``points`` key holding a list of
``[x, y]`` pairs:

    points:
      - [0, 0]
      - [1, 0]
      - [1, 1]
"""

from pathlib import Path
from typing import Annotated

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from circlesketch.domain import Contour
from circlesketch.exceptions import PointsFileError

FiniteFloat = Annotated[float, Field(allow_inf_nan=False)]


class PointsFile(BaseModel):
    """Schema of a points file."""

    model_config = ConfigDict(extra="forbid")

    points: list[tuple[FiniteFloat, FiniteFloat]]


def read_points_file(path: Path) -> Contour:
    """Load a contour from a YAML points file.

    Args:
        path: Path to the YAML file

    Returns:
        Contour with the file's points in order

    Raises:
        PointsFileError: If the file is missing, not YAML, or malformed
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise PointsFileError(str(path), e.strerror or str(e)) from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise PointsFileError(str(path), str(e)) from e

    try:
        parsed = PointsFile.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise PointsFileError(str(path), f"{location}: {first['msg']}") from e

    return Contour.from_tuples(parsed.points)
