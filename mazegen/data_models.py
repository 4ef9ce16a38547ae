import typing as t

import yaml
from pydantic import BaseModel, Field, field_validator

from mazegen.quadrants import CLASSIC_QUADRANT

Vector2 = t.Tuple[float, float]


class LevelConfigYamlModel(BaseModel):
    cell_size: float = Field(default=1.0, gt=0)
    spawn_offset: Vector2 = (0.0, 0.0)
    center_shared: bool = True
    quadrant: t.List[t.List[int]] | None = None

    @field_validator("quadrant")
    @classmethod
    def quadrant_not_empty(cls, value: t.List[t.List[int]] | None):
        if value is not None and len(value) == 0:
            raise ValueError("quadrant must contain at least one row")
        return value

    def get_quadrant(self) -> t.Sequence[t.Sequence[int]]:
        if self.quadrant is None:
            return CLASSIC_QUADRANT
        return self.quadrant


def level_config_from_yaml(file_path: str) -> LevelConfigYamlModel:
    with open(file_path, "r") as stream:
        config = yaml.safe_load(stream)
    return LevelConfigYamlModel(**(config or {}))
