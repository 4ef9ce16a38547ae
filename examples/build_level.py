from mazegen.data_models import level_config_from_yaml
from mazegen.level import build_level, cell_to_world
from mazegen.types import CellKind

config = level_config_from_yaml("examples/level.yaml")
level = build_level(config.get_quadrant(), center_shared=config.center_shared)
rows, _cols = level.shape

for record in level.records:
    if record.kind in (CellKind.PELLET, CellKind.EMPTY):
        continue
    x, y = cell_to_world(
        record.row, record.col, rows, config.cell_size, config.spawn_offset
    )
    print(record.kind.name, (x, y), record.orientation)
