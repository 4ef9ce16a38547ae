import typing as t

import typer

from mazegen import utils
from mazegen.data_models import LevelConfigYamlModel, level_config_from_yaml
from mazegen.level import build_level, count_kinds
from mazegen.mirror import expand
from mazegen.orientation import resolve_orientation
from mazegen.svg_export import level_to_svg

app = typer.Typer()


def load_config(config: str | None) -> LevelConfigYamlModel:
    if config is None:
        return LevelConfigYamlModel()
    return level_config_from_yaml(config)


@app.command()
def build(
    config: t.Annotated[t.Optional[str], typer.Option("--config")] = None,
    not_shared: t.Annotated[bool, typer.Option("--not-shared")] = False,
    svg: t.Annotated[t.Optional[str], typer.Option("--svg")] = None,
):
    cfg = load_config(config)
    center_shared = cfg.center_shared and not not_shared
    logger = utils.MazegenLogger(printout=True)
    level = build_level(cfg.get_quadrant(), center_shared=center_shared, logger=logger)
    level.print_grid()
    for kind, n in count_kinds(level).items():
        print("{}: {}".format(kind.name.lower(), n))

    if svg:
        doc = level_to_svg(
            level, cell_size=cfg.cell_size, spawn_offset=cfg.spawn_offset
        )
        with open(svg, "w") as f:
            f.write(doc.toprettyxml())
        logger.append(utils.MazegenLog("Level drawing written to {}.".format(svg), 2))


@app.command()
def orient(
    row: int,
    col: int,
    config: t.Annotated[t.Optional[str], typer.Option("--config")] = None,
):
    cfg = load_config(config)
    full = expand(cfg.get_quadrant(), center_shared=cfg.center_shared)
    print(resolve_orientation(full, row, col))


if __name__ == "__main__":
    app()
