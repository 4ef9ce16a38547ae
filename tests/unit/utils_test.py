import numpy as np

from mazegen import utils
from mazegen.types import CellKind


class TestNeighbors:
    def setup_method(self):
        self.map = np.array(
            [
                [1, 2, 7],
                [4, 3, 5],
                [8, 0, 6],
            ]
        )

    def test_is_in_map(self):
        assert utils.is_in_map(0, 0, self.map)
        assert utils.is_in_map(2, 2, self.map)
        assert not utils.is_in_map(-1, 0, self.map)
        assert not utils.is_in_map(0, 3, self.map)

    def test_out_of_bounds_is_absent(self):
        assert utils.kind_at(-1, -1, self.map) is None
        assert not utils.is_wall_like(-1, 0, self.map)
        assert not utils.is_corner(0, -1, self.map)
        assert not utils.is_junction(3, 2, self.map)
        assert not utils.is_wall_corner_or_junction(2, 3, self.map)

    def test_classes(self):
        assert utils.kind_at(0, 2, self.map) == CellKind.T_JUNCTION
        assert utils.is_wall_like(0, 1, self.map)
        assert utils.is_wall_like(2, 0, self.map)
        assert not utils.is_wall_like(0, 0, self.map)
        assert utils.is_corner(0, 0, self.map)
        assert utils.is_corner(1, 1, self.map)
        assert utils.is_junction(0, 2, self.map)
        assert not utils.is_wall_or_corner(0, 2, self.map)
        assert utils.is_wall_corner_or_junction(0, 2, self.map)
        assert not utils.is_wall_or_corner(2, 2, self.map)

    def test_classify_neighbors(self):
        walls = utils.classify_neighbors(1, 1, self.map, utils.is_wall_like)
        assert walls == utils.Neighbors(up=True, right=False, down=False, left=True)
        assert walls.total() == 2

        corners = utils.classify_neighbors(0, 0, self.map, utils.is_corner)
        assert corners == utils.Neighbors(False, False, False, False)


class TestLogger:
    def test_append(self, capsys):
        logger = utils.MazegenLogger(printout=False)
        logger.append(utils.MazegenLog("hello", 3))
        assert logger.messages() == ["hello"]
        assert str(logger[0]) == "At step 3: 'hello'"
        assert capsys.readouterr().out == ""

    def test_printout(self, capsys):
        logger = utils.MazegenLogger()
        logger.append(utils.MazegenLog("hello", 0))
        assert "hello" in capsys.readouterr().out
