"""Tests for the grid maze problem."""

import logging

import pytest

from maze_pathfinder.core.data_models import MazeState
from maze_pathfinder.core.exceptions import MazeFormatError
from maze_pathfinder.problem import MazeProblem, MOVES


@pytest.fixture
def wall_maze():
    return MazeProblem([
        "XXXXX",
        "XIXGX",
        "X...X",
        "XXXXX",
    ])


@pytest.fixture
def mud_maze():
    return MazeProblem([
        "XXXXXX",
        "XIMK.X",
        "X...GX",
        "XXXXXX",
    ])


class TestMazeParsing:
    """Test maze validation and special cells."""

    def test_special_cells(self, mud_maze):
        assert mud_maze.initial_state == MazeState(1, 1)
        assert mud_maze.key_state == MazeState(3, 1)
        assert mud_maze.goal_states == [MazeState(4, 2)]
        assert (mud_maze.rows, mud_maze.cols) == (4, 6)

    def test_goals_in_row_major_order(self):
        problem = MazeProblem([
            "XXXXX",
            "XI.GX",
            "XGK.X",
            "XXXGX",
        ])
        assert problem.goal_states == [MazeState(3, 1), MazeState(1, 2), MazeState(3, 3)]

    def test_missing_key_is_allowed(self, caplog):
        with caplog.at_level(logging.WARNING):
            problem = MazeProblem(["XXXX", "XIGX", "XXXX"])
        assert problem.key_state is None
        assert "no key" in caplog.text

    def test_from_text(self):
        problem = MazeProblem.from_text("\n  XXXXX\n  XIKGX\n\n  XXXXX\n")
        assert problem.initial_state == MazeState(1, 1)
        assert problem.goal_states == [MazeState(3, 1)]

    @pytest.mark.parametrize("rows", [
        [],
        [""],
        ["XXXX", "XIKGX", "XXXX"],
        ["XXXXX", "XIKZX", "XXXXX"],
        ["XXXXX", "X.KGX", "XXXXX"],
        ["XXXXX", "XIIGX", "XKXXX"],
        ["XXXXX", "XIKKX", "XGXXX"],
        ["XXXXX", "XIK.X", "XXXXX"],
    ], ids=["no_rows", "empty_row", "ragged", "unknown_cell", "no_initial",
            "two_initial", "two_keys", "no_goal"])
    def test_malformed_maze(self, rows):
        with pytest.raises(MazeFormatError):
            MazeProblem(rows)

    def test_mud_cost_must_be_positive(self):
        with pytest.raises(ValueError):
            MazeProblem(["XXXXX", "XIKGX", "XXXXX"], mud_cost=0)


class TestMazeTransitions:
    """Test successor generation."""

    def test_walls_are_not_entered(self, wall_maze):
        assert wall_maze.transitions(MazeState(1, 1)) == {"D": MazeState(1, 2)}

    def test_action_order(self, wall_maze):
        moves = wall_maze.transitions(MazeState(2, 2))
        assert list(moves) == ["L", "R"]
        assert list(moves) == [action for action in MOVES if action in moves]

    def test_open_cell_has_all_moves(self):
        problem = MazeProblem([
            "XXXXX",
            "XI.KX",
            "X...X",
            "X..GX",
            "XXXXX",
        ])
        assert problem.transitions(MazeState(2, 2)) == {
            "U": MazeState(2, 1),
            "D": MazeState(2, 3),
            "L": MazeState(1, 2),
            "R": MazeState(3, 2),
        }

    def test_grid_edge_without_walls(self):
        problem = MazeProblem(["IKG"])
        assert problem.transitions(MazeState(0, 0)) == {"R": MazeState(1, 0)}
        assert problem.transitions(MazeState(2, 0)) == {"L": MazeState(1, 0)}

    def test_mud_is_passable(self, mud_maze):
        assert mud_maze.transitions(MazeState(1, 1))["R"] == MazeState(2, 1)


class TestMazeCosts:
    """Test distances and costs."""

    def test_distance_is_manhattan(self, wall_maze):
        assert wall_maze.distance(MazeState(1, 1), MazeState(3, 2)) == 3
        assert wall_maze.distance(MazeState(3, 2), MazeState(1, 1)) == 3

    def test_distance_to_nearest_goal(self):
        problem = MazeProblem([
            "XXXXXXX",
            "XG.I.KX",
            "X....GX",
            "XXXXXXX",
        ])
        assert problem.distance_to_goal(MazeState(3, 1)) == 2
        assert problem.distance_to_goal(MazeState(5, 1)) == 1
        assert problem.distance_to_goal(MazeState(5, 2)) == 0
        assert isinstance(problem.distance_to_goal(MazeState(3, 1)), int)

    def test_is_goal(self, wall_maze):
        assert wall_maze.is_goal(MazeState(3, 1))
        assert not wall_maze.is_goal(MazeState(1, 1))

    def test_step_cost_is_cost_of_cell_entered(self, mud_maze):
        assert mud_maze.step_cost(MazeState(1, 1), "R", MazeState(2, 1)) == 3
        assert mud_maze.step_cost(MazeState(2, 1), "R", MazeState(3, 1)) == 1
        # leaving mud is not charged
        assert mud_maze.step_cost(MazeState(2, 1), "L", MazeState(1, 1)) == 1

    def test_custom_mud_cost(self):
        problem = MazeProblem(["XXXXXX", "XIMKGX", "XXXXXX"], mud_cost=5)
        assert problem.get_cost(MazeState(2, 1)) == 5
        assert problem.get_cost(MazeState(3, 1)) == 1
        assert problem.step_cost(MazeState(1, 1), "R", MazeState(2, 1)) == 5

    def test_path_cost(self, mud_maze):
        assert mud_maze.path_cost(["R", "R"]) == 3 + 1
        assert mud_maze.path_cost(["D", "R", "R", "U"]) == 4
        assert mud_maze.path_cost([]) == 0


class TestTraceAndRender:
    """Test following and drawing action sequences."""

    def test_trace(self, wall_maze):
        assert wall_maze.trace(["D", "R"]) == [
            MazeState(1, 1), MazeState(1, 2), MazeState(2, 2)
        ]

    def test_trace_rejects_illegal_action(self, wall_maze):
        with pytest.raises(ValueError, match="Illegal action"):
            wall_maze.trace(["R"])

    def test_render_path_marks_open_cells(self, wall_maze):
        assert wall_maze.render_path(["D", "R", "R", "U"]) == [
            "XXXXX",
            "XIXGX",
            "X***X",
            "XXXXX",
        ]

    def test_render_leaves_grid_untouched(self, wall_maze):
        wall_maze.render_path(["D", "R"])
        assert wall_maze.cell(MazeState(1, 2)) == "."
