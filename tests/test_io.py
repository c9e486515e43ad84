"""Tests for maze loading and result saving."""

import json
import tempfile
import shutil
from pathlib import Path

import pytest

from maze_pathfinder.integration.io import load_maze_from_file, load_mazes_from_json, save_results
from maze_pathfinder.problem import MazeProblem


class TestMazeLoading:
    """Test loading mazes from disk."""

    @pytest.fixture
    def temp_dir(self):
        """Create temporary directory."""
        temp_dir = tempfile.mkdtemp()
        yield Path(temp_dir)
        shutil.rmtree(temp_dir)

    def test_load_maze_from_file(self, temp_dir):
        """Test loading a text maze with blank lines and indentation."""
        maze_file = temp_dir / "maze.txt"
        maze_file.write_text("XXXXX\n  XIKGX  \n\nXXXXX\n")

        rows = load_maze_from_file(maze_file)

        assert rows == ["XXXXX", "XIKGX", "XXXXX"]
        assert MazeProblem(rows).key_state is not None

    def test_load_maze_file_not_found(self, temp_dir):
        """Test loading a missing maze file."""
        with pytest.raises(FileNotFoundError):
            load_maze_from_file(temp_dir / "missing.txt")

    def test_load_mazes_from_json_object(self, temp_dir):
        """Test a JSON object of named mazes."""
        json_file = temp_dir / "mazes.json"
        json_file.write_text(json.dumps({
            "line": ["XXXXX", "XIKGX", "XXXXX"],
            "edge": ["IKG"]
        }))

        mazes = load_mazes_from_json(json_file)

        assert mazes == {
            "line": ["XXXXX", "XIKGX", "XXXXX"],
            "edge": ["IKG"]
        }

    def test_load_mazes_from_json_list(self, temp_dir):
        """Test a JSON list of mazes."""
        json_file = temp_dir / "mazes.json"
        json_file.write_text(json.dumps([["IKG"], ["GKI"]]))

        mazes = load_mazes_from_json(json_file)

        assert list(mazes) == ["maze_0", "maze_1"]
        assert mazes["maze_1"] == ["GKI"]

    @pytest.mark.parametrize("content", [
        "{not json",
        json.dumps("IKG"),
        json.dumps({"bad": "IKG"}),
        json.dumps({"bad": ["IKG", 3]}),
    ], ids=["invalid_json", "scalar", "rows_not_list", "row_not_string"])
    def test_load_mazes_from_json_invalid(self, temp_dir, content):
        """Test rejection of malformed maze collections."""
        json_file = temp_dir / "mazes.json"
        json_file.write_text(content)

        with pytest.raises(ValueError):
            load_mazes_from_json(json_file)

    def test_load_mazes_from_json_not_found(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            load_mazes_from_json(temp_dir / "missing.json")


class TestSaveResults:
    """Test result saving."""

    @pytest.fixture
    def temp_dir(self):
        temp_dir = tempfile.mkdtemp()
        yield Path(temp_dir)
        shutil.rmtree(temp_dir)

    def test_save_results(self, temp_dir):
        """Test saving results, creating parent directories."""
        results = {"two_goals": ["D", "U", "L"], "no_key": None}
        output_file = temp_dir / "out" / "results.json"

        save_results(results, output_file)

        assert output_file.exists()
        with open(output_file, 'r') as f:
            assert json.load(f) == results

    def test_save_results_compact(self, temp_dir):
        output_file = temp_dir / "results.json"

        save_results({"a": [1, 2]}, output_file, pretty=False)

        assert output_file.read_text() == '{"a": [1, 2]}'


if __name__ == "__main__":
    pytest.main([__file__])
