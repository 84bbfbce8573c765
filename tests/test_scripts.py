import importlib.util
from pathlib import Path

import pytest

script_path = Path(__file__).resolve().parent.parent / "scripts" / "tsp.py"


@pytest.fixture(scope="module")
def tsp_script():
    spec = importlib.util.spec_from_file_location("tsp_script", script_path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.mark.parametrize("n_nodes", ["7", "0", "100"])
def test_unknown_size_lists_available_tables(tsp_script, capsys, n_nodes):
    assert tsp_script.main(["tsp.py", n_nodes]) == 1
    out = capsys.readouterr().out
    assert f"No example table with {n_nodes} nodes." in out
    assert "Available sizes: 5, 6, 15, 20" in out


def test_example_table_output(tsp_script, capsys):
    assert tsp_script.main(["tsp.py", "6", "0"]) == 0
    out = capsys.readouterr().out
    assert "Path: A -> B -> E -> F -> C -> D -> A" in out
    assert "Verified cost: 155" in out
    assert "Verified cost: 135" in out
