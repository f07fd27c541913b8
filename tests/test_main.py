import os

import pytest

import main
from config import EXAMPLE_PAIRS, get_active_params
from models.relation import Relation


@pytest.fixture
def params(tmp_path):
    p = get_active_params()
    p["OUTPUT_FOLDER"] = str(tmp_path / "output")
    return p


def test_process_pair_prints_report(capsys, params):
    a, b = EXAMPLE_PAIRS["shared_edge"]
    relation = main.process_pair("shared_edge", a, b, params)

    assert relation is Relation.TOUCHING
    out = capsys.readouterr().out
    assert "=== shared_edge ===" in out
    assert "Polygon: (0, 0) (1, 0) (1, 1) (0, 1)" in out
    assert "Relationship: Touching" in out


def test_process_pair_saves_rendering(params):
    params["SAVE_VISUALIZATIONS"] = True
    a, b = EXAMPLE_PAIRS["overlapping"]
    relation = main.process_pair("overlapping", a, b, params)

    assert relation is Relation.INTERSECTING
    assert os.path.isfile(os.path.join(params["OUTPUT_FOLDER"], "overlapping_relation.png"))


def test_process_pair_skips_malformed_in_strict_mode(capsys, params):
    params["STRICT_VALIDATION"] = True
    a, b = EXAMPLE_PAIRS["repeated_vertex_inner"]

    assert main.process_pair("repeated_vertex_inner", a, b, params) is None
    assert "Relationship" not in capsys.readouterr().out


def test_run_classifies_every_example(params):
    results = main.run(params=params)
    assert results == {
        "repeated_vertex_inner": Relation.DISJOINT_ENCLOSED,
        "repeated_vertex_corner": Relation.TOUCHING,
        "shared_edge": Relation.TOUCHING,
        "overlapping": Relation.INTERSECTING,
        "enclosed": Relation.DISJOINT_ENCLOSED,
        "outside": Relation.DISJOINT_OUTSIDE,
    }


def test_main_returns_none_for_console_script(monkeypatch):
    # the console-script wrapper passes main()'s return value to sys.exit
    monkeypatch.setattr(main, "run", lambda pairs, params: {"stub": Relation.TOUCHING})
    assert main.main() is None


def test_process_pair_skips_malformed_vertex_data(capsys, params):
    bad = [(0, 0, 0), (1, 0, 0), (1, 1, 0)]
    a, _ = EXAMPLE_PAIRS["shared_edge"]

    assert main.process_pair("bad_shape", a, bad, params) is None
    assert "Relationship" not in capsys.readouterr().out


def test_run_continues_after_a_malformed_pair(params):
    pairs = {
        "broken": ([(0, 0), ("x", 1), (1, 1)], [(0, 0), (1, 0), (1, 1)]),
        "outside": EXAMPLE_PAIRS["outside"],
    }
    assert main.run(pairs, params) == {
        "broken": None,
        "outside": Relation.DISJOINT_OUTSIDE,
    }
