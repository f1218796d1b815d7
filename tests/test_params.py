import json
import logging

from energy_collector import Parameters
from energy_collector.config import SPAWN_ENERGY_THRESHOLD


def test_defaults_match_config():
    assert Parameters().spawn_energy_threshold == SPAWN_ENERGY_THRESHOLD


def test_update_coerces_types():
    params = Parameters()
    params.update(max_owned_for_spawn="45", congestion_cost_ratio="1.5")

    assert params.max_owned_for_spawn == 45
    assert params.congestion_cost_ratio == 1.5


def test_update_ignores_unknown_keys():
    params = Parameters()
    params.update(warp_drive=True)

    assert not hasattr(params, "warp_drive")


def test_update_warns_on_invalid_value(caplog):
    params = Parameters()
    with caplog.at_level(logging.WARNING, logger="energy_collector.params"):
        params.update(spawn_neighborhood_radius="wide")

    assert params.spawn_neighborhood_radius == Parameters().spawn_neighborhood_radius
    assert "Invalid value for spawn_neighborhood_radius" in caplog.text


def test_save_and_load(tmp_path):
    path = tmp_path / "params.json"
    Parameters(author="Tester", max_bisection_iterations=12).save(path)

    loaded = Parameters.load(path)

    assert loaded.author == "Tester"
    assert loaded.max_bisection_iterations == 12
    assert json.loads(path.read_text())["author"] == "Tester"


def test_load_missing_file_gives_defaults(tmp_path):
    assert Parameters.load(tmp_path / "absent.json") == Parameters()


def test_load_corrupt_file_gives_defaults(tmp_path, caplog):
    path = tmp_path / "params.json"
    path.write_text("{not json")

    with caplog.at_level(logging.WARNING, logger="energy_collector.params"):
        params = Parameters.load(path)

    assert params == Parameters()
    assert "Failed to load" in caplog.text


def test_save_writes_only_where_told(tmp_path):
    path = tmp_path / "nested.json"
    Parameters(spawn_energy_threshold=300).save(str(path))

    assert Parameters.load(str(path)).spawn_energy_threshold == 300
    assert [p.name for p in tmp_path.iterdir()] == ["nested.json"]
