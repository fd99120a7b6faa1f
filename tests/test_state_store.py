import pytest

from config import settings
from hearth.models.household import HouseholdState, Task, ThermostatMode
from hearth.state.store import HouseholdConfigError, StateStore


def _without_timestamp(state):
    return state.model_dump(exclude={"last_updated"})


def test_shipped_defaults_match_model_defaults():
    store = StateStore()
    store.load_defaults_from_yaml(settings.household_config_path)
    assert _without_timestamp(store.state) == _without_timestamp(HouseholdState())


def test_snapshot_is_independent(store):
    snapshot = store.snapshot()
    snapshot.lights["kitchen"].brightness = 99
    snapshot.thermostat.temperature = 60
    snapshot.tasks.append(Task(title="Water the plants"))

    assert store.state.lights["kitchen"].brightness == 50
    assert store.state.thermostat.temperature == 72
    assert store.state.tasks == []


def test_reset_restores_defaults_and_clears_tasks(store):
    store.state.lights["living"].on = True
    store.state.music.playing = True
    store.state.tasks.append(Task(title="Water the plants"))

    store.reset()

    assert _without_timestamp(store.state) == _without_timestamp(HouseholdState())


def test_reset_does_not_share_defaults(store):
    store.reset()
    store.state.lights["living"].brightness = 5
    store.reset()
    assert store.state.lights["living"].brightness == 40


def test_load_custom_household(tmp_path):
    config = tmp_path / "household.yaml"
    config.write_text(
        "lights:\n"
        "  porch:\n"
        "    location: front porch\n"
        "    brightness: 70\n"
        "thermostat:\n"
        "  temperature: 68\n"
        "  mode: heat\n"
    )
    store = StateStore()

    store.load_defaults_from_yaml(str(config))

    assert list(store.state.lights) == ["porch"]
    assert store.state.lights["porch"].location == "front porch"
    assert store.state.thermostat.mode == ThermostatMode.HEAT
    assert store.state.music.volume == 45

    store.state.thermostat.temperature = 80
    store.reset()
    assert store.state.thermostat.temperature == 68


def test_missing_config_keeps_builtin_defaults(tmp_path):
    store = StateStore()
    store.load_defaults_from_yaml(str(tmp_path / "missing.yaml"))
    assert _without_timestamp(store.state) == _without_timestamp(HouseholdState())


def test_out_of_range_config_is_rejected(tmp_path):
    config = tmp_path / "household.yaml"
    config.write_text("thermostat:\n  temperature: 120\n")

    with pytest.raises(HouseholdConfigError):
        StateStore().load_defaults_from_yaml(str(config))


def test_non_mapping_config_is_rejected(tmp_path):
    config = tmp_path / "household.yaml"
    config.write_text("- just\n- a list\n")

    with pytest.raises(HouseholdConfigError):
        StateStore().load_defaults_from_yaml(str(config))


def test_unreadable_config_is_rejected(tmp_path):
    with pytest.raises(HouseholdConfigError):
        StateStore().load_defaults_from_yaml(str(tmp_path))
