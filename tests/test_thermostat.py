import pytest

from hearth.handlers.thermostat import ThermostatHandler
from hearth.models.household import ThermostatMode


@pytest.fixture
def handler():
    return ThermostatHandler()


def test_set_temperature(handler, state):
    result = handler.handle(state, "set the temperature to 68 degrees")

    assert result.reply == "Setting the thermostat to 68 degrees Fahrenheit."
    assert result.actions == ["Set thermostat to 68°F"]
    assert state.thermostat.temperature == 68


@pytest.mark.parametrize("command, expected", [("make it 90", 85), ("make it 40", 55)])
def test_temperature_is_clamped(handler, state, command, expected):
    handler.handle(state, command)
    assert state.thermostat.temperature == expected


def test_number_wins_over_mode_keyword(handler, state):
    handler.handle(state, "cool it down to 70")
    assert state.thermostat.temperature == 70
    assert state.thermostat.mode == ThermostatMode.ECO


@pytest.mark.parametrize(
    "command, mode",
    [
        ("turn on the ac", ThermostatMode.COOL),
        ("cool the house", ThermostatMode.COOL),
        ("heating please", ThermostatMode.HEAT),
        ("switch to eco", ThermostatMode.ECO),
        ("turn off the thermostat", ThermostatMode.OFF),
    ],
)
def test_mode_changes(handler, state, command, mode):
    state.thermostat.mode = ThermostatMode.COOL if mode == ThermostatMode.HEAT else ThermostatMode.HEAT
    result = handler.handle(state, command)
    assert result is not None
    assert state.thermostat.mode == mode


def test_energy_saver_phrase(handler, state):
    state.thermostat.mode = ThermostatMode.HEAT
    result = handler.handle(state, "energy saver")
    assert result.reply == "Thermostat is now in eco mode."
    assert state.thermostat.mode == ThermostatMode.ECO


def test_status_query(handler, state):
    result = handler.handle(state, "what's the temperature")
    assert result.reply == "The thermostat is set to 72 degrees in eco mode."
    assert result.actions == []


def test_unrelated_command_is_declined(handler, state):
    assert handler.handle(state, "play some jazz") is None
