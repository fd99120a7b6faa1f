from hearth.handlers.base import BaseHandler
from hearth.handlers.lights import LightHandler
from hearth.handlers.music import MusicHandler
from hearth.handlers.reminders import ReminderHandler
from hearth.handlers.security import SecurityHandler
from hearth.handlers.thermostat import ThermostatHandler

__all__ = [
    "BaseHandler",
    "LightHandler",
    "MusicHandler",
    "ReminderHandler",
    "SecurityHandler",
    "ThermostatHandler",
]
