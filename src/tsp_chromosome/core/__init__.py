"""Core components: City, CitySet, Tour."""

from .city import City, CitySet
from .errors import InvalidConfigurationError
from .tour import Tour, cost_of

__all__ = ["City", "CitySet", "InvalidConfigurationError", "Tour", "cost_of"]
