from .service import FlightProvider as FlightProvider
from .value_object import Flight as Flight
from .value_object import OpenSkyFlight as OpenSkyFlight
