from .flight import Flight as Flight
from .open_sky_flight import OpenSkyFlight as OpenSkyFlight
