from .flight_provider import FlightProvider as FlightProvider
