"""Owner and car models used to resolve which loans a user may act on."""

from dataclasses import dataclass


@dataclass
class Owner:
    """Person who owns one or more financed vehicles."""

    owner_id: int
    username: str
    full_name: str


@dataclass
class Car:
    """Vehicle that may be financed by at most one active loan."""

    car_id: int
    make: str
    model: str
    year: int
    vin: str  # Vehicle Identification Number, 17 chars
    owner_id: int

    @property
    def display_name(self) -> str:
        return f"{self.year} {self.make} {self.model}"
