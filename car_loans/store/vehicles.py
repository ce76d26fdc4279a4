"""Owner and car directory used to resolve which cars a user owns."""

from dataclasses import dataclass, field

from car_loans.exceptions import (
    EntityNotFoundError,
    InvalidArgumentError,
    ReferentialIntegrityError,
)
from car_loans.models import Car, Owner


@dataclass
class VehicleDirectory:
    """In-memory store for owners and their cars with relationship tracking."""

    owners: dict[int, Owner] = field(default_factory=dict)
    cars: dict[int, Car] = field(default_factory=dict)

    # Relationship index
    _owner_cars: dict[int, list[int]] = field(default_factory=dict)

    def add_owner(self, owner: Owner) -> None:
        """Add an owner to the directory."""
        self.owners[owner.owner_id] = owner
        self._owner_cars.setdefault(owner.owner_id, [])

    def add_car(self, car: Car) -> None:
        """Add a car to the directory."""
        if car.car_id in self.cars:
            raise InvalidArgumentError(f"Car {car.car_id} already exists")
        if car.owner_id not in self.owners:
            raise ReferentialIntegrityError(f"Owner {car.owner_id} not found")

        self.cars[car.car_id] = car
        self._owner_cars[car.owner_id].append(car.car_id)

    def get_owner(self, owner_id: int) -> Owner:
        """Get an owner by id."""
        try:
            return self.owners[owner_id]
        except KeyError:
            raise EntityNotFoundError(f"Owner {owner_id} not found") from None

    def find_owner_by_username(self, username: str) -> Owner | None:
        """Get an owner by username, if present."""
        return next((o for o in self.owners.values() if o.username == username), None)

    def car_ids_for_owner(self, owner_id: int) -> list[int]:
        """Get the ids of all cars owned by an owner."""
        return list(self._owner_cars.get(owner_id, []))

    def cars_for_owner(self, owner_id: int) -> list[Car]:
        """Get all cars owned by an owner."""
        return [self.cars[cid] for cid in self._owner_cars.get(owner_id, [])]

    def summary(self) -> dict[str, int]:
        """Return summary counts of all entities."""
        return {
            "owners": len(self.owners),
            "cars": len(self.cars),
        }
