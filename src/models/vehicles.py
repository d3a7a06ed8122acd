"""
Vehicle hierarchy: a base vehicle and a single-level Car specialization.

**Conceptual**: A Vehicle knows its make and year and can describe itself. A
Car *is a* Vehicle that additionally knows its model. Car inherits the
description capability as-is and adds one of its own; it never re-implements
`describe()`.

**Teaching note**: `Describable` is a Protocol (structural typing), not an ABC.
Any object with a `describe() -> str` method satisfies it, so code that only
needs a description can accept a Describable instead of a concrete Vehicle.
Fields are stored in underscore attributes and exposed through read-only
properties: once constructed, a vehicle's data cannot be reassigned through
its public surface.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Describable(Protocol):
    """Anything that can produce a one-line human-readable description."""

    def describe(self) -> str:
        ...


class Vehicle:
    """
    A vehicle identified by make and year.

    Usage:
        >>> Vehicle("Honda", 2018).describe()
        'Make: Honda, Year: 2018'
    """

    def __init__(self, make: str, year: int):
        self._make = make
        self._year = year

    @property
    def make(self) -> str:
        return self._make

    @property
    def year(self) -> int:
        return self._year

    def describe(self) -> str:
        """Return "Make: {make}, Year: {year}"."""
        return f"Make: {self._make}, Year: {self._year}"

    def get_info(self) -> str:
        """Alias of describe()."""
        return self.describe()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(make={self._make!r}, year={self._year!r})"


class Car(Vehicle):
    """
    A Vehicle with a model name.

    Usage:
        >>> car = Car("Toyota", 2020, "Corolla")
        >>> car.describe()
        'Make: Toyota, Year: 2020'
        >>> car.describe_model()
        'Model: Corolla'
    """

    def __init__(self, make: str, year: int, model: str):
        super().__init__(make, year)
        self._model = model

    @property
    def model(self) -> str:
        return self._model

    def describe_model(self) -> str:
        """Return "Model: {model}"."""
        return f"Model: {self._model}"

    def get_model(self) -> str:
        """Alias of describe_model()."""
        return self.describe_model()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(make={self._make!r}, year={self._year!r}, "
            f"model={self._model!r})"
        )
