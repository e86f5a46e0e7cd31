import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Set
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Iterator, TypeVar

logger = logging.getLogger(__name__)


class InvalidArgument(ValueError):
    """Raised when a required argument is missing or of the wrong kind."""

    def __init__(self, message: str, code: str = "INVALID_ARGUMENT") -> None:
        super().__init__(message)
        self.message = message
        self.code = code


def _require(value, kind, name: str):
    if value is None:
        raise InvalidArgument(f"{name} is required", "MISSING_ARGUMENT")
    if not isinstance(value, kind):
        raise InvalidArgument(f"{name} must be a {kind.__name__}, got {value!r}")
    return value


class Topping(Enum):
    HAM = "ham"
    MUSHROOM = "mushroom"
    ONION = "onion"
    PEPPER = "pepper"
    SAUSAGE = "sausage"

    @property
    def bit(self) -> int:
        return 1 << _ORDINALS[self]

    @classmethod
    def from_name(cls, name: str) -> "Topping":
        _require(name, str, "topping name")
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise InvalidArgument(f"Unknown topping '{name}'") from None


_ORDINALS = {t: i for i, t in enumerate(Topping)}


class ToppingSet(Set):
    """Immutable topping set stored as a bitmask over topping ordinals."""

    __slots__ = ("_mask",)

    def __init__(self, toppings: Iterable[Topping] = ()):
        mask = 0
        for topping in _require(toppings, Iterable, "toppings"):
            mask |= _require(topping, Topping, "topping").bit
        self._mask = mask

    @classmethod
    def _from_mask(cls, mask: int) -> "ToppingSet":
        result = cls.__new__(cls)
        result._mask = mask
        return result

    @classmethod
    def _from_iterable(cls, it):
        # Used by the Set mixins (&, |, -, ^); results may hold foreign items
        items = list(it)
        if all(isinstance(i, Topping) for i in items):
            return cls(items)
        return frozenset(items)

    def __contains__(self, topping) -> bool:
        return isinstance(topping, Topping) and bool(self._mask & topping.bit)

    def __iter__(self) -> Iterator[Topping]:
        return (t for t in Topping if self._mask & t.bit)

    def __len__(self) -> int:
        return bin(self._mask).count("1")

    def __or__(self, other):
        if isinstance(other, ToppingSet):
            return self._from_mask(self._mask | other._mask)
        return super().__or__(other)

    def __and__(self, other):
        if isinstance(other, ToppingSet):
            return self._from_mask(self._mask & other._mask)
        return super().__and__(other)

    def __sub__(self, other):
        if isinstance(other, ToppingSet):
            return self._from_mask(self._mask & ~other._mask)
        return super().__sub__(other)

    def __eq__(self, other) -> bool:
        if isinstance(other, ToppingSet):
            return self._mask == other._mask
        return super().__eq__(other)

    def __hash__(self) -> int:
        return self._hash()

    def __repr__(self) -> str:
        names = ", ".join(t.name for t in self)
        return f"ToppingSet({{{names}}})"

    def with_topping(self, topping: Topping) -> "ToppingSet":
        return self._from_mask(self._mask | _require(topping, Topping, "topping").bit)


class Size(Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"

    @classmethod
    def from_name(cls, name: str) -> "Size":
        _require(name, str, "size name")
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise InvalidArgument(f"Unknown size '{name}'") from None


@dataclass(frozen=True)
class Pizza(ABC):
    toppings: ToppingSet

    def __post_init__(self):
        if not isinstance(self.toppings, ToppingSet):
            object.__setattr__(self, "toppings", ToppingSet(self.toppings))

    @abstractmethod
    def describe(self) -> str:
        """Short human readable name of the pizza, without toppings."""


@dataclass(frozen=True)
class NyPizza(Pizza):
    size: Size

    def __post_init__(self):
        super().__post_init__()
        _require(self.size, Size, "size")

    def describe(self) -> str:
        return f"{self.size.value.title()} NY pizza"


@dataclass(frozen=True)
class Calzone(Pizza):
    sauce_inside: bool = False

    def describe(self) -> str:
        return "Calzone (sauce inside)" if self.sauce_inside else "Calzone"


P = TypeVar("P", bound=Pizza)
B = TypeVar("B", bound="PizzaBuilder")
C = TypeVar("C", bound="CalzoneBuilder")


class PizzaBuilder(ABC, Generic[P]):
    """Reusable after build(); each product keeps the toppings it was built with."""

    def __init__(self) -> None:
        self._toppings = ToppingSet()

    @property
    def toppings(self) -> ToppingSet:
        return self._toppings

    def add_topping(self: B, topping: Topping) -> B:
        self._toppings = self._toppings.with_topping(topping)
        return self

    def add_toppings(self: B, *toppings: Topping) -> B:
        self._toppings = self._toppings | ToppingSet(toppings)
        return self

    @abstractmethod
    def build(self) -> P:
        ...


class NyPizzaBuilder(PizzaBuilder[NyPizza]):

    def __init__(self, size: Size):
        super().__init__()
        self.size = _require(size, Size, "size")

    def build(self) -> NyPizza:
        pizza = NyPizza(toppings=self._toppings, size=self.size)
        logger.debug("Built %s with %s", pizza.describe(), pizza.toppings)
        return pizza


class CalzoneBuilder(PizzaBuilder[Calzone]):

    def __init__(self):
        super().__init__()
        self._sauce_inside = False

    def sauce_inside(self: C) -> C:
        self._sauce_inside = True
        return self

    def build(self) -> Calzone:
        pizza = Calzone(toppings=self._toppings, sauce_inside=self._sauce_inside)
        logger.debug("Built %s with %s", pizza.describe(), pizza.toppings)
        return pizza
