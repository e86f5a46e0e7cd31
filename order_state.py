from dataclasses import dataclass, field
from typing import List

from pizza import InvalidArgument, Pizza, ToppingSet


@dataclass
class Order:
    items: List[Pizza] = field(default_factory=list)
    notes: str = ""

    def add_item(self, item: Pizza):
        if not isinstance(item, Pizza):
            raise InvalidArgument(f"Only built pizzas can be ordered, got {item!r}")
        self.items.append(item)

    def toppings(self) -> ToppingSet:
        result = ToppingSet()
        for it in self.items:
            result = result | it.toppings
        return result

    def summary(self) -> str:
        lines = []
        for i, it in enumerate(self.items, 1):
            parts = [f"{i}. {it.describe()}"]
            if it.toppings:
                parts.append(f"Toppings: {', '.join(t.value for t in it.toppings)}")
            lines.append(" | ".join(parts))
        if not lines:
            lines.append("(empty order)")
        if self.notes:
            lines.append(f"Notes: {self.notes}")
        return "\n".join(lines)
