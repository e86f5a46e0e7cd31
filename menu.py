import json
import logging
from typing import Iterable, List, Optional

import settings
from order_state import Order
from pizza import (
    CalzoneBuilder,
    InvalidArgument,
    NyPizzaBuilder,
    Pizza,
    PizzaBuilder,
    Size,
    Topping,
    ToppingSet,
)

logger = logging.getLogger(__name__)


def load_menu(path: Optional[str] = None) -> dict:
    path = path or settings.MENU_FILE
    with open(path, 'r') as f:
        menu = json.load(f)
    logger.debug("Loaded %d presets from %s", len(menu.get('presets', [])), path)
    return menu


def _lookup_topping(word: str) -> Optional[Topping]:
    for candidate in (word, word[:-1] if word.endswith('s') else None):
        if not candidate:
            continue
        try:
            return Topping.from_name(candidate)
        except InvalidArgument:
            continue
    return None


def parse_toppings(user_input: str) -> List[Topping]:
    """Toppings listed after "with", separated by commas or "and".

    Words that do not name a topping are skipped.
    """
    lowered = f" {user_input.lower()} "
    if ' with ' not in lowered:
        return []
    after = lowered.split(' with ', 1)[1]
    parts = [p.strip(' .!?') for p in after.replace(' and ', ',').split(',')]
    toppings = []
    for p in parts:
        if not p:
            continue
        topping = _lookup_topping(p)
        if topping is None:
            logger.debug("Ignoring unknown topping %r", p)
            continue
        toppings.append(topping)
    return toppings


def build_preset(preset: dict, size: Optional[Size] = None, extra: Iterable[Topping] = ()) -> Pizza:
    style = preset.get('style', 'ny')
    builder: PizzaBuilder
    if style == 'ny':
        builder = NyPizzaBuilder(size or Size.MEDIUM)
    elif style == 'calzone':
        builder = CalzoneBuilder()
        if preset.get('sauce_inside'):
            builder.sauce_inside()
    else:
        raise InvalidArgument(f"Unknown pizza style '{style}'")
    builder.add_toppings(*[Topping.from_name(name) for name in preset.get('toppings', [])])
    builder.add_toppings(*extra)
    return builder.build()


def handle_order_intent(user_input: str, order: Order, menu: dict) -> str:
    lowered = user_input.lower()
    chosen = None
    # Longest name first when one preset name contains another
    for preset in sorted(menu.get('presets', []), key=lambda p: len(p['name']), reverse=True):
        if preset['name'].lower() in lowered:
            chosen = preset
            break
    if not chosen:
        return "I couldn't identify which pizza you'd like. Could you specify the name?"
    size = Size.from_name(menu.get('default_size', 'medium'))
    for s in Size:
        if s.value in lowered:
            size = s
            break
    extra = parse_toppings(user_input)
    pizza = build_preset(chosen, size=size, extra=extra)
    order.add_item(pizza)
    base = ToppingSet(Topping.from_name(name) for name in chosen.get('toppings', []))
    names = ', '.join(t.value for t in ToppingSet(extra) - base)
    return f"Got it! Added a {chosen['name']} ({pizza.describe()}){' with ' + names if names else ''} to your order. Anything else?"
