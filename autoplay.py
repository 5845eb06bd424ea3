"""Headless random play: moves the cursor around and selects lines, printing each outcome."""
import logging
import sys, os
ROOT = os.path.dirname(__file__)
SRC = os.path.join(ROOT, 'src')
if SRC not in sys.path:
    sys.path.insert(0, SRC)
import random

from ramen_rush.components.cursor import CursorDirection
from ramen_rush.events.bus import EVENT_CASCADE_STEP, EVENT_LEVEL_STARTED, EVENT_ORDER_FULFILLED
from ramen_rush.session import GameSession


def render(session):
    rows = []
    for row in session.snapshot()["grid"]:
        rows.append(" ".join((value or "-")[:6].ljust(6) for value in row))
    return "\n".join(rows)


def play(turns=200, seed=7, advance_every=15):
    rng = random.Random(seed)
    session = GameSession(seed=seed)
    bus = session.event_bus
    bus.subscribe(EVENT_LEVEL_STARTED, lambda s, **k: print('level', k['level'], [i.value for i in k['ingredients']]))
    bus.subscribe(EVENT_ORDER_FULFILLED, lambda s, **k: print('  fulfilled', k['order'].ingredient.value, k['order'].quantity))
    bus.subscribe(EVENT_CASCADE_STEP, lambda s, **k: print('  cascade', k['depth'], len(k['matches'])))
    session.start()
    accepted = 0
    for turn in range(turns):
        for _ in range(rng.randint(0, 3)):
            session.move_cursor(rng.choice(list(CursorDirection)))
        if rng.random() < 0.3:
            session.rotate_cursor()
        result = session.select_current_line()
        if result is None:
            session.clear_selection()
            continue
        accepted += 1
        if accepted % advance_every == 0:
            session.advance_level()
    print(render(session))
    print('turns', turns, 'accepted', accepted, 'level', session.level, 'stars', session.stars)


if __name__ == '__main__':
    logging.basicConfig(level=logging.DEBUG if '-v' in sys.argv else logging.INFO)
    play()
