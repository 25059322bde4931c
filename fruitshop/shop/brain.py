# fruitshop/shop/brain.py
from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Tuple

from .apl import default_screen_datasource, default_screen_document
from .dialog import Reply, Turn
from .root import FruitShop
from .state import dump_state, load_state
from .strings import translator


def handle_turn(
    turn: Turn,
    attributes: Optional[Dict[str, Any]] = None,
    today: Optional[date] = None,
) -> Tuple[Reply, Dict[str, Any]]:
    """
    One request in, one reply out (pure function).
    `attributes` are the session attributes from the previous turn; the returned
    dict replaces them.
    """
    state = load_state(attributes)
    root = FruitShop(state, translator(turn.locale), today or date.today())

    reply = Reply()
    root.handle(turn, reply)

    if not reply.end_session and not reply.has_question:
        root.take_initiative(turn, reply)

    # keep the screen in step with the voice when nothing else is shown
    if turn.supports_apl and not reply.end_session and not reply.display_used:
        reply.show("defaultScreen", default_screen_document(), default_screen_datasource(reply.prompt))

    return reply, dump_state(state)
