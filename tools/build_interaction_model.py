from __future__ import annotations

import json
from pathlib import Path

from fruitshop.shop.interaction_model import INVOCATION_NAME, build_interaction_model

PROJECT_ROOT = Path(__file__).resolve().parents[1]
OUT_PATH = PROJECT_ROOT / "en-US-generated.json"


def main() -> None:
    model = build_interaction_model(INVOCATION_NAME)
    OUT_PATH.write_text(json.dumps(model, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")

    lm = model["interactionModel"]["languageModel"]
    print(f"OK  {len(lm['intents'])} intents, {len(lm['types'])} slot types  ->  {OUT_PATH}")


if __name__ == "__main__":
    main()
