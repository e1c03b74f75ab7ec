from __future__ import annotations

from typing import Optional

from c4engine.config import AI_DEPTH
from c4engine.types import Difficulty


def choose_difficulty() -> Optional[Difficulty]:
    print("Select difficulty:")
    for i, name in enumerate(AI_DEPTH, start=1):
        print(f"{i}) {name.capitalize()} (depth {AI_DEPTH[name]})")
    print("q) Quit")

    choice = input("Choice: ").strip().lower()
    if choice in {"q", "quit", "exit"}:
        return None

    names = list(AI_DEPTH)
    if choice.isdigit() and 1 <= int(choice) <= len(names):
        return names[int(choice) - 1]  # type: ignore[return-value]
    if choice in AI_DEPTH:
        return choice  # type: ignore[return-value]

    print("\nInvalid choice. Defaulting to easy.\n")
    return "easy"
