"""Shared infrastructure for examples."""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Callable, Coroutine
from decimal import Decimal
from pathlib import Path

from kungfu import Ok, Error

from orderkit import schema as Sc

MENU_FILE = Path(__file__).with_name("menu.json")


def load_menu() -> Sc.Menu:
    """Sample menu; a broken menu file stops the example."""
    match Sc.parse_menu(json.loads(MENU_FILE.read_text())):
        case Ok(menu):
            return menu
        case Error(e):
            raise SystemExit(f"menu.json is invalid: {e}")


# Helpers
def banner(title: str) -> None:
    print(f"\n{'─' * 50}\n{title}\n{'─' * 50}")


def money(value: Decimal) -> str:
    return f"${value:.2f}"


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    asyncio.run(main())
