#!/usr/bin/env python3
"""
Seed the food list from a JSON file.

Accepts either a list of entries or an object with an "items" list. Prices may
be given as "price_cents" or as a decimal "price".

Usage:
    python scripts/seed_foods.py --file foods.json
"""
import argparse
import json
import logging
import os
import sys

# allow running from repo/scripts
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from munch.db import init_db, new_session  # noqa: E402
from munch.logging_config import configure_logging  # noqa: E402
from munch.services.food_service import FoodListService  # noqa: E402
from munch.utils.money import to_cents  # noqa: E402

logger = logging.getLogger("seed_foods")


def _normalize_entry(entry):
    """Return a dict with keys: name, description, price_cents, image_ref"""
    name = entry.get("name") or entry.get("title") or ""
    if entry.get("price_cents") is not None:
        price_cents = int(entry["price_cents"])
    else:
        price_cents = to_cents(entry.get("price", 0) or 0)
    image_ref = entry.get("image_ref") or entry.get("image")
    return {
        "name": name,
        "description": entry.get("description") or "",
        "price_cents": price_cents,
        "image_ref": image_ref,
    }


def load_entries(path: str):
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        source_list = data.get("items", [])
    elif isinstance(data, list):
        source_list = data
    else:
        source_list = []
    return [_normalize_entry(e) for e in source_list]


def seed_from_file(path: str) -> int:
    """Insert every named entry from `path` in one transaction; nothing is kept on failure."""
    entries = []
    for entry in load_entries(path):
        if not entry["name"]:
            logger.warning("Skipping entry without a name: %r", entry)
            continue
        entries.append(entry)

    init_db(seed=False)
    db = new_session()
    try:
        foods = FoodListService(db).add_foods(entries)
    finally:
        db.close()
    logger.info("Seeded foods: %d", len(foods))
    return len(foods)


if __name__ == "__main__":
    configure_logging()
    parser = argparse.ArgumentParser()
    parser.add_argument("--file", "-f", required=True, help="Path to a JSON list of foods")
    args = parser.parse_args()
    if not os.path.exists(args.file):
        logger.error("File not found: %s", args.file)
        sys.exit(1)
    seed_from_file(args.file)
