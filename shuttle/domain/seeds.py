"""Seed data for the countries/capitals demo."""
from __future__ import annotations

from typing import Tuple

from .entities import Item

COUNTRIES: Tuple[Item, ...] = (
    "Australia",
    "Vienna",
    "Canberra",
    "Austria",
    "Belgium",
    "Santiago",
    "Chile",
    "Brussels",
    "San Jose",
    "Finland",
    "India",
)
COUNTRIES_APPENDED: Tuple[Item, ...] = ("Italy", "Japan")

CAPITALS: Tuple[Item, ...] = (
    "Costa Rica",
    "New Delhi",
    "Washington DC",
    "USA",
    "UK",
    "London",
    "Helsinki",
    "Taiwan",
    "Taipei",
    "Sweden",
    "Stockholm",
)
CAPITALS_APPENDED: Tuple[Item, ...] = ("Rome", "Tokyo")


def seed_countries() -> Tuple[Item, ...]:
    return COUNTRIES + COUNTRIES_APPENDED


def seed_capitals() -> Tuple[Item, ...]:
    return CAPITALS + CAPITALS_APPENDED


__all__ = [
    "CAPITALS",
    "CAPITALS_APPENDED",
    "COUNTRIES",
    "COUNTRIES_APPENDED",
    "seed_capitals",
    "seed_countries",
]
