"""Random traits of characters: gender, attributes and names."""

from __future__ import annotations

import enum
import random

from .names import (
    generate_random_white_female_name,
    generate_random_white_male_name,
    generate_random_white_non_binary_name,
)

_GENDER_WEIGHTS = (50.0, 48.0, 2.0)


class Gender(enum.IntEnum):
    GIRL = 0
    BOY = 1
    NON_BINARY = 2


def generate_gender(rng: random.Random) -> Gender:
    """Girl, boy or non-binary with weights 50, 48 and 2."""
    return rng.choices(list(Gender), weights=_GENDER_WEIGHTS)[0]


def generate_attribute(rng: random.Random) -> int:
    """Three six-sided dice plus two."""
    return 2 + sum(1 + rng.randrange(6) for _ in range(3))


def generate_hero_name(rng: random.Random, gender: Gender) -> str:
    """Full name drawn from the lists that match ``gender``."""
    gender = Gender(gender)
    if gender == Gender.GIRL:
        return generate_random_white_female_name(rng)
    if gender == Gender.BOY:
        return generate_random_white_male_name(rng)
    return generate_random_white_non_binary_name(rng)