"""Account number generation.

Layout (10 characters):
  - 1 char: fixed leading '1'
  - 9 chars: uniformly random digits, zero-padded (0 - 999,999,999)

Uniqueness is not guaranteed here; the service re-draws on collision.
"""

import random
import re

ACCOUNT_NUMBER_PATTERN = re.compile(r"^1\d{9}$")

_RANDOM_PART_UPPER = 1_000_000_000


def generate_account_number(rng: random.Random) -> str:
    return f"1{rng.randrange(_RANDOM_PART_UPPER):09d}"
