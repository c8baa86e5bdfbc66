"""Reproducibility utilities: random generators for the random policies."""

import numpy as np


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Create the generator used by the random selection policies.

    ``None`` draws fresh OS entropy, so two unseeded schedulers sample
    independently.
    """
    return np.random.default_rng(seed)
