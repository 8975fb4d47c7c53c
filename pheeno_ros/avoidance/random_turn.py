from typing import Optional

import numpy as np


class RandomTurn:
    """
    Picks a random turn direction for a given angular magnitude.

    A draw of 1-5 out of 1-10 flips the sign, 6-10 keeps it. The generator is
    seeded once at construction; pass a seed for reproducible runs.
    """
    LOW = 1
    HIGH = 10
    FLIP_AT_OR_BELOW = 5

    def __init__(self, seed: Optional[int] = None):
        self._rng = np.random.default_rng(seed)

    #--------------------------------------------------------------------------------
    def draw(self) -> int:
        return int(self._rng.integers(self.LOW, self.HIGH + 1))

    #--------------------------------------------------------------------------------
    def __call__(self, angular: float) -> float:
        return -1.0 * angular if self.draw() <= self.FLIP_AT_OR_BELOW else angular
