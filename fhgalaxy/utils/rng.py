"""Seedable PRNG for deterministic galaxy generation."""

from typing import Optional

from .constants import HISTORICAL_DEFAULT_SEED

_MASK64 = 0xFFFF_FFFF_FFFF_FFFF


class PRNG:
    """Random number generator returning dice rolls between 1 and max, inclusive.

    Combines the congruential and shift-register methods ("Algorithm M").
    The whole state is a single unsigned 64-bit integer, and all arithmetic
    wraps around at 64 bits, so the output sequence for a given seed is the
    same on every platform and in every implementation of the algorithm.

    All randomness in galaxy generation goes through one instance of this
    class. Each generation run owns its own instance; never share one between
    concurrent runs.
    """

    def __init__(self, seed: int = HISTORICAL_DEFAULT_SEED):
        """Initialize RNG with given seed.

        Args:
            seed: Unsigned 64-bit seed. Zero selects the historical default seed.

        Raises:
            ValueError: If seed does not fit in 64 unsigned bits
        """
        if not (0 <= seed <= _MASK64):
            raise ValueError(f"Invalid seed: {seed} (must be 0-{_MASK64})")
        if seed == 0:
            seed = HISTORICAL_DEFAULT_SEED
        # None once resumed from a checkpoint; the originating seed is unknown
        self.seed: Optional[int] = seed
        self._state = seed

    @classmethod
    def from_state(cls, state: str) -> "PRNG":
        """Create an RNG resuming from a checkpoint made with get_state.

        The resumed RNG has no seed.
        """
        rng = cls()
        rng.set_state(state)
        rng.seed = None
        return rng

    def roll(self, max: int) -> int:
        """Roll a die with `max` sides.

        Args:
            max: Number of sides, at least 1

        Returns:
            Random integer between 1 and max, inclusive

        Raises:
            ValueError: If max is less than 1
        """
        if max < 1:
            raise ValueError(f"Invalid die size: {max} (must be >= 1)")

        s = self._state
        # congruential method: multiply by the prime 16417
        cong = (s + (s << 5) + (s << 14)) & _MASK64
        # shift-register method: shift right 15 and left 17 with no-carry addition
        shift = (s >> 15) ^ s
        shift = (shift ^ (shift << 17)) & _MASK64
        self._state = cong ^ shift

        # avoid returning the low-order bits
        return (((self._state & 0xFFFF) * max) >> 16) + 1

    def get_state(self) -> str:
        """Get the current state as a 16 digit hexadecimal string."""
        return f"{self._state:016x}"

    def set_state(self, state: str) -> None:
        """Restore a state produced by get_state.

        Args:
            state: Hexadecimal string of at most 16 digits

        Raises:
            ValueError: If the string is not a valid 64-bit hexadecimal value
        """
        value = int(state, 16)
        if not (0 <= value <= _MASK64):
            raise ValueError(f"Invalid PRNG state: {state!r} (must fit in 64 bits)")
        self._state = value

    def __repr__(self) -> str:
        return f"PRNG(state={self.get_state()})"
