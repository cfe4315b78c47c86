"""Planet data model."""

from dataclasses import dataclass, field
from enum import IntEnum

from ..utils.constants import (
    GAS_GIANT_DIAMETER,
    MAX_ATMOSPHERE_GASES,
    MAX_PLANETS_PER_STAR,
    MAX_PRESSURE_CLASS,
    MAX_TEMPERATURE_CLASS,
    MIN_PRESSURE_CLASS,
    MIN_TEMPERATURE_CLASS,
)


class Gas(IntEnum):
    """Gases in planetary atmospheres, in the order of the gas table."""

    NONE = 0
    H2 = 1  # Hydrogen
    CH4 = 2  # Methane
    HE = 3  # Helium
    NH3 = 4  # Ammonia
    N2 = 5  # Nitrogen
    CO2 = 6  # Carbon Dioxide
    O2 = 7  # Oxygen
    HCL = 8  # Hydrogen Chloride
    CL2 = 9  # Chlorine
    F2 = 10  # Fluorine
    H2O = 11  # Steam
    SO2 = 12  # Sulfur Dioxide
    H2S = 13  # Hydrogen Sulfide

    @property
    def symbol(self) -> str:
        return _GAS_SYMBOLS[self]


_GAS_SYMBOLS = {
    Gas.NONE: "",
    Gas.H2: "H2",
    Gas.CH4: "CH4",
    Gas.HE: "He",
    Gas.NH3: "NH3",
    Gas.N2: "N2",
    Gas.CO2: "CO2",
    Gas.O2: "O2",
    Gas.HCL: "HCl",
    Gas.CL2: "Cl2",
    Gas.F2: "F2",
    Gas.H2O: "H2O",
    Gas.SO2: "SO2",
    Gas.H2S: "H2S",
}

# Gas table, coldest first. Atmospheres draw from a window of this table.
GAS_TABLE: tuple[Gas, ...] = tuple(g for g in Gas if g is not Gas.NONE)


class PlanetSpecial(IntEnum):
    """Special classification of a planet."""

    NOT_SPECIAL = 0
    IDEAL_HOME_PLANET = 1
    IDEAL_COLONY_PLANET = 2
    RADIOACTIVE_HELLHOLE = 3


@dataclass(frozen=True)
class Planet:
    """Represents a planet orbiting a star.

    Physical values are scaled so that integer arithmetic can be used:
    diameter is in thousands of kilometers, density and mining difficulty are
    times 100, and gravity is a multiple of Earth gravity times 100.
    """

    id: int  # 1-based, unique across the galaxy
    star_id: int  # Star this planet orbits
    orbit: int  # 1 is the innermost orbit
    diameter: int
    density: int
    gravity: int
    temperature_class: int  # 1-30
    pressure_class: int  # 0-29
    mining_difficulty: int
    atmosphere: tuple[tuple[Gas, int], ...] = field(default_factory=tuple)  # (gas, percent)
    special: PlanetSpecial = PlanetSpecial.NOT_SPECIAL

    def __post_init__(self):
        """Validate planet data after initialization."""
        if not (1 <= self.orbit <= MAX_PLANETS_PER_STAR):
            raise ValueError(f"Invalid orbit: {self.orbit} (must be 1-{MAX_PLANETS_PER_STAR})")
        if not (MIN_TEMPERATURE_CLASS <= self.temperature_class <= MAX_TEMPERATURE_CLASS):
            raise ValueError(
                f"Invalid temperature_class: {self.temperature_class} "
                f"(must be {MIN_TEMPERATURE_CLASS}-{MAX_TEMPERATURE_CLASS})"
            )
        if not (MIN_PRESSURE_CLASS <= self.pressure_class <= MAX_PRESSURE_CLASS):
            raise ValueError(
                f"Invalid pressure_class: {self.pressure_class} "
                f"(must be {MIN_PRESSURE_CLASS}-{MAX_PRESSURE_CLASS})"
            )
        if len(self.atmosphere) > MAX_ATMOSPHERE_GASES:
            raise ValueError(
                f"Invalid atmosphere: {len(self.atmosphere)} gases "
                f"(must be at most {MAX_ATMOSPHERE_GASES})"
            )
        if self.pressure_class == 0:
            if self.atmosphere:
                raise ValueError("Invalid atmosphere: a planet with pressure class 0 has no gases")
        elif sum(percent for _, percent in self.atmosphere) != 100:
            raise ValueError(
                f"Invalid atmosphere: percentages sum to "
                f"{sum(percent for _, percent in self.atmosphere)} (must be 100)"
            )

    @property
    def gas_giant(self) -> bool:
        return self.diameter > GAS_GIANT_DIAMETER

    @property
    def gases(self) -> tuple[Gas, ...]:
        """Gases present in the atmosphere, in slot order."""
        return tuple(gas for gas, _ in self.atmosphere)

    def gas_percent(self, gas: Gas) -> int:
        """Percentage of `gas` in the atmosphere, 0 if absent."""
        for g, percent in self.atmosphere:
            if g is gas:
                return percent
        return 0
