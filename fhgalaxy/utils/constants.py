"""Galaxy configuration constants.

Most of these values were tuned by hand when Far Horizons was designed. They are
part of the reproducibility contract: changing any of them changes the
generated universe for a given seed.
"""

# Galaxy bounds
MIN_RADIUS, MAX_RADIUS = 6, 50  # Parsecs
MIN_STARS, MAX_STARS = 12, 1_000
MIN_SPECIES, MAX_SPECIES = 1, 100

# A standard game
STANDARD_NUMBER_OF_SPECIES = 15
STANDARD_NUMBER_OF_STAR_SYSTEMS = 90
STANDARD_GALACTIC_RADIUS = 20

# Seeds
HISTORICAL_DEFAULT_SEED = 1924085713  # Used whenever a seed of 0 is given
MAX_SEED = 2**64 - 1

# Density band: cubic parsecs per star
MIN_CHANCE_OF_STAR = 50
MAX_CHANCE_OF_STAR = 3200

# Star systems
MAX_PLANETS_PER_STAR = 9
MAX_STAR_SIZE = 9

# Planets
GAS_GIANT_DIAMETER = 40  # Thousands of km; anything larger is a gas giant
MIN_DIAMETER = 3
MAX_ATMOSPHERE_GASES = 4
MIN_TEMPERATURE_CLASS, MAX_TEMPERATURE_CLASS = 1, 30
MIN_PRESSURE_CLASS, MAX_PRESSURE_CLASS = 0, 29
GAS_GIANT_TEMPERATURE_RANGE = (3, 7)
GAS_GIANT_PRESSURE_RANGE = (11, 29)
ROCKY_PRESSURE_RANGE = (0, 12)
SMALL_SYSTEM_INNER_TEMPERATURE = 12  # Floor for inner planets of systems with < 4 planets
ATMOSPHERE_TEMPERATURE_RANGE = (2, 27)  # Outside this range there is no atmosphere
MIN_ATMOSPHERE_GRAVITY = 10
EARTH_LIKE_MAX_TEMPERATURE = 11  # Coldest planet that may be made Earth-like

# Mining difficulty: (min, max, surprise die)
MINING_DIFFICULTY_NORMAL = (40, 500, 30)
MINING_DIFFICULTY_EASIER = (30, 1000, 20)
MINING_HARDENING = (11, 5)  # Multiplier applied after acceptance in normal mode

# Home system viability: exclusive bounds on the summed score
HOME_SYSTEM_SCORE_RANGE = (53, 57)
HOME_SYSTEM_SCORE_NUMERATOR = 20_000

# Loop caps
PLACEMENT_ATTEMPTS_PER_STAR = 100
MAX_NUDGES = 1_000  # Per push-back-into-range loop
MAX_MINING_ATTEMPTS = 10_000
