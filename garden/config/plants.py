"""Plant growth, damage and reward constants."""

# Growth
BASE_GROWTH_INCREMENT = 10.0  # Percentage points per tick at growth rate 1.0
MAX_PROGRESS = 100.0
MAX_HEALTH = 100.0

# Water
DEFAULT_WATER_NEED = 20
SEVERE_DROUGHT_RATIO = 0.5  # Below this water ratio the plant loses health
DROUGHT_HEALTH_PENALTY = 5.0  # Scaled by (1 - ratio)

# Pests
DEFAULT_PEST_DAMAGE_CHANCE = 0.2
PEST_GROWTH_FACTOR = 0.5
PEST_HEALTH_DAMAGE = 10.0

# Weather
WEATHER_DROUGHT = "drought"
WEATHER_STORM = "storm"
DEFAULT_WEATHER_DAMAGE_CHANCE = 0.2
DEFAULT_DROUGHT_RESISTANCE = 0.5
DROUGHT_GROWTH_FACTOR = 0.3
DROUGHT_HEALTH_DAMAGE = 15.0
STORM_HEALTH_DAMAGE = 20.0
STORM_MAX_SIZE = 5  # Size level at which storm vulnerability is 1.0

# Display defaults
DEFAULT_SIZE = 3
DEFAULT_GROWTH_DAYS = 10
DEFAULT_LEAF_SHAPE = "oval"
DEFAULT_FLOWER_COLOR = "#FFFFFF"

# Rewards
BASE_COINS = 10
DEFAULT_COIN_MULTIPLIER = 1.0
DEFAULT_SEED_CHANCE = 0.5

SEEDLING_EMOJI = "\U0001F331"
FLOWER_EMOJI = {
    "red": "\U0001F339",
    "blue": "\U0001F338",
    "yellow": "\U0001F33B",
    "white": "\U0001F33C",
    "pink": "\U0001F337",
    "purple": "\U0001F490",
    "orange": "\U0001F33A",
    "green": "\U0001F33F",
    "light red": "\U0001F339",
    "light blue": "\U0001F338",
    "light yellow": "\U0001F33C",
    "deep pink": "\U0001F337",
    "peach": "\U0001F33A",
}
