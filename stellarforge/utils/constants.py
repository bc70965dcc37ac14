"""Generation constants for Stellar Forge."""

VERSION = "1.0.0"

# Default seeds
DEFAULT_GALAXY_SEED = 12345
NEBULA_SEED = 54321  # Fixed so nebulas stay put across galaxy reloads
WARP_SEED = 8675309

# Seed strides (each element draws from seed + index * stride + offset)
STAR_SEED_STRIDE = 1000
NEBULA_SEED_STRIDE = 1000
PLANET_SEED_STRIDE = 1000
SYSTEM_SEED_MULTIPLIER = 1_000_003  # Prime; galaxy seed spread before mixing in the star id
LANE_SEED_STRIDE = 1000

# Star field
STAR_MIN_DISTANCE = 150.0  # Keeps stars clear of the galactic origin
STAR_MAX_DISTANCE = 6000.0
GALAXY_RADIUS = STAR_MAX_DISTANCE
MAX_PLANET_HINT = 12  # Planet-count hint is drawn from [0, 12)

# Accepted bounds for star fields, including hand-edited lore stars.
# Luminosity (mass ** 3.5) and orbit layout stay finite and non-zero inside them.
STAR_MASS_RANGE = (0.01, 150.0)  # Solar masses
STAR_TEMPERATURE_RANGE = (500.0, 100_000.0)  # Kelvin

# Nebulas
NEBULA_GRID_CELL_SIZE = 1000.0
NEBULA_HOTSPOT_MIN_STARS = 8
NEBULA_MIN_HOTSPOTS = 10
NEBULA_HOTSPOT_FRACTION = 0.4
NEBULA_HOTSPOT_PROB = 0.7
NEBULA_HOTSPOT_OFFSET_RANGE = (200.0, 1000.0)
NEBULA_FIELD_DISTANCE_RANGE = (800.0, 9447.0)
NEBULA_EMISSION_PROB = 0.6

# Planetary systems
SOLAR_TEMPERATURE = 5778.0
EQUILIBRIUM_CONSTANT = 255.0
HZ_INNER_FLUX = 1.1
HZ_OUTER_FLUX = 0.53
FROST_LINE_FACTOR = 2.7
MAX_ORBIT_FACTOR = 40.0
ORBIT_SPACING_RANGE = (1.3, 2.0)
GAS_GIANT_MIN_ORBIT = 1.5  # AU; no gas giants closer than this
ORBIT_DISPLAY_SCALE = 10.0
PLANET_TEMPERATURE_DIVISOR = 16.0
MAX_INCLINATION = 0.1  # radians

# Asteroid belts
BELT_MIN_CLEARANCE = 0.1  # AU
BELT_GAP_RATIO = 1.6
BELT_MAX_SELECTED = 4
