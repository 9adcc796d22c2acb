"""Shared constants for the soil moisture simulator."""

# Moisture model (percent)
THRESHOLD = 30.0           # Water when moisture drops below this
INITIAL_MOISTURE = 50.0
WATERING_BOOST = 15.0      # Added by a single watering pass, no upper clamp
OPTIMAL_MARGIN = 10.0      # Idle once moisture >= THRESHOLD + OPTIMAL_MARGIN

# Tick cadence
TICK_INTERVAL = 1.0        # Seconds slept inside each transition
DROP_MIN = 0.5             # Per-tick moisture drop range [DROP_MIN, DROP_MAX)
DROP_MAX = 2.0

# Keys
QUIT_KEY = "q"
ERROR_KEY = "e"

# Panel titles
APP_TITLE = "Agri-IoT Simulator"
FLOWER_TITLE = "Neon Flower"
