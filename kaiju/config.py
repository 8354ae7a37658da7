"""
Single place for default game configuration.
GameConfig (kaiju.engine.state) reads these when a new game is created without overrides.
"""
# Health: every kaiju starts at STARTING_HEALTH and can never heal above MAX_HEALTH.
STARTING_HEALTH = 10
MAX_HEALTH = 12

# First living kaiju to reach MAX_SCORE wins.
MAX_SCORE = 20

# Player count is clamped into this range at setup.
MIN_PLAYERS = 2
MAX_PLAYERS = 6

# Score awarded for starting a turn in Tokyo, and for entering it.
ZONE_HOLD_REWARD = 2
ZONE_ENTRY_REWARD = 1

# Headless/console loop stops after this many turns without a winner.
TURN_LIMIT = 1000
