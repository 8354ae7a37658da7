"""
King of Tokyo Turn-Resolution Engine
Core rules only: dice, player registry, Tokyo contention, victory. No console I/O.
"""

DICE_PER_ROLL = 6

# Numeric faces score their own value when at least this many of them are rolled.
NUMBER_MATCH_THRESHOLD = 3
