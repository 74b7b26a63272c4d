"""
Single place for game constants.
Change these to tune the rules and timings shared by the engine and frontends.
"""

# Board shape. Row 0 is the front row.
ROWS = 3
COLUMNS = 9
MAX_TILE_VALUE = 9

# Penalty multiplier per row for tiles left open at game end.
ROW_WEIGHTS: dict[int, int] = {0: 3, 1: 2, 2: 1}

DIE_FACES = 6

# A single die may be rolled once rows 0 and 1 are shut and no open tile
# is above this value.
ONE_DIE_MAX_VALUE = 6

# Seconds between starting a roll and revealing the result.
ROLL_DELAY = 0.6

# Play statistics
STATS_FILENAME = "stats.json"
STATS_KEY = "triple-shut-the-box-stats"
SCORE_MILESTONES: tuple[int, ...] = (10, 25, 50)
