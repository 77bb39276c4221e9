# Board and fleet constants (reference layout)
BOARD_SIZE = 10

REFERENCE_FLEET = (4, 3, 3, 2, 2, 2, 1, 1, 1, 1)

# Render alphabet, one symbol per cell state
EMPTY_SYMBOL = "."
BLOCKED_SYMBOL = "o"
OCCUPIED_SYMBOL = "X"

# Exclusion zone: the cell itself plus its 8 Moore neighbours.
NEIGHBORHOOD = (
    (0, 0),
    (0, 1),
    (0, -1),
    (-1, 0),
    (1, 0),
    (-1, 1),
    (1, -1),
    (-1, -1),
    (1, 1),
)

# Whole-board retries before giving up in generate_with_retries.
DEFAULT_MAX_ATTEMPTS = 100

STRATEGY_COIN_FLIP = "coin_flip"
STRATEGY_UNIFORM = "uniform"
DEFAULT_STRATEGY = STRATEGY_COIN_FLIP
