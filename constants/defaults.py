# Pit
PIT_HEIGHT = 20
PIT_WIDTH = 20

# Snake
SNAKE_LENGTH = 3
SNAKE_ORIGIN = (2, 2)

# Loop
TICK_SECONDS = 1.0
CELL_SIZE = 20

# Colors
BACKGROUND_COLOR = (255, 255, 255)
WALL_COLOR = (90, 90, 90)
SNAKE_COLOR = (0, 255, 0)
SNAKE_HEAD_COLOR = (0, 150, 0)
FOOD_COLOR = (255, 0, 0)
