# Dimensions
WIDTH, HEIGHT = 500, 630
PADDLE_WIDTH = 50
PADDLE_HEIGHT = 10
PADDLE_DIFF = 25                      # paddle edge offset for collision bands
BALL_RADIUS = 5

# Paddles start on the midline
PADDLE_START_X = (WIDTH - PADDLE_WIDTH) / 2

# Rows the paddles are drawn on
PLAYER_PADDLE_Y = HEIGHT - 20
COMPUTER_PADDLE_Y = 10

# Speeds
RESET_SPEED = 3                       # |vy| after every point
MAX_BALL_SPEED = 5
ESCALATED_AI_SPEED = 6
DEFLECTION_FACTOR = 0.3
AGENT_PADDLE_STEP = 10                # env action step (px per tick)

# Scoring
WINNING_SCORE = 7

# Hosts reporting a width up to this are "compact"
COMPACT_MAX_WIDTH = 600

# Colours (RGB tuples)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
GREY = (128, 128, 128)

# Reward shaping parameters
DENSE_ALIGNMENT_SCALE = 0.01
