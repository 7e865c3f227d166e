# Court layout
RACK_COUNT = 5
BALLS_PER_RACK = 5
STARRY_RACKS = {2, 3}  # Racks followed by a bonus starry ball

# Point values
NORMAL_BALL_POINTS = 1
MONEY_BALL_POINTS = 2
STARRY_BALL_POINTS = 3

# Every rack's last ball counts as a money ball
MONEY_BALL_INDEX = BALLS_PER_RACK - 1

# Legal input ranges (inclusive)
MIN_PLAYERS = 2
MIN_RACK_CHOICE = 1
MAX_RACK_CHOICE = RACK_COUNT
MIN_SHOOTING_CAPABILITY = 1
MAX_SHOOTING_CAPABILITY = 99

# Percent scale used by the shot roll
PERCENT_SCALE = 100

# Play-again answers
PLAY_AGAIN_YES = 1
PLAY_AGAIN_NO = 0

# Console log level override
LOG_LEVEL_ENV_VAR = "SHOOTOUT_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

# Prompts
PLAYER_COUNT_PROMPT = "Enter the number of players: "
RACK_CHOICE_PROMPT = "Where do you want to put your money-ball rack? Enter 1-5: "
CAPABILITY_PROMPT = "Enter your shooting capability (1-99): "
PLAY_AGAIN_PROMPT = "Do you want to play again? (1-yes, 0-no): "

# Messages
INVALID_INPUT_MESSAGE = "Invalid input, try again."
INVALID_PLAY_AGAIN_MESSAGE = "Sorry, that's not a valid input."
TOO_FEW_PLAYERS_MESSAGE = "Number of players must be at least 2."
FAREWELL_MESSAGE = "Thanks for playing!"
