# santa_draw/config.py

# Resolver knobs
MAX_ATTEMPTS = 1000
MIN_PARTICIPANTS = 2

# Random seed for reproducible demo groups
DEFAULT_SEED = 42

# Random group generator defaults
NUM_PARTICIPANTS_DEFAULT = 8
NUM_PAIR_EXCLUSIONS_DEFAULT = 2
NUM_DIRECTED_EXCLUSIONS_DEFAULT = 2

# -----------------------------------------------------------
# CSV layout
# -----------------------------------------------------------

# participants.csv: one participant per row
PARTICIPANT_NAME_COLUMN = "name"

# exclusions.csv: from,to,kind   (kind is "pair" or "directed")
EXCLUSION_FROM_COLUMN = "from"
EXCLUSION_TO_COLUMN = "to"
EXCLUSION_KIND_COLUMN = "kind"
EXCLUSION_KIND_PAIR = "pair"
EXCLUSION_KIND_DIRECTED = "directed"

# assignment output
ASSIGNMENT_GIVER_COLUMN = "giver"
ASSIGNMENT_RECIPIENT_COLUMN = "recipient"

# Logging format used by the run_* entry points
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
