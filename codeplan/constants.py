"""
Shared constants for Codeplan.
"""

# Prompt validation
MIN_PROMPT_LENGTH = 10
MAX_PROMPT_LENGTH = 1000
MAX_COMPLETION_SUGGESTIONS = 5

# Score bounds
SCORE_MIN = 1
SCORE_MAX = 10
DEFAULT_PRIORITY = 5
PRIORITY_STEP = 2

# Complexity weights
ENTITY_COMPLEXITY_WEIGHT = 0.5
KEYWORD_COMPLEXITY_WEIGHT = 2.0

# Work-unit estimate weights
BASE_WORK_UNITS = 500
WORK_UNITS_PER_ENTITY = 100
WORK_UNITS_PER_TECHNOLOGY = 200
WORK_UNITS_PER_INDICATOR = 150

# Structural keyword count at which docs/tests are always emitted
STRUCTURAL_THRESHOLD = 2

# Display
DISPLAY_TRUNCATE_SHORT = 60
DISPLAY_TRUNCATE_LONG = 200

# Config
CONFIG_FILE_NAME = "codeplan.yaml"
LOG_LEVEL_ENV = "CODEPLAN_LOG_LEVEL"
