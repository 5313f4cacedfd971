"""Constants used throughout the application."""

# Risk categories in the order they are charted
RISK_CATEGORIES = ("market", "financial", "operational", "competitive")
RISK_SCORE_MIN = 1
RISK_SCORE_MAX = 10

# Success rate is a percentage
SUCCESS_RATE_MIN = 0
SUCCESS_RATE_MAX = 100

# Risk level thresholds used by the presentation layer
HIGH_RISK_THRESHOLD = 7
MEDIUM_RISK_THRESHOLD = 4

# Generation settings
JSON_MIME_TYPE = "application/json"
DEFAULT_IMAGE_MIME_TYPE = "image/png"
DEFAULT_ASPECT_RATIO = "16:9"
