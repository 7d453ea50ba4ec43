SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

SESSION_LIFETIME_HOURS = 8
GEOFENCE_RADIUS_METERS = 30000

DEFAULT_ENGAGEMENT_TARGET = 50
DEFAULT_CONVERSATION_TARGET = 30

AUTO_SEED_DB = False
SEED_RANDOM_SEED = 7
