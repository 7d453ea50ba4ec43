import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

SESSION_LIFETIME_HOURS = float(os.getenv("SESSION_LIFETIME_HOURS", "8"))
GEOFENCE_RADIUS_METERS = float(os.getenv("GEOFENCE_RADIUS_METERS", "30000"))

DEFAULT_ENGAGEMENT_TARGET = int(os.getenv("DEFAULT_ENGAGEMENT_TARGET", "50"))
DEFAULT_CONVERSATION_TARGET = int(os.getenv("DEFAULT_CONVERSATION_TARGET", "30"))

AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
SEED_RANDOM_SEED = None

SESSION_COOKIE_SECURE = True
