"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SESSION_HOURS = 8
DEFAULT_GEOFENCE_RADIUS_METERS = 30_000
EARTH_RADIUS_KM = 6371.0

# Login status cut-offs (local wall clock).
EARLY_BEFORE_HOUR = 8
ONTIME_LAST_HOUR = 8
ONTIME_LAST_MINUTE = 30

DEFAULT_ENGAGEMENT_TARGET = 50
DEFAULT_CONVERSATION_TARGET = 30

# Reconciliation thresholds, in percent of opening stock still on hand.
STOCK_GOOD_PERCENT = 80
STOCK_LOW_PERCENT = 40
