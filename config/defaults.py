"""Default configuration constants for the Fire Safety Inspector Toolkit."""

import os

# Building geometry
STORY_HEIGHT_M = 3  # Assumed height of every story when estimating building height

# Fire pump sizing
PSI_PER_METER = 1.42          # 0.433 PSI per foot of elevation
BASE_HEAD_PRESSURE_PSI = 65   # Residual pressure required at the topmost outlet
PUMP_EFFICIENCY = 0.65
HP_CONVERSION_FACTOR = 1714   # GPM x PSI per horsepower
PUMP_SAFETY_FACTOR = 1.2      # Applied to calculated HP for the recommended size
PUMP_BASE_FLOW_GPM = 500
PUMP_MID_FLOW_GPM = 750       # Buildings taller than PUMP_MID_HEIGHT_M
PUMP_HIGH_FLOW_GPM = 1000     # Buildings taller than PUMP_HIGH_HEIGHT_M
PUMP_MID_HEIGHT_M = 30
PUMP_HIGH_HEIGHT_M = 60
PUMP_LARGE_LOAD_THRESHOLD = 1000
PUMP_LARGE_LOAD_EXTRA_GPM = 250
GPM_TO_LPM = 3.785

# Portable extinguishers
EXTINGUISHER_COVERAGE_M2 = 278  # One unit per 278 sq m (3,000 sq ft) or fraction thereof

# Fire flow
SQFT_PER_SQM = 10.764
FIRE_FLOW_EXPOSURE_FACTOR = 0.075   # Added per exposed side
FIRE_FLOW_SPRINKLER_REDUCTION = 0.5
FIRE_FLOW_ROUNDING_GPM = 250
FIRE_FLOW_MINIMUM_GPM = 500
FIRE_FLOW_HAZARD_FACTORS = {"light": 0.75, "moderate": 1.0, "high": 1.25}

# Fire load density bands (MJ/m2)
FIRE_LOAD_LIGHT_MAX = 600
FIRE_LOAD_ORDINARY_1_MAX = 1200
FIRE_LOAD_ORDINARY_2_MAX = 2400

# Informational risk level thresholds
RISK_HIGH_STORIES = 7
RISK_HIGH_AREA_M2 = 10000
RISK_HIGH_ASSEMBLY_LOAD = 1000
RISK_MODERATE_STORIES = 4
RISK_MODERATE_AREA_M2 = 5000
RISK_MODERATE_LOAD = 500

# Suggestion log
SUGGESTION_TYPES = ["fix", "feature", "invalid", "other"]
SUGGESTION_TYPE_LABELS = {
    "fix": "Fix a mistake",
    "feature": "Suggest a feature",
    "invalid": "Report invalid information",
    "other": "Other",
}
SUGGESTION_LOG_PATH = os.environ.get(
    "FIRE_INSPECTOR_SUGGESTION_LOG",
    os.path.join(os.path.expanduser("~"), ".fire_inspector", "suggestion_logs.json"),
)

# Admin access
ADMIN_PASSWORD = os.environ.get("FIRE_INSPECTOR_ADMIN_PASSWORD", "admin123")

# Default occupancy on first load
DEFAULT_OCCUPANCY_ID = "business"
