# ABOUTME: Environment-driven settings for forecast aggregation.
# ABOUTME: Loads a .env file if present and exposes module-level defaults.

import os

from dotenv import load_dotenv

load_dotenv()

# Substring of dt_txt that marks the last 3-hour slot of a calendar day
DAY_END_MARKER = os.environ.get("FORECAST_DAY_END_MARKER", "21:00:00")
