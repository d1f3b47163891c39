"""Pytest configuration and shared fixtures."""

import os

from hypothesis import settings

# Pin the process-wide profile before beacon_params.config is first imported.
os.environ["BEACON_ENV"] = "default"

# Create a profile named "no_deadline" with deadline disabled.
settings.register_profile("no_deadline", deadline=None)
settings.load_profile("no_deadline")
