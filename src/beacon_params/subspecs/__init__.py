"""Parameter profiles, slot timing and metrics for a beacon node."""
