"""Beacon chain protocol parameters and the registry serving them."""
