"""Bindings of the serialize hook to third-party persistence frameworks."""
