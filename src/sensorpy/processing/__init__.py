"""This is the processing submodule.

This module contains the functionality that turns raw readings into display ready
values. This includes validation against physical bounds, deriving heading,
magnitude and signal metrics, and ordering WiFi scan results.
"""
