"""Configuration, validation and performance utilities for Smart FAQ Admin Workbench."""
