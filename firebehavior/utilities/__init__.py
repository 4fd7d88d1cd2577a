"""Shared utilities for the firebehavior package.

This package provides common utilities used across the models, including
data structures, unit conversions, and numeric helpers.

Modules:
    - fire_util: Time-lag classes, input checks and reporting precision.
    - unit_conversions: Imperial-metric unit conversion functions.
    - data_classes: Dataclasses for model inputs and results.
"""
