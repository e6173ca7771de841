"""Test suite for tweenr.

Unit tests live under ``tests/unit`` grouped by package: curves, animation,
config, utils and cli.
"""
