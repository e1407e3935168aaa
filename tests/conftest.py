"""Pytest configuration and shared fixtures."""

import os

import pytest
from hypothesis import Verbosity, settings

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

# Load profile from environment or default to "dev"
profile = os.environ.get("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(profile)


@pytest.fixture
def controller():
    """Provide a fresh CalculatorController in degree mode."""
    from decicalc import CalculatorController

    return CalculatorController()


@pytest.fixture
def press(controller):
    """Feed a sequence of keys to the controller and return its display."""

    def _press(*keys):
        for key in keys:
            controller.handle_event(key)
        return controller.current_display()

    return _press


@pytest.fixture
def sample_numbers():
    """Provide a set of interesting decimal literals."""
    return [
        "0",
        "1",
        "-1",
        "0.5",
        "-0.5",
        "100",
        "-100",
        "0.001",
        "123456789012345678901234567890",
        "-98765.4321",
        "0.1",
        "0.2",
    ]
