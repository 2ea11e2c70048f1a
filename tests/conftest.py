"""Shared fixtures: built-in suites, a tiny four-symbol machine, and a
clean Debug switch map for every test."""

import pytest

from config_reader import read_config
from debug import Debug
from suites import suite_config

SMALL_CONFIG = """\
ABCD
3 1
REF R (AB) (CD)
FIX N (ABC)
MOV MC (ABCD)
MOV2 M (AC)
"""


@pytest.fixture(autouse=True)
def _reset_debug():
    saved = Debug._components.copy()
    Debug._enabled = True
    for name in Debug._components:
        Debug._components[name] = False
    yield
    Debug._components.update(saved)
    Debug._enabled = True


@pytest.fixture
def m3():
    """Three-rotor army machine: reflector plus three moving wheels."""
    return read_config(suite_config("M3"))


@pytest.fixture
def m4():
    """Naval machine: thin reflector, Greek wheel, three moving wheels."""
    return read_config(suite_config("M4"))


@pytest.fixture
def small():
    return read_config(SMALL_CONFIG)
