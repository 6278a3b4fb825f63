"""Pytest fixtures and configuration."""
import json
import logging

import pytest

from riq.fuzzy import IntuitionisticFuzzyValue


@pytest.fixture(autouse=True)
def reset_riq_logger():
    """Drop handlers installed by setup_logging so each test starts clean."""
    yield
    logger = logging.getLogger("riq")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def sample_pair():
    """Two-element set with a worked-out expected result."""
    return [
        IntuitionisticFuzzyValue(name="A", mu=0.6, nu=0.3),
        IntuitionisticFuzzyValue(name="B", mu=0.2, nu=0.5),
    ]


@pytest.fixture
def sample_ifv_data():
    """Raw IFV records as they appear in an input file."""
    return {
        "ifvs": [
            {"name": "A", "mu": 0.6, "nu": 0.3},
            {"name": "B", "mu": 0.2, "nu": 0.5},
            {"name": "C", "mu": 0.7, "nu": 0.2},
        ]
    }


@pytest.fixture
def ifv_file(tmp_path, sample_ifv_data):
    """Write sample IFV records to a temporary JSON file."""
    path = tmp_path / "ifvs.json"
    path.write_text(json.dumps(sample_ifv_data), encoding="utf-8")
    return path
