"""
Pytest configuration and fixtures for densitybox testing.
"""
import matplotlib

matplotlib.use("Agg")  # Use non-interactive backend for testing

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import pytest


@pytest.fixture(autouse=True)
def close_figures():
    """Close every figure a test created."""
    yield
    plt.close("all")


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture
def known_sample():
    """Sample with known quartiles (3.25, 7.75) and a single outlier."""
    return np.array([1, 2, 3, 4, 5, 6, 7, 8, 9, 100], dtype=float)


@pytest.fixture
def lognormal_series(rng):
    return pd.Series(rng.lognormal(mean=0.0, sigma=0.75, size=1000), name="income")


@pytest.fixture
def normal_series(rng):
    return pd.Series(rng.normal(loc=10.0, scale=2.0, size=2000), name="height")


@pytest.fixture
def csv_file(tmp_path, rng):
    """CSV with a value column (with gaps), a weight column and a text column."""
    values = rng.normal(loc=5.0, scale=1.0, size=200)
    values[[3, 17]] = np.nan
    df = pd.DataFrame(
        {
            "value": values,
            "weight": rng.uniform(0.5, 2.0, size=200),
            "label": ["a", "b"] * 100,
        }
    )
    path = tmp_path / "data.csv"
    df.to_csv(path, index=False)
    return path
