import pytest

from idif_auc.models.curve import Curve


@pytest.fixture
def triangle():
    """Real = [(0,0),(5,10),(10,0)]; AUC 50."""
    return Curve.from_pairs([(0, 0), (5, 10), (10, 0)], label="Real")


@pytest.fixture
def ramp():
    return Curve.from_pairs([(0, 0), (10, 10)])


@pytest.fixture
def real_curve():
    return Curve.from_pairs(
        [(0, 0), (1, 40), (2, 80), (5, 50), (10, 30), (15, 20), (20, 15)],
        label="Real",
    )


@pytest.fixture
def combined_curve():
    return Curve.from_pairs(
        [(0, 0), (1.5, 60), (3, 70), (6, 45), (12, 25), (18, 18)],
        label="Combined",
    )
