import logging
import math

import pytest

import lumen
from lumen.config import DEFAULT_TOLERANCE, Tolerance, resolve_tolerance


def test_default_tolerance_values():
    assert DEFAULT_TOLERANCE.rtol == 1e-9
    assert DEFAULT_TOLERANCE.atol == 1e-12
    assert resolve_tolerance(None) is DEFAULT_TOLERANCE


def test_resolve_tolerance_passes_explicit_value():
    tol = Tolerance(rtol=0.0, atol=0.5)
    assert resolve_tolerance(tol) is tol


def test_tolerance_rejects_negative_or_non_finite():
    with pytest.raises(ValueError):
        Tolerance(rtol=-1.0)
    with pytest.raises(ValueError):
        Tolerance(atol=-1e-3)
    with pytest.raises(ValueError):
        Tolerance(rtol=math.inf)
    with pytest.raises(ValueError):
        Tolerance(atol=math.nan)


def test_tolerance_allclose():
    tol = Tolerance(rtol=0.0, atol=1e-3)
    assert tol.allclose([1.0, 2.0], [1.0005, 2.0])
    assert not tol.allclose([1.0, 2.0], [1.01, 2.0])
    assert not tol.allclose([1.0, 2.0], [1.0, 2.0, 3.0])
    assert not tol.allclose([math.nan], [math.nan])


def test_tolerance_dict_round_trip():
    tol = Tolerance(rtol=1e-6, atol=1e-8)
    assert Tolerance.from_dict(tol.to_dict()) == tol
    assert Tolerance.from_dict({}) == DEFAULT_TOLERANCE


def test_package_logger_has_null_handler():
    handlers = logging.getLogger("lumen").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)


def test_dimension_mismatch_is_logged_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="lumen"):
        with pytest.raises(lumen.DimensionMismatchError):
            lumen.VectorN(5, [1, 2, 3, 4])
    assert any("expected (5,)" in r.getMessage() for r in caplog.records)
