"""Tests for the data model."""

import numpy as np
import pytest
from bsgreeks import (
    BlackScholesModel, BlackScholesModelParams, BlackScholesModelResults,
    OptionType, CALL, PUT,
)


class TestOptionType:
    @pytest.mark.parametrize("text, expected", [
        ("call", CALL), ("C", CALL), (" Put ", PUT), ("p", PUT), (PUT, PUT),
    ])
    def test_parse(self, text, expected):
        assert OptionType.parse(text) is expected

    def test_parse_rejects_unknown(self):
        with pytest.raises(ValueError, match="call' or 'put"):
            OptionType.parse("straddle")

    def test_two_variants(self):
        assert [k.value for k in OptionType] == ["call", "put"]


class TestParamsValidate:
    def test_valid_returns_self(self):
        p = BlackScholesModelParams(k=100.0, s=100.0, t=1.0, r=-0.01, v=0.2)
        assert p.validate() is p

    @pytest.mark.parametrize("field", ["k", "s", "t", "v"])
    def test_non_positive_rejected(self, field):
        values = dict(k=100.0, s=100.0, t=1.0, r=0.05, v=0.2)
        values[field] = 0.0
        with pytest.raises(ValueError, match=f"{field} must be positive"):
            BlackScholesModelParams(**values).validate()

    def test_array_fields(self):
        p = BlackScholesModelParams(k=np.array([90.0, -1.0]), s=100.0, t=1.0, r=0.05, v=0.2)
        with pytest.raises(ValueError):
            p.validate()


class TestResults:
    def test_as_dict_order_and_types(self):
        res = BlackScholesModel().calc(
            BlackScholesModelParams(k=100.0, s=100.0, t=1.0, r=0.05, v=0.2), CALL)
        d = res.as_dict()
        assert list(d) == ["price", "delta", "gamma", "theta", "vega", "rho"]
        assert all(type(v) is float for v in d.values())

    def test_frozen(self):
        res = BlackScholesModelResults(1.0, 0.5, 0.1, -1.0, 10.0, 5.0)
        with pytest.raises(AttributeError):
            res.price = 2.0
