"""Tests for pairswap/integration/config.py."""

from __future__ import annotations

from decimal import Decimal

import pytest

from pairswap import PoolConfig, SwapPair, load_pool_config, pool_config_from_mapping
from pairswap.kernels.python.fixed_point import ONE


class TestPoolConfig:
    def test_defaults(self) -> None:
        cfg = PoolConfig()
        assert cfg.fee_percentage == 300_000
        assert cfg.bootstrap_shares == ONE
        assert cfg.start_frozen is True
        assert cfg.check_invariants is True

    def test_symbols_must_be_distinct(self) -> None:
        with pytest.raises(ValueError, match="distinct"):
            PoolConfig(token1_symbol="A", token2_symbol="A")

    def test_amounts_must_be_raw_ints(self) -> None:
        with pytest.raises(TypeError):
            PoolConfig(fee_percentage=0.003)  # type: ignore[arg-type]

    def test_bootstrap_shares_positive(self) -> None:
        with pytest.raises(ValueError):
            PoolConfig(bootstrap_shares=0)


class TestFromMapping:
    def test_decimal_fields(self) -> None:
        cfg = pool_config_from_mapping({"fee_percentage": "0.0025", "bootstrap_shares": Decimal("2")})
        assert cfg.fee_percentage == 250_000
        assert cfg.bootstrap_shares == 2 * ONE

    def test_float_goes_through_repr(self) -> None:
        assert pool_config_from_mapping({"fee_percentage": 0.003}).fee_percentage == 300_000

    def test_unknown_key(self) -> None:
        with pytest.raises(ValueError, match="unknown pool config keys: fee"):
            pool_config_from_mapping({"fee": "0.003"})

    def test_bad_amount(self) -> None:
        with pytest.raises(ValueError, match="invalid fee_percentage"):
            pool_config_from_mapping({"fee_percentage": "0.0000000001"})
        with pytest.raises(TypeError):
            pool_config_from_mapping({"fee_percentage": [1]})


class TestLoadYaml:
    def test_load(self, tmp_path) -> None:
        path = tmp_path / "pool.yaml"
        path.write_text(
            "token1_symbol: FUSD\n"
            "token2_symbol: tUSDT\n"
            "share_symbol: FUSD-tUSDT-LP\n"
            "fee_percentage: \"0.003\"\n"
            "start_frozen: false\n",
            encoding="utf-8",
        )
        cfg = load_pool_config(path)
        assert cfg.token1_symbol == "FUSD"
        assert cfg.start_frozen is False

        pair, _ = SwapPair.deploy(cfg)
        assert not pair.is_frozen
        assert pair.share_kind.symbol == "FUSD-tUSDT-LP"

    def test_empty_file(self, tmp_path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_pool_config(path) == PoolConfig()

    def test_not_a_mapping(self, tmp_path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n", encoding="utf-8")
        with pytest.raises(TypeError, match="mapping"):
            load_pool_config(path)
