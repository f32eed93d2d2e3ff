"""Tests for address helpers and pair keys."""

import pytest

from relayer.models.types import (
    ZERO_ADDRESS,
    is_valid_address,
    is_zero_address,
    normalize_address,
    pair_key,
    sort_tokens,
    validate_uint256,
)
from tests.helpers import DAI, USDC, USDT, WETH


class TestNormalizeAddress:
    def test_lowercases_and_prefixes(self):
        assert normalize_address("C02AAA39B223FE8D0A0E5C4F27EAD9083C756CC2") == WETH

    def test_validate_rejects_garbage(self):
        with pytest.raises(ValueError):
            normalize_address("0x1234", validate=True)

    def test_is_valid_address(self):
        assert is_valid_address(WETH)
        assert not is_valid_address("0x1234")
        assert not is_valid_address("c02aaa39b223fe8d0a0e5c4f27ead9083c756cc2")


class TestZeroAddress:
    @pytest.mark.parametrize("value", [None, "", ZERO_ADDRESS, "0x" + "0" * 40])
    def test_null_tokens(self, value):
        assert is_zero_address(value)

    def test_real_token_is_not_zero(self):
        assert not is_zero_address(DAI)


class TestPairKey:
    @pytest.mark.parametrize(
        "token_a,token_b",
        [(DAI, USDC), (USDC, WETH), (WETH, DAI), (USDT, WETH), (DAI, DAI)],
    )
    def test_order_independent(self, token_a, token_b):
        assert pair_key(token_a, token_b) == pair_key(token_b, token_a)

    def test_case_insensitive(self):
        assert pair_key(WETH.upper().replace("0X", "0x"), DAI) == pair_key(WETH, DAI)

    def test_is_packed_sorted_pair(self):
        """Key is the 40-byte concatenation of the sorted addresses."""
        key = pair_key(WETH, DAI)
        assert len(key) == 40
        assert key == bytes.fromhex(DAI[2:]) + bytes.fromhex(WETH[2:])

    def test_distinct_pairs_have_distinct_keys(self):
        assert pair_key(DAI, USDC) != pair_key(DAI, WETH)

    def test_invalid_address_rejected(self):
        with pytest.raises(ValueError):
            pair_key("0x1234", DAI)

    def test_sort_tokens(self):
        assert sort_tokens(WETH, DAI) == (DAI, WETH)
        assert sort_tokens(DAI, WETH) == (DAI, WETH)


class TestUint256:
    def test_accepts_int_and_string(self):
        assert validate_uint256(90) == "90"
        assert validate_uint256("90") == "90"

    @pytest.mark.parametrize("value", [-1, "-1", 2**256, "abc", 1.5])
    def test_rejects_out_of_range(self, value):
        with pytest.raises(ValueError):
            validate_uint256(value)
