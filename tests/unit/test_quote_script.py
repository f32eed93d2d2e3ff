"""Tests for the live quote script, with the RPC lookup swapped for a registry."""

import pytest

from relayer.errors import PairNotFound
from relayer.pools import PoolRegistry
from scripts import quote_pair as script
from tests.helpers import DAI, USDC, WETH


class ClosableRegistry(PoolRegistry):
    closed = False

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def registry(dai_usdc_pool, monkeypatch) -> ClosableRegistry:
    registry = ClosableRegistry([dai_usdc_pool])
    monkeypatch.setattr(script, "RpcPoolLookup", lambda *_args, **_kwargs: registry)
    return registry


class TestQuotePairScript:
    def test_quote(self, registry: ClosableRegistry):
        amount_out = script.quote_pair(
            "http://node.test", script.UNISWAP_V2_FACTORY, DAI, USDC, 100
        )
        assert amount_out == 181
        assert registry.closed

    def test_errors_propagate_and_lookup_closed(self, registry: ClosableRegistry):
        with pytest.raises(PairNotFound):
            script.quote_pair("http://node.test", script.UNISWAP_V2_FACTORY, DAI, WETH, 100)
        assert registry.closed

    def test_main_prints_quote(self, registry, monkeypatch, capsys):
        monkeypatch.setattr(
            "sys.argv",
            [
                "quote_pair",
                "--rpc-url",
                "http://node.test",
                "--amount-in",
                "100",
                "--token-in",
                DAI,
                "--token-out",
                USDC,
            ],
        )
        script.main()
        assert f"100 {DAI} -> 181 {USDC}" in capsys.readouterr().out

    def test_main_exits_on_failure(self, registry, monkeypatch):
        monkeypatch.setattr(
            "sys.argv",
            [
                "quote_pair",
                "--rpc-url",
                "http://node.test",
                "--amount-in",
                "100",
                "--token-in",
                DAI,
                "--token-out",
                WETH,
            ],
        )
        with pytest.raises(SystemExit):
            script.main()
