#!/usr/bin/env python3
"""
Offline walk-through of one swap pair: deploy, bootstrap, swap, add and
remove liquidity, printing the pool after each step.

    python tools/pair_offline_demo.py --swap-in 10
    python tools/pair_offline_demo.py --config pool.yaml -v
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pairswap import PoolConfig, RecordingEventSink, SwapPair, SwapPairError, format_amount, load_pool_config, to_amount


def _pool_line(pair: SwapPair) -> str:
    amounts = pair.get_pool_amounts()
    return (
        f"reserve1={format_amount(amounts.token1_amount)} "
        f"reserve2={format_amount(amounts.token2_amount)} "
        f"supply={format_amount(pair.total_supply)}"
    )


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Run a swap pair end to end without any host ledger.")
    p.add_argument("--config", type=Path, help="Pool config YAML (default: built-in defaults)")
    p.add_argument("--reserve1", default="100", help="Bootstrap token1 amount (default: 100)")
    p.add_argument("--reserve2", default="100", help="Bootstrap token2 amount (default: 100)")
    p.add_argument("--swap-in", default="10", help="token1 amount to swap for token2 (default: 10)")
    p.add_argument("--json", action="store_true", help="Print the final pool snapshot as JSON")
    p.add_argument("-v", "--verbose", action="store_true", help="Log at DEBUG instead of INFO")
    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    cfg = load_pool_config(args.config) if args.config else PoolConfig()
    sink = RecordingEventSink()
    pair, admin = SwapPair.deploy(cfg, sink=sink)
    print(f"[offline-demo] deployed {pair.token1_kind.symbol}/{pair.token2_kind.symbol} fee={format_amount(pair.get_fee_percentage())}")

    try:
        reserve1, reserve2, swap_in = to_amount(args.reserve1), to_amount(args.reserve2), to_amount(args.swap_in)
        shares = admin.add_initial_liquidity(
            pair.create_token_bundle(pair.token1_kind.mint(reserve1), pair.token2_kind.mint(reserve2))
        )
        admin.unfreeze()
        print(f"[offline-demo] after bootstrap: {_pool_line(pair)}")

        quote = pair.quote_swap_exact_token1_for_token2(swap_in)
        out = pair.swap_token1_for_token2(pair.token1_kind.mint(swap_in))
        print(f"[offline-demo] swap {format_amount(swap_in)} -> {format_amount(out.balance)} (fee-free quote {format_amount(quote)})")
        print(f"[offline-demo] after swap:      {_pool_line(pair)}")

        minted = pair.add_liquidity(
            pair.create_token_bundle(pair.token1_kind.mint(reserve1 // 10), pair.token2_kind.mint(reserve2 // 10))
        )
        print(f"[offline-demo] add liquidity minted {format_amount(minted.balance)} shares")
        back = pair.remove_liquidity(minted)
        print(
            f"[offline-demo] remove liquidity returned "
            f"({format_amount(back.token1_balance)}, {format_amount(back.token2_balance)})"
        )
        print(f"[offline-demo] final:           {_pool_line(pair)} bootstrap_shares={format_amount(shares.balance)}")
    except (SwapPairError, ValueError) as exc:
        print(f"[offline-demo] FAIL: {exc}")
        return 1

    print(f"[offline-demo] events: {', '.join(e.event.value for e in sink.effects)}")
    if args.json:
        print(json.dumps(pair.snapshot(), indent=2, sort_keys=True))
    print("[offline-demo] OK")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
