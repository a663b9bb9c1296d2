from __future__ import annotations

import importlib.util
from pathlib import Path
from typing import Any


def _load_demo() -> Any:
    path = Path(__file__).resolve().parents[1] / "tools" / "pair_offline_demo.py"
    spec = importlib.util.spec_from_file_location("pair_offline_demo", path)
    assert spec and spec.loader, f"could not load spec from {path}"
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_demo_runs_reference_scenario(capsys) -> None:
    demo = _load_demo()
    assert demo.main([]) == 0
    out = capsys.readouterr().out
    assert "swap 10.00000000 -> 9.06610893" in out
    assert "reserve1=110.00000000 reserve2=90.93389107" in out
    assert out.rstrip().endswith("[offline-demo] OK")


def test_demo_reports_failures(capsys) -> None:
    demo = _load_demo()
    assert demo.main(["--swap-in", "0.00000001"]) == 1
    assert "[offline-demo] FAIL" in capsys.readouterr().out
