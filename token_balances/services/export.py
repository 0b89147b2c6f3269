# services/export.py
import json
from pathlib import Path

import pandas as pd

from token_balances.ports import BalancesByContract

COLUMNS = ["contract", "symbol", "name", "decimals", "balanceOf"]


def balances_to_rows(balances: BalancesByContract) -> list[dict]:
    return [{"contract": addr, **info} for addr, info in balances.items()]


def write_json(balances: BalancesByContract, path: Path) -> Path:
    path.write_text(json.dumps(balances, ensure_ascii=False, indent=2), encoding="utf-8")
    return path


def write_csv(balances: BalancesByContract, path: Path) -> Path:
    df = pd.DataFrame(balances_to_rows(balances), columns=COLUMNS)
    if not df.empty:
        # balanceOf stays a string; sort on its numeric value
        df = df.sort_values("balanceOf", key=lambda s: s.map(float), ascending=False)
    df.to_csv(path, index=False)
    return path
