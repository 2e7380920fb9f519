from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Account:
    id: str
    balance: float
