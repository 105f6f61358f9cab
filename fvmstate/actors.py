"""State of the account and cron actors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from .abi import MethodNum
from .address import STORAGE_MARKET_ACTOR_ADDR, STORAGE_POWER_ACTOR_ADDR, Address
from .methods import MarketMethod, PowerMethod


@dataclass(frozen=True)
class AccountState:
    address: Address


@dataclass(frozen=True)
class CronEntry:
    receiver: Address
    """The actor to call; must be an ID address."""
    method_num: MethodNum
    """The method to call; must accept empty parameters."""


@dataclass
class CronState:
    entries: list[CronEntry] = field(default_factory=list)


def construct_cron_state(entries: Iterable[CronEntry]) -> CronState:
    return CronState(entries=list(entries))


def built_in_cron_entries() -> list[CronEntry]:
    """The default entries installed in the cron actor's state at genesis."""
    return [
        CronEntry(STORAGE_POWER_ACTOR_ADDR, MethodNum(PowerMethod.CRON_TICK)),
        CronEntry(STORAGE_MARKET_ACTOR_ADDR, MethodNum(MarketMethod.CRON_TICK)),
    ]