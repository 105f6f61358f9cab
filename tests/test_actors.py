from fvmstate.actors import (
    AccountState,
    CronEntry,
    built_in_cron_entries,
    construct_cron_state,
)
from fvmstate.address import (
    STORAGE_MARKET_ACTOR_ADDR,
    STORAGE_POWER_ACTOR_ADDR,
    new_actor_address,
    new_id_address,
)
from fvmstate.methods import MarketMethod, PowerMethod


def test_built_in_entries_target_power_then_market():
    entries = built_in_cron_entries()
    assert [e.receiver for e in entries] == [
        STORAGE_POWER_ACTOR_ADDR,
        STORAGE_MARKET_ACTOR_ADDR,
    ]
    assert [e.method_num for e in entries] == [
        PowerMethod.CRON_TICK,
        MarketMethod.CRON_TICK,
    ]


def test_built_in_entries_use_id_addresses():
    entries = built_in_cron_entries()
    assert [e.receiver.id for e in entries] == [4, 5]


def test_built_in_entries_are_fresh_lists():
    first = built_in_cron_entries()
    first.clear()
    assert len(built_in_cron_entries()) == 2


def test_construct_cron_state_keeps_entries_in_order():
    entries = [
        CronEntry(new_id_address(101), 7),
        CronEntry(new_id_address(102), 3),
    ]
    state = construct_cron_state(iter(entries))
    assert state.entries == entries


def test_construct_cron_state_from_built_ins():
    state = construct_cron_state(built_in_cron_entries())
    assert state.entries == built_in_cron_entries()


def test_account_state_equality():
    addr = new_actor_address(b"actor1")
    assert AccountState(addr) == AccountState(new_actor_address(b"actor1"))
    assert AccountState(addr).address == addr