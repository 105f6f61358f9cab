"""Method numbers of the built-in actors."""

from __future__ import annotations

from enum import IntEnum

from .abi import MethodNum

METHOD_SEND = MethodNum(0)
METHOD_CONSTRUCTOR = MethodNum(1)


class AccountMethod(IntEnum):
    CONSTRUCTOR = METHOD_CONSTRUCTOR
    PUBKEY_ADDRESS = 2


class InitMethod(IntEnum):
    CONSTRUCTOR = METHOD_CONSTRUCTOR
    EXEC = 2


class CronMethod(IntEnum):
    CONSTRUCTOR = METHOD_CONSTRUCTOR
    EPOCH_TICK = 2


class RewardMethod(IntEnum):
    CONSTRUCTOR = METHOD_CONSTRUCTOR
    AWARD_BLOCK_REWARD = 2
    THIS_EPOCH_REWARD = 3
    UPDATE_NETWORK_KPI = 4


class MultisigMethod(IntEnum):
    CONSTRUCTOR = METHOD_CONSTRUCTOR
    PROPOSE = 2
    APPROVE = 3
    CANCEL = 4
    ADD_SIGNER = 5
    REMOVE_SIGNER = 6
    SWAP_SIGNER = 7
    CHANGE_NUM_APPROVALS_THRESHOLD = 8
    LOCK_BALANCE = 9


class PaychMethod(IntEnum):
    CONSTRUCTOR = METHOD_CONSTRUCTOR
    UPDATE_CHANNEL_STATE = 2
    SETTLE = 3
    COLLECT = 4


class MarketMethod(IntEnum):
    CONSTRUCTOR = METHOD_CONSTRUCTOR
    ADD_BALANCE = 2
    WITHDRAW_BALANCE = 3
    PUBLISH_STORAGE_DEALS = 4
    VERIFY_DEALS_FOR_ACTIVATION = 5
    ACTIVATE_DEALS = 6
    ON_MINER_SECTORS_TERMINATE = 7
    COMPUTE_DATA_COMMITMENT = 8
    CRON_TICK = 9


class PowerMethod(IntEnum):
    CONSTRUCTOR = METHOD_CONSTRUCTOR
    CREATE_MINER = 2
    UPDATE_CLAIMED_POWER = 3
    ENROLL_CRON_EVENT = 4
    CRON_TICK = 5
    UPDATE_PLEDGE_TOTAL = 6
    DEPRECATED1 = 7
    SUBMIT_POREP_FOR_BULK_VERIFY = 8
    CURRENT_TOTAL_POWER = 9


class MinerMethod(IntEnum):
    CONSTRUCTOR = METHOD_CONSTRUCTOR
    CONTROL_ADDRESSES = 2
    CHANGE_WORKER_ADDRESS = 3
    CHANGE_PEER_ID = 4
    SUBMIT_WINDOWED_POST = 5
    PRE_COMMIT_SECTOR = 6
    PROVE_COMMIT_SECTOR = 7
    EXTEND_SECTOR_EXPIRATION = 8
    TERMINATE_SECTORS = 9
    DECLARE_FAULTS = 10
    DECLARE_FAULTS_RECOVERED = 11
    ON_DEFERRED_CRON_EVENT = 12
    CHECK_SECTOR_PROVEN = 13
    APPLY_REWARDS = 14
    REPORT_CONSENSUS_FAULT = 15
    WITHDRAW_BALANCE = 16
    CONFIRM_SECTOR_PROOFS_VALID = 17
    CHANGE_MULTIADDRS = 18
    COMPACT_PARTITIONS = 19
    COMPACT_SECTOR_NUMBERS = 20
    CONFIRM_UPDATE_WORKER_KEY = 21
    REPAY_DEBT = 22
    CHANGE_OWNER_ADDRESS = 23
    DISPUTE_WINDOWED_POST = 24
    PRE_COMMIT_SECTOR_BATCH = 25
    PROVE_COMMIT_AGGREGATE = 26
    PROVE_REPLICA_UPDATES = 27


class VerifiedRegistryMethod(IntEnum):
    CONSTRUCTOR = METHOD_CONSTRUCTOR
    ADD_VERIFIER = 2
    REMOVE_VERIFIER = 3
    ADD_VERIFIED_CLIENT = 4
    USE_BYTES = 5
    RESTORE_BYTES = 6
    REMOVE_VERIFIED_CLIENT_DATA_CAP = 7