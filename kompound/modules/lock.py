from kompound.modules.base import Module

JAN_1ST_2030 = 1893456000
ONE_GWEI = 10**9


def build(m):
    unlock_time = m.get_parameter("unlockTime", JAN_1ST_2030)
    locked_amount = m.get_parameter("lockedAmount", ONE_GWEI)

    lock = m.contract("Lock", [unlock_time], value=locked_amount)

    return {"lock": lock}


LockModule = Module("LockModule", build)
