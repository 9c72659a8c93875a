from kompound.modules.base import ContractFuture, Module, ModuleBuilder
from kompound.modules.lock import LockModule
from kompound.modules.local import KompoundModule
from kompound.modules.mainnet import MainnetKompoundModule

MODULES = [LockModule, KompoundModule, MainnetKompoundModule]


def get_module(module_id):
    for module in MODULES:
        if module.id == module_id:
            return module
    raise KeyError(f"Unknown module: {module_id}")
