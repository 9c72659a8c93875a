"""
Declarative deployment modules.

A module is a named build function. The build function declares contracts
with ``m.contract(name, args)`` and returns the ones it wants to expose.
Declared contracts are futures: passing one as a constructor argument of a
later contract wires in its address once it is deployed.
"""

import boa
from boa.contracts.vyper.vyper_contract import VyperContract
from typing import Any, Callable


class ContractFuture:
    """A contract declared in a module, not deployed yet."""

    def __init__(self, future_id: str, contract_name: str, args: tuple, value: int = 0):
        self.id = future_id
        self.contract_name = contract_name
        self.args = args
        self.value = value

    def __repr__(self):
        return f"ContractFuture({self.id!r})"


class ModuleBuilder:
    """Collects the futures a build function declares, in order."""

    def __init__(self, module_id: str, parameters: dict[str, Any] | None = None):
        self.module_id = module_id
        self.parameters = parameters or {}
        self.futures: list[ContractFuture] = []
        self.results: dict[str, ContractFuture] = {}

    def contract(self, contract_name: str, args=(), id: str | None = None, value: int = 0) -> ContractFuture:
        future_id = f"{self.module_id}#{id or contract_name}"
        if any(f.id == future_id for f in self.futures):
            raise ValueError(f"Duplicate future id {future_id}, pass an explicit id")
        future = ContractFuture(future_id, contract_name, tuple(args), value)
        self.futures.append(future)
        return future

    def get_parameter(self, name: str, default: Any = None) -> Any:
        return self.parameters.get(name, default)


class Module:
    def __init__(self, module_id: str, build: Callable[[ModuleBuilder], dict[str, ContractFuture]]):
        self.id = module_id
        self._build = build

    def __repr__(self):
        return f"Module({self.id!r})"

    def builder(self, parameters: dict[str, Any] | None = None) -> ModuleBuilder:
        m = ModuleBuilder(self.id, parameters)
        m.results = self._build(m)
        return m

    def build(self, parameters: dict[str, Any] | None = None) -> dict[str, ContractFuture]:
        """
        Run the build function without touching the chain.

        Returns:
            Dictionary of result key -> future
        """
        return self.builder(parameters).results

    def deploy(
        self,
        parameters: dict[str, Any] | None = None,
        sender: str | None = None,
        deployers: dict[str, Any] | None = None,
    ) -> dict[str, VyperContract]:
        """
        Deploy every contract the module declares, in declaration order.

        Args:
            parameters: Overrides for values read with ``m.get_parameter``
            sender: Deployer address, boa.env.eoa if not given
            deployers: Contract name -> VyperDeployer, the project's if not given

        Returns:
            Dictionary of result key -> deployed contract
        """
        if deployers is None:
            from kompound.deployers import DEPLOYERS
            deployers = DEPLOYERS

        m = self.builder(parameters)
        deployed: dict[str, VyperContract] = {}

        with boa.env.prank(sender or boa.env.eoa):
            for future in m.futures:
                args = [_resolve(arg, deployed) for arg in future.args]
                deployed[future.id] = deployers[future.contract_name].deploy(*args, value=future.value)

        return {key: deployed[future.id] for key, future in m.results.items()}


def _resolve(arg, deployed: dict[str, VyperContract]):
    if isinstance(arg, ContractFuture):
        if arg.id not in deployed:
            raise ValueError(f"{arg.id} is not declared before use in this module")
        return deployed[arg.id].address
    if isinstance(arg, (list, tuple)):
        return [_resolve(a, deployed) for a in arg]
    return arg
