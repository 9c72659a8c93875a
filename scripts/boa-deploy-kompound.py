#!/usr/bin/env python3

import boa
import click
import json
import os
from getpass import getpass
from eth_account import account
from boa.network import NetworkEnv

from kompound.modules import MODULES, get_module
from kompound.settings import WEB3_PROVIDER_URL, DEPLOYER_ACCOUNT

DEPLOYER_FUNDS = 10**21


def account_load(fname):
    path = os.path.expanduser(os.path.join('~', '.brownie', 'accounts', fname + '.json'))
    with open(path, 'r') as f:
        pkey = account.decode_keyfile_json(json.load(f), getpass())
        return account.Account.from_key(pkey)


@click.command()
@click.argument('module_id', type=click.Choice([m.id for m in MODULES]))
@click.option('--fork', is_flag=True, help="Deploy into a fork of WEB3_PROVIDER_URL")
@click.option('--network', is_flag=True, help="Broadcast to WEB3_PROVIDER_URL")
@click.option('--parameters', type=click.Path(exists=True, dir_okay=False),
              help="JSON file with module parameters, keyed by module id")
def deploy(module_id, fork, network, parameters):
    """
    Deploy one of the registered modules
    """
    if fork and network:
        raise click.UsageError("--fork and --network are mutually exclusive")

    if network:
        boa.set_env(NetworkEnv(WEB3_PROVIDER_URL))
        boa.env.add_account(account_load(DEPLOYER_ACCOUNT))
        boa.env._fork_try_prefetch_state = False
    else:
        if fork:
            boa.fork(WEB3_PROVIDER_URL)
        # Simulated chain: fund the default account so payable deployments go through
        boa.env.set_balance(boa.env.eoa, DEPLOYER_FUNDS)

    module_parameters = {}
    if parameters:
        with open(parameters, 'r') as f:
            module_parameters = json.load(f).get(module_id, {})

    contracts = get_module(module_id).deploy(parameters=module_parameters)

    print(f'Deployed {module_id}:')
    print('==========================')
    for name, contract in contracts.items():
        print(f'{name}:', contract.address)
    print('==========================')


if __name__ == '__main__':
    deploy()
