import asyncio
import logging
import sys

import fire

from .envs import config
from .errors import CollectionFailure
from .fingerprint import default_fingerprinter
from .parameters import FINGERPRINT_PARAMETERS
from .xenv import load_env_file
from .xyaml import yaml_dump


def _setup(env_file=None):
    if env_file:
        load_env_file(env_file)
        config.reload()
    logging.basicConfig(level=config.LOG_LEVEL)


def _names(value):
    '''fire hands over "a,b" as a tuple but a single name as a plain str'''
    if value is None:
        return None
    if isinstance(value, str):
        return [v.strip() for v in value.split(',') if v.strip()]
    return [str(v) for v in value]


def _run(coro):
    try:
        return asyncio.run(coro)
    except CollectionFailure as e:
        print(f'error: {e}', file=sys.stderr)
        sys.exit(1)


def fingerprint(only=None, exclude=None, env_file=None):
    """
    Print the hex encoded fingerprint of this host.

    Args:
        only: comma separated parameter names to include, default all
        exclude: comma separated parameter names to leave out
        env_file: dotenv file loaded before reading configuration
    """
    _setup(env_file)
    digest = _run(default_fingerprinter().get_fingerprint(
        only=_names(only), exclude=_names(exclude)))
    print(digest.hex())


def info(env_file=None):
    '''Print the collected host attributes as yaml'''
    _setup(env_file)
    print(yaml_dump(_run(default_fingerprinter().get_fingerprinting_info())), end='')


def parameters():
    '''Print the parameter names in canonical order'''
    for name in FINGERPRINT_PARAMETERS:
        print(name)


def main():
    cmds = dict(fingerprint=fingerprint, info=info, parameters=parameters)
    fire.Fire(cmds)


if __name__ == '__main__':
    main()
