# coding: UTF-8

"""
:mod:`launcher` -- 설정 파일로 벤치마크를 실행하는 커맨드 라인 도구
=====================================================================

::

    smlbench CONFIG [CONFIG ...] [-v] [-s]

설정 파일 경로에는 wildcard (`*`) 를 사용할 수 있으며, 주어진 순서대로 하나씩 실행한다.
실행 하나가 실패하면 나머지 설정은 실행하지 않는다.

.. module:: smlbench.launcher
    :synopsis: 커맨드 라인 도구
"""

import argparse
import asyncio
import glob
import logging
import signal
import sys
from itertools import chain
from pathlib import Path
from typing import Iterable, List, Optional

from coloredlogs import ColoredFormatter

from .benchmark import BenchmarkRunner
from .exceptions import AbsoluteMeasureNotImplementedError, BenchEnvironmentError, ConfigurationError, \
    FinalizationError

MIN_PYTHON = (3, 9)


def _init_logger(silent: bool, verbose: bool) -> None:
    logger = logging.getLogger('smlbench')
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    if not silent:
        stream_handler = logging.StreamHandler()
        formatter = ColoredFormatter('%(asctime)s.%(msecs)03d [%(levelname)-8s] %(name)-20s $ %(message)s')
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)


async def launch(config_path: Path) -> bool:
    """
    설정 파일 하나로 벤치마크를 한번 실행한다.

    :param config_path: 벤치마크 설정 파일 경로
    :type config_path: pathlib.Path
    :return: 실행이 끝까지 진행되었는지 여부. 일부 job 의 실패는 실행의 실패로 보지 않는다.
    :rtype: bool
    """
    logger = logging.getLogger('smlbench')
    logger.info(f'Launching {config_path}...')

    try:
        runner = BenchmarkRunner.from_file(config_path)
    except (ConfigurationError, BenchEnvironmentError) as e:
        logger.error(f'Can not launch {config_path}: {e}')
        return False

    task: asyncio.Task = asyncio.create_task(runner.run())

    def cancel_current_task() -> None:
        logger.warning('Stopping the current benchmark...')
        task.cancel()

    loop = asyncio.get_running_loop()
    loop.add_signal_handler(signal.SIGINT, cancel_current_task)
    loop.add_signal_handler(signal.SIGTERM, cancel_current_task)

    try:
        results = await task

    except (AbsoluteMeasureNotImplementedError, ConfigurationError, BenchEnvironmentError) as e:
        logger.error(f'{config_path}: {e}')
        return False

    except (FinalizationError, asyncio.CancelledError):
        logger.error(f'{config_path} is cancelled')
        return False

    finally:
        loop.remove_signal_handler(signal.SIGINT)
        loop.remove_signal_handler(signal.SIGTERM)

    for entry in results.failed():
        logger.warning(f'{entry.key} has failed: {entry.error}')

    return True


async def launch_all(config_paths: Iterable[Path]) -> bool:
    for config_path in config_paths:
        if not await launch(config_path):
            return False

    return True


def main(argv: Optional[List[str]] = None) -> int:
    if sys.version_info < MIN_PYTHON:
        sys.exit('Python {}.{} or later is required.\n'.format(*MIN_PYTHON))

    parser = argparse.ArgumentParser(description='Launch benchmark written in config file.')
    parser.add_argument('config', metavar='CONFIG_FILE', type=str, nargs='+',
                        help='Path of benchmark config file. (support wildcard *)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Print more detail log')
    parser.add_argument('-s', '--silent', action='store_true', help='Do not print any log to stdout.')

    args = parser.parse_args(argv)

    _init_logger(args.silent, args.verbose)

    config_paths: List[Path] = [Path(p) for p in chain(*(sorted(glob.glob(path)) or [path] for path in args.config))]

    if asyncio.run(launch_all(config_paths)):
        return 0
    else:
        return 1
