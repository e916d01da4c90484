# coding: UTF-8

from __future__ import annotations

import functools
import logging
import time
from typing import Dict, List, TYPE_CHECKING, Tuple, Union

from .folds import Examples, Fold, partition
from .. import Context
from ..exceptions import AbsoluteMeasureNotImplementedError, JobFailure
from ..results import ResultKey
from ..systems import FoldTask, LearningSystemDriver

if TYPE_CHECKING:
    from pathlib import Path

    from .runner import BenchmarkRunner
    from .scenario import Scenario
    from ..configs.containers import LearningSystemInfo

_Partition = Union[Tuple[Fold, ...], Exception]


class CrossValidationDispatcher:
    """
    scenario 하나를 fold 수 만큼 나누고, (learning system, fold) 마다 job 을 만들어
    :class:`~smlbench.benchmark.runner.BenchmarkRunner` 의 worker pool 에 넣는다.

    예제 파일은 언어별로 한번만 읽어서 fold 를 나누며, 같은 (seed, scenario, fold 수) 라면 언제나 같은 fold 가 만들어진다.
    예제 파일을 읽지 못한 경우에도 job 은 만들어지며, 그 job 들은 실패한 결과를 남긴다.
    """
    __slots__ = ('_runner', '_scenario')

    _runner: BenchmarkRunner
    _scenario: Scenario

    def __init__(self, runner: BenchmarkRunner, scenario: Scenario) -> None:
        if runner.folds <= 1:
            raise AbsoluteMeasureNotImplementedError('Absolute measure not yet implemented')

        self._runner = runner
        self._scenario = scenario

    async def _partition(self, language: str) -> _Partition:
        problem_dir = self._runner.layout.learning_problem_dir(self._scenario, language)

        try:
            examples = await Examples.load(problem_dir, language)
        except (OSError, ValueError) as e:
            logging.getLogger('smlbench').warning(f'Can not load examples of {self._scenario} for {language}: {e}')
            return e

        return partition(examples, self._runner.folds, self._runner.seed)

    async def dispatch(self) -> int:
        """
        모든 job 을 worker pool 에 넣는다. job 이 끝나기를 기다리지 않는다.

        :return: 넣은 job 의 수
        :rtype: int
        """
        runner = self._runner

        infos: List[Tuple[LearningSystemInfo, int]] = [
            (runner.registry.describe(system), runner.next_trial(system, self._scenario))
            for system in runner.desired_systems
        ]

        partitions: Dict[str, _Partition] = dict()
        for info, _ in infos:
            if info.language not in partitions:
                partitions[info.language] = await self._partition(info.language)

        submitted = 0

        for fold_idx in range(runner.folds):
            for info, trial in infos:
                key = ResultKey(info.name, str(self._scenario), fold_idx, trial)
                runner.pool.submit(functools.partial(self._run_job, key, info, partitions[info.language]))
                submitted += 1

        logging.getLogger('smlbench').debug(f'{submitted} jobs of {self._scenario} are submitted')

        return submitted

    def _job_dir(self, key: ResultKey) -> Path:
        return self._runner.workdir / key.system / self._scenario.task / self._scenario.problem / \
               f'trial-{key.trial}' / f'fold-{key.fold}'

    async def _run_job(self, key: ResultKey, info: LearningSystemInfo, folds: _Partition) -> None:
        logger = logging.getLogger(f'smlbench.{info.name}')
        results = self._runner.results
        start = time.monotonic()

        # noinspection PyBroadException
        try:
            if isinstance(folds, Exception):
                raise JobFailure(f'Can not load examples of {self._scenario} for {info.language}: {folds}')

            settings = dict(info.settings)
            settings.update(self._runner.config.system_settings(info.name))

            task = FoldTask(key, self._scenario, info.language, folds[key.fold],
                            self._runner.layout.learning_problem_dir(self._scenario, info.language),
                            self._job_dir(key), self._runner.seed, settings)

            context = Context()
            context._assign(task)
            context._assign(info)
            context._assign(logger, logging.Logger)

            logger.info(f'Starting {key}...')
            matrix = await LearningSystemDriver.gen_driver(info).evaluate(context)

        except JobFailure as e:
            logger.error(f'{key} has failed: {e}')
            results.fail(key, str(e), time.monotonic() - start)

        except Exception as e:
            logger.exception(f'{key} has failed with an unexpected error')
            results.fail(key, repr(e), time.monotonic() - start)

        else:
            logger.info(f'{key} is done. accuracy: {matrix.accuracy:.4f}')
            results.succeed(key, matrix.as_dict(), time.monotonic() - start)
