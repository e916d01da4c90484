# coding: UTF-8

from __future__ import annotations

import atexit
import logging
import shutil
import tempfile
import time
from collections import Counter
from pathlib import Path
from typing import ClassVar, List, Optional, TYPE_CHECKING, Tuple

from coloredlogs import ColoredFormatter
from ordered_set import OrderedSet

from .cross_validation import CrossValidationDispatcher
from .layout import RootLayout
from .pool import WorkerPool
from .registry import SystemRegistry
from .scenario import ScenarioResolver
from ..configs.parsers import BenchmarkParser
from ..exceptions import AbsoluteMeasureNotImplementedError, BenchEnvironmentError
from ..export import BaseExporter, JsonResultExporter, RunMetadata
from ..results import ResultAggregator
from ..systems import LearningSystemDriver

if TYPE_CHECKING:
    from .scenario import Scenario
    from ..configs.containers import BenchmarkConfig


class BenchmarkRunner:
    """
    설정 하나로 벤치마크 한번을 처음부터 끝까지 실행한다.

    생성될 때 벤치마크 루트 폴더를 찾고, 실행할 learning system 들의 정보를 미리 읽어두며,
    실행 중에 만들어지는 모든 파일이 들어갈 작업 폴더 (`sml-temp*`) 를 만든다.
    :meth:`run` 은 scenario 들을 해석하여 (learning system, scenario, fold) 마다 job 을 만들어 worker pool 에 넣고,
    모든 job 이 끝날 때 까지 기다린 뒤 결과를 내보낸다.

    실행 중에 생긴 로그는 화면뿐만 아니라 작업 폴더의 `logs/benchmark.log` 에도 남는다.

    .. note::

        * 한 learning system 이나 한 fold 의 실패는 해당 결과만 실패로 남기며, 실행 전체를 멈추지 않는다.
        * `crossValidationFolds` 가 1 이하인 경우 어떤 job 도 실행하지 않고
          :class:`~smlbench.exceptions.AbsoluteMeasureNotImplementedError` 를 던진다.
    """

    LOG_FILE: ClassVar[str] = 'benchmark.log'
    _FILE_FORMATTER: ClassVar[ColoredFormatter] = ColoredFormatter(
            '%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s (%(funcName)s:%(lineno)d in %(filename)s) $ %(message)s')

    _config: BenchmarkConfig
    _layout: RootLayout
    _registry: SystemRegistry
    _desired_languages: OrderedSet
    _workdir: Path
    _pool: WorkerPool
    _results: ResultAggregator
    _trials: Counter
    _metadata: RunMetadata
    _exporter: BaseExporter
    _log_handler: logging.Handler

    def __init__(self, config: BenchmarkConfig, current_dir: Optional[Path] = None) -> None:
        """
        :raises smlbench.exceptions.BenchEnvironmentError: 루트 폴더를 찾지 못했거나 작업 폴더를 만들 수 없을 경우
        :raises smlbench.exceptions.ConfigurationError: learning system 의 정보가 없거나 잘못된 경우

        :param config: 벤치마크 설정
        :type config: smlbench.configs.containers.bench.BenchmarkConfig
        :param current_dir: 작업 폴더를 만들 폴더. 주어지지 않으면 현재 폴더에 만든다.
        :type current_dir: typing.Optional[pathlib.Path]
        """
        logger = logging.getLogger('smlbench')

        self._config = config
        self._layout = RootLayout.locate(config.root_dir)

        logger.info(f'Benchmark root: {self._layout.root}')
        logger.debug(f'Available learning systems: {", ".join(self._layout.available_systems())}')

        self._registry = SystemRegistry(self._layout)
        for info in self._registry.warm_up(config.learning_systems):
            LearningSystemDriver.get_driver(info.driver)

        self._desired_languages = OrderedSet(self._registry.language_of(s) for s in config.learning_systems)
        logger.debug(f'Desired languages: {", ".join(self._desired_languages)}')

        self._workdir = self._init_workdir(current_dir)
        if config.delete_work_dir:
            atexit.register(self.clean_temp)

        self._pool = WorkerPool(config.threads_count)
        self._results = ResultAggregator()
        self._trials = Counter()
        self._exporter = JsonResultExporter()
        self._metadata = RunMetadata(config, self._layout.root, self._layout.learning_tasks_dir,
                                     self._layout.learning_systems_dir, self._workdir, time.time())

    @classmethod
    def from_file(cls, config_path: Path, current_dir: Optional[Path] = None) -> BenchmarkRunner:
        return cls(BenchmarkParser(config_path).parse(), current_dir)

    @classmethod
    def _init_workdir(cls, current_dir: Optional[Path]) -> Path:
        parent = Path.cwd() if current_dir is None else current_dir

        try:
            workdir = Path(tempfile.mkdtemp(prefix='sml-temp-', dir=str(parent)))
        except OSError as e:
            raise BenchEnvironmentError(f'Can not create a working directory in {parent}: {e}') from e

        logging.getLogger('smlbench').debug(f'Working directory: {workdir}')
        return workdir

    def _init_log_handler(self) -> logging.Handler:
        log_path = self._workdir / 'logs' / self.LOG_FILE
        log_path.parent.mkdir(parents=True, exist_ok=True)

        handler = logging.FileHandler(log_path, mode='w')
        handler.setFormatter(self._FILE_FORMATTER)
        handler.setLevel(logging.DEBUG)
        logging.getLogger('smlbench').addHandler(handler)

        return handler

    def _remove_log_handler(self) -> None:
        logger = logging.getLogger('smlbench')

        if self._log_handler in logger.handlers:
            logger.removeHandler(self._log_handler)
            self._log_handler.flush()
            self._log_handler.close()

    def next_trial(self, system: str, scenario: Scenario) -> int:
        """
        같은 learning system 과 scenario 의 조합이 설정에 여러번 나타날 때 각각을 구분하는 번호를 반환한다.
        처음 호출되면 0 이다.
        """
        trial_key = (system, str(scenario))
        trial = self._trials[trial_key]
        self._trials[trial_key] += 1
        return trial

    @property
    def resolver(self) -> ScenarioResolver:
        return ScenarioResolver(self._layout)

    async def run(self) -> ResultAggregator:
        """
        모든 scenario 를 실행하고 결과를 반환한다.
        설정에 `mex.outputFile` 이 있다면 결과를 그 경로에 내보낸다.

        :raises smlbench.exceptions.AbsoluteMeasureNotImplementedError: `crossValidationFolds` 가 1 이하인 경우
        :raises smlbench.exceptions.FinalizationError: job 들을 기다리는 도중 취소된 경우
        :return: 모든 job 의 결과
        :rtype: smlbench.results.ResultAggregator
        """
        logger = logging.getLogger('smlbench')

        self._log_handler = self._init_log_handler()

        try:
            if self.folds <= 1:
                raise AbsoluteMeasureNotImplementedError('Absolute measure not yet implemented')

            scenarios: List[Scenario] = self.resolver.resolve(self._config.scenarios, self._desired_languages)
            logger.info(f'{len(scenarios)} scenarios, {len(self._config.learning_systems)} learning systems, '
                        f'{self.folds} folds with seed {self.seed}')

            try:
                for scenario in scenarios:
                    logger.info(f'Dispatching {scenario}...')
                    await CrossValidationDispatcher(self, scenario).dispatch()
            except Exception:
                logger.exception('Dispatching has been stopped. waiting for the submitted jobs...')
                await self._pool.drain()
                raise

            await self._pool.drain()

            self._metadata.finished_at = time.time()
            failed = len(self._results.failed())
            logger.info(f'All jobs are done. ({len(self._results) - failed} succeeded, {failed} failed)')

            self._export()

        finally:
            self._remove_log_handler()

        return self._results

    def _export(self) -> Optional[Path]:
        output_file = self._config.mex_output_file
        if output_file is None:
            return None

        logger = logging.getLogger('smlbench')

        # noinspection PyBroadException
        try:
            path = self._exporter.write(self._results, self._metadata, output_file)
        except Exception:
            logger.exception(f'Failed to export results to {output_file}')
            return None

        logger.info(f'Results are exported to {path}')
        return path

    def clean_temp(self, force: bool = False) -> None:
        """
        작업 폴더를 지운다. `deleteWorkDir` 가 꺼져있다면 `force` 가 ``True`` 일 때만 지운다.
        지우지 못한 경우 로그만 남긴다.
        """
        if not (self._config.delete_work_dir or force) or not self._workdir.exists():
            return

        logger = logging.getLogger('smlbench')

        try:
            shutil.rmtree(self._workdir)
        except OSError as e:
            logger.warning(f'Can not delete {self._workdir}: {e}')
        else:
            logger.debug(f'{self._workdir} is deleted')

    @property
    def config(self) -> BenchmarkConfig:
        return self._config

    @property
    def layout(self) -> RootLayout:
        return self._layout

    @property
    def registry(self) -> SystemRegistry:
        return self._registry

    @property
    def pool(self) -> WorkerPool:
        return self._pool

    @property
    def results(self) -> ResultAggregator:
        return self._results

    @property
    def metadata(self) -> RunMetadata:
        return self._metadata

    @property
    def seed(self) -> int:
        return self._config.seed

    @property
    def folds(self) -> int:
        return self._config.cross_validation_folds

    @property
    def threads(self) -> int:
        return self._config.threads_count

    @property
    def workdir(self) -> Path:
        return self._workdir

    @property
    def desired_systems(self) -> Tuple[str, ...]:
        return self._config.learning_systems

    @property
    def desired_languages(self) -> OrderedSet:
        return self._desired_languages
