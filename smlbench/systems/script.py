# coding: UTF-8

from __future__ import annotations

import json
from subprocess import CalledProcessError
from typing import AbstractSet, Any, ClassVar, Dict, Mapping, TYPE_CHECKING, Tuple

import aiofiles

from .base import LearningSystemDriver
from .task import FoldTask
from ..exceptions import JobFailure
from ..utils import check_run

if TYPE_CHECKING:
    from pathlib import Path

    from .. import Context


class ScriptDriver(LearningSystemDriver):
    """
    learning system 폴더 안의 `run` 과 `validate` 실행파일로 learning system 을 실행하는 드라이버.

    1. train 예제와 실행 설정을 담은 `run.<format>` 을 만들고 ``run run.<format>`` 을 실행한다.
       learning system 은 학습한 가설을 설정의 `output.file` 에 써야한다.
    2. 가설 (`input.file`) 과 test 예제를 담은 `validate.<format>` 을 만들고 ``validate validate.<format>`` 을 실행한다.
       learning system 은 positive 로 분류한 test 예제들을 한 줄에 하나씩 `output.file` 에 써야한다.

    설정 파일의 형식은 `system.json` 의 `configFormat` 을 따르며, `json` 혹은 ``key=value`` 형태의 `prop` 이다.
    """

    _DRIVER_TYPES: ClassVar[Tuple[str, ...]] = ('script',)

    RUN_SCRIPT: ClassVar[str] = 'run'
    VALIDATE_SCRIPT: ClassVar[str] = 'validate'
    HYPOTHESIS_FILE: ClassVar[str] = 'hypothesis.out'
    VALIDATION_FILE: ClassVar[str] = 'validation.out'

    _STDERR_TAIL: ClassVar[int] = 2000

    async def _classify(self, context: Context) -> AbstractSet[str]:
        task = FoldTask.of(context)
        hypothesis = task.workdir / self.HYPOTHESIS_FILE
        validation = task.workdir / self.VALIDATION_FILE

        run_config: Dict[str, Any] = self._framework_config(task)
        run_config.update({
            'data.posExamples': str(task.train_pos_file),
            'data.negExamples': str(task.train_neg_file),
            'output.file': str(hypothesis),
        })
        run_config.update(task.settings)

        context.logger.debug(f'Learning {task.scenario} fold {task.fold.index}...')
        await self._execute(context, self.RUN_SCRIPT, run_config)

        if not hypothesis.is_file():
            raise JobFailure(f'{self._info.name} did not write a hypothesis to {hypothesis}')

        validate_config: Dict[str, Any] = self._framework_config(task)
        validate_config.update({
            'data.posExamples': str(task.test_pos_file),
            'data.negExamples': str(task.test_neg_file),
            'input.file': str(hypothesis),
            'output.file': str(validation),
        })
        validate_config.update(task.settings)

        context.logger.debug(f'Validating {task.scenario} fold {task.fold.index}...')
        await self._execute(context, self.VALIDATE_SCRIPT, validate_config)

        if not validation.is_file():
            raise JobFailure(f'{self._info.name} did not write a validation result to {validation}')

        async with aiofiles.open(validation) as afp:
            content: str = await afp.read()

        return frozenset(filter(None, map(str.strip, content.splitlines())))

    @classmethod
    def _framework_config(cls, task: FoldTask) -> Dict[str, Any]:
        return {
            'framework.currentSeed': task.seed,
            'framework.language': task.language,
            'framework.learningTask': task.scenario.task,
            'framework.learningProblem': task.scenario.problem,
            'framework.fold': task.fold.index,
            'data.workdir': str(task.workdir),
            'data.problemDir': str(task.problem_dir),
        }

    async def _execute(self, context: Context, script_name: str, config: Mapping[str, Any]) -> None:
        task = FoldTask.of(context)
        script: Path = self._info.directory / script_name

        if not script.is_file():
            raise JobFailure(f'{script} is not exist')

        config_path = task.workdir / f'{script_name}.{self._info.config_format}'
        async with aiofiles.open(config_path, mode='w') as afp:
            await afp.write(self._serialize(config))

        try:
            _, err = await check_run(str(script), str(config_path), cwd=str(task.workdir))
        except CalledProcessError as e:
            stderr = e.stderr.decode(errors='replace')[-self._STDERR_TAIL:] if e.stderr else ''
            raise JobFailure(f'{script_name} of {self._info.name} exited with {e.returncode}: {stderr}') from e
        except OSError as e:
            raise JobFailure(f'Can not execute {script}: {e}') from e

        if err:
            context.logger.debug(err.decode(errors='replace'))

    def _serialize(self, config: Mapping[str, Any]) -> str:
        if self._info.config_format == 'prop':
            return ''.join(f'{key}={self._prop_value(value)}\n' for key, value in config.items())
        else:
            return json.dumps(config, indent=4)

    @classmethod
    def _prop_value(cls, value: Any) -> str:
        if isinstance(value, bool):
            return str(value).lower()
        elif isinstance(value, (list, tuple, set, frozenset)):
            return ','.join(map(str, value))
        return str(value)
