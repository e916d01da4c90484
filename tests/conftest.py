"""Shared fixtures: a miniature benchmark root and an in-process learning system driver."""

import asyncio
import json
from pathlib import Path

import pytest

from smlbench.configs.parsers import BenchmarkParser
from smlbench.exceptions import JobFailure
from smlbench.systems import FoldTask, LearningSystemDriver

POSITIVES = tuple(f'pos{i}' for i in range(6))
NEGATIVES = tuple(f'neg{i}' for i in range(6))


class FakeDriver(LearningSystemDriver):
    """Classifies every test positive correctly unless the `fail` setting is given."""

    _DRIVER_TYPES = ('fake',)

    active = 0
    peak = 0
    calls = 0

    @classmethod
    def reset(cls):
        cls.active = 0
        cls.peak = 0
        cls.calls = 0

    async def _classify(self, context):
        task = FoldTask.of(context)

        FakeDriver.calls += 1
        FakeDriver.active += 1
        FakeDriver.peak = max(FakeDriver.peak, FakeDriver.active)
        try:
            await asyncio.sleep(0.01)
            if task.settings.get('fail'):
                raise JobFailure('fake failure')
            return frozenset(task.fold.test.positives)
        finally:
            FakeDriver.active -= 1


def write_system(root: Path, name: str, **descriptor) -> Path:
    system_dir = root / 'learningsystems' / name
    system_dir.mkdir(parents=True, exist_ok=True)
    (system_dir / 'system.json').write_text(json.dumps(descriptor))
    return system_dir


def write_problem(root: Path, task: str, language: str, problem: str,
                  positives=POSITIVES, negatives=NEGATIVES) -> Path:
    ext = 'pl' if language == 'prolog' else 'txt'
    problem_dir = root / 'learningtasks' / task / language / 'learningproblems' / problem
    problem_dir.mkdir(parents=True, exist_ok=True)
    (problem_dir / f'pos.{ext}').write_text('% positives\n' + '\n'.join(positives) + '\n\n')
    (problem_dir / f'neg.{ext}').write_text('# negatives\n' + '\n'.join(negatives) + '\n')
    return problem_dir


@pytest.fixture
def fake_driver():
    LearningSystemDriver.register_driver(FakeDriver)
    FakeDriver.reset()
    yield FakeDriver
    FakeDriver.reset()


@pytest.fixture
def sml_root(tmp_path, fake_driver):
    """
    learningsystems/
        alpha (owl), beta (prolog)
    learningtasks/family/
        owl/learningproblems/{aunt, grandfather, uncle}
        prolog/learningproblems/{cousin, uncle}
    """
    root = tmp_path / 'sml-bench'

    write_system(root, 'alpha', language='owl', driver='fake')
    write_system(root, 'beta', language='prolog', driver='fake')

    for problem in ('uncle', 'aunt', 'grandfather'):
        write_problem(root, 'family', 'owl', problem)
    for problem in ('uncle', 'cousin'):
        write_problem(root, 'family', 'prolog', problem)

    return root


@pytest.fixture
def work_dir(tmp_path):
    path = tmp_path / 'work'
    path.mkdir()
    return path


@pytest.fixture
def make_config(sml_root):
    def _make(**overrides):
        source = {
            'learningSystems': ['alpha'],
            'scenarios': ['family/*'],
            'seed': 42,
            'crossValidationFolds': 3,
            'threadsCount': 2,
            'deleteWorkDir': False,
            'rootDir': str(sml_root),
        }
        source.update(overrides)
        return BenchmarkParser.from_mapping(source)

    return _make
