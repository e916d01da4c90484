"""Tests for the script driver against real executables."""

import asyncio
import json
import logging
import stat

import pytest

from smlbench import Context
from smlbench.benchmark import Scenario
from smlbench.benchmark.folds import Examples, partition
from smlbench.configs.parsers import SystemParser
from smlbench.exceptions import ConfigurationError, JobFailure
from smlbench.results import ResultKey
from smlbench.systems import FoldTask, LearningSystemDriver, ScriptDriver

from conftest import write_system

RUN_SCRIPT = """#!/bin/sh
out=$(sed -n 's/^output\\.file=//p' "$1")
echo "learned" > "$out"
"""

# covers every test positive
VALIDATE_SCRIPT = """#!/bin/sh
pos=$(sed -n 's/^data\\.posExamples=//p' "$1")
out=$(sed -n 's/^output\\.file=//p' "$1")
cat "$pos" > "$out"
"""

FAILING_SCRIPT = """#!/bin/sh
echo "out of memory" >&2
exit 3
"""

SILENT_SCRIPT = """#!/bin/sh
exit 0
"""

HANGING_SCRIPT = """#!/bin/sh
sleep 60
"""


def _install(system_dir, name, body):
    script = system_dir / name
    script.write_text(body)
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)


def _context(tmp_path, system_dir, name, settings=None):
    info = SystemParser(name, system_dir).parse()
    examples = Examples(('p0', 'p1', 'p2', 'p3'), ('n0', 'n1', 'n2', 'n3'))
    fold = partition(examples, 2, 5)[0]
    scenario = Scenario('family', 'uncle')

    task = FoldTask(ResultKey(name, str(scenario), 0, 0), scenario, info.language, fold,
                    tmp_path / 'problem', tmp_path / 'job', 5, settings or dict())

    context = Context()
    context._assign(task)
    context._assign(info)
    context._assign(logging.getLogger(f'smlbench.{name}'), logging.Logger)

    return info, context


@pytest.fixture
def script_system(tmp_path):
    system_dir = write_system(tmp_path / 'root', 'scripted', language='owl', configFormat='prop')
    _install(system_dir, 'run', RUN_SCRIPT)
    _install(system_dir, 'validate', VALIDATE_SCRIPT)
    return system_dir


class TestScriptDriver:
    """Tests for ScriptDriver."""

    def test_registered_as_default(self):
        assert LearningSystemDriver.get_driver('script') is ScriptDriver

    def test_unknown_driver(self):
        with pytest.raises(ConfigurationError, match='quantum'):
            LearningSystemDriver.get_driver('quantum')

    def test_conflicting_registration(self):
        class _Other(ScriptDriver):
            pass

        with pytest.raises(ValueError, match='overlap'):
            LearningSystemDriver.register_driver(_Other)

    @pytest.mark.asyncio
    async def test_evaluate(self, tmp_path, script_system):
        """A perfect classifier should produce a perfect confusion matrix."""
        info, context = _context(tmp_path, script_system, 'scripted', {'maxExecutionTime': 10, 'verbose': True})

        matrix = await LearningSystemDriver.gen_driver(info).evaluate(context)

        assert matrix.true_positives == 2
        assert matrix.false_positives == 0
        assert matrix.true_negatives == 2
        assert matrix.false_negatives == 0

        run_config = (tmp_path / 'job' / 'run.prop').read_text().splitlines()
        assert 'framework.currentSeed=5' in run_config
        assert 'framework.learningTask=family' in run_config
        assert 'framework.learningProblem=uncle' in run_config
        assert 'maxExecutionTime=10' in run_config
        assert 'verbose=true' in run_config
        assert f'data.posExamples={tmp_path / "job" / "train.pos.txt"}' in run_config

        validate_config = (tmp_path / 'job' / 'validate.prop').read_text().splitlines()
        assert f'input.file={tmp_path / "job" / ScriptDriver.HYPOTHESIS_FILE}' in validate_config
        assert f'data.posExamples={tmp_path / "job" / "test.pos.txt"}' in validate_config

    @pytest.mark.asyncio
    async def test_json_config_format(self, tmp_path, script_system):
        """Systems that ask for json get a JSON run config."""
        (script_system / 'system.json').write_text(json.dumps({'language': 'owl', 'configFormat': 'json'}))
        _install(script_system, 'run', '#!/bin/sh\nexit 0\n')
        info, context = _context(tmp_path, script_system, 'scripted')

        with pytest.raises(JobFailure, match='hypothesis'):
            await ScriptDriver(info).evaluate(context)

        run_config = json.loads((tmp_path / 'job' / 'run.json').read_text())
        assert run_config['framework.currentSeed'] == 5
        assert run_config['output.file'] == str(tmp_path / 'job' / ScriptDriver.HYPOTHESIS_FILE)

    @pytest.mark.asyncio
    async def test_nonzero_exit(self, tmp_path, script_system):
        """A failing run script is a job failure carrying its stderr."""
        _install(script_system, 'run', FAILING_SCRIPT)
        info, context = _context(tmp_path, script_system, 'scripted')

        with pytest.raises(JobFailure, match='exited with 3: out of memory'):
            await ScriptDriver(info).evaluate(context)

    @pytest.mark.asyncio
    async def test_missing_validation_output(self, tmp_path, script_system):
        _install(script_system, 'validate', SILENT_SCRIPT)
        info, context = _context(tmp_path, script_system, 'scripted')

        with pytest.raises(JobFailure, match='validation result'):
            await ScriptDriver(info).evaluate(context)

    @pytest.mark.asyncio
    async def test_missing_script(self, tmp_path, script_system):
        (script_system / 'validate').unlink()
        info, context = _context(tmp_path, script_system, 'scripted')

        with pytest.raises(JobFailure, match='not exist'):
            await ScriptDriver(info).evaluate(context)

    @pytest.mark.asyncio
    async def test_not_executable(self, tmp_path, script_system):
        (script_system / 'run').chmod(0o644)
        info, context = _context(tmp_path, script_system, 'scripted')

        with pytest.raises(JobFailure, match='Can not execute'):
            await ScriptDriver(info).evaluate(context)

    @pytest.mark.asyncio
    async def test_cancellation_propagates(self, tmp_path, script_system):
        """Cancelling a running job kills the learning system and is not turned into a job failure."""
        _install(script_system, 'run', HANGING_SCRIPT)
        info, context = _context(tmp_path, script_system, 'scripted')

        task = asyncio.create_task(ScriptDriver(info).evaluate(context))
        await asyncio.sleep(0.5)
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task
