"""Tests for result aggregation and measures."""

import pytest

from smlbench.exceptions import DuplicateResultError
from smlbench.measures import ConfusionMatrix, Point
from smlbench.results import ResultAggregator, ResultKey, ResultStatus


class TestResultAggregator:
    """Tests for ResultAggregator."""

    def test_record_and_read(self):
        results = ResultAggregator()
        key = ResultKey('alpha', 'family/uncle', 0, 0)

        entry = results.succeed(key, {'accuracy': 1.0}, 0.5)

        assert key in results
        assert results[key] is entry
        assert entry.status is ResultStatus.SUCCEEDED
        assert not entry.failed
        assert len(results) == 1

    def test_write_once(self):
        """A key can only be recorded once."""
        results = ResultAggregator()
        key = ResultKey('alpha', 'family/uncle', 0, 0)
        results.succeed(key, {}, 0.1)

        with pytest.raises(DuplicateResultError):
            results.fail(key, 'again', 0.1)

        assert not results[key].failed

    def test_trials_are_distinct_keys(self):
        results = ResultAggregator()
        results.succeed(ResultKey('alpha', 'family/uncle', 0, 0), {}, 0.1)
        results.succeed(ResultKey('alpha', 'family/uncle', 0, 1), {}, 0.1)

        assert len(results) == 2

    def test_entries_are_sorted(self):
        results = ResultAggregator()
        results.fail(ResultKey('beta', 'family/aunt', 1, 0), 'boom', 0.1)
        results.succeed(ResultKey('alpha', 'family/uncle', 0, 0), {}, 0.1)
        results.succeed(ResultKey('alpha', 'family/aunt', 2, 0), {}, 0.1)

        assert [str(e.key) for e in results] == [
            'family/aunt.alpha.fold-2',
            'family/uncle.alpha.fold-0',
            'family/aunt.beta.fold-1',
        ]
        assert [e.key.system for e in results.failed()] == ['beta']
        assert len(results.of_system('alpha')) == 2

    def test_as_dict(self):
        results = ResultAggregator()
        entry = results.fail(ResultKey('beta', 'family/aunt', 1, 2), 'boom', 0.25)

        assert entry.as_dict() == {
            'system': 'beta',
            'scenario': 'family/aunt',
            'fold': 1,
            'trial': 2,
            'status': 'failed',
            'measures': {},
            'error': 'boom',
            'duration': 0.25,
        }
        assert str(entry.key) == 'family/aunt.beta.fold-1.trial-2'


class TestConfusionMatrix:
    """Tests for ConfusionMatrix."""

    def test_from_classification(self):
        matrix = ConfusionMatrix.from_classification(['p1', 'p2', 'p3', 'p4'], ['n1', 'n2'], {'p1', 'p2', 'p3', 'n1'})

        assert matrix == ConfusionMatrix(3, 1, 1, 1)
        assert matrix.total == 6
        assert matrix.accuracy == pytest.approx(4 / 6)
        assert matrix.precision == pytest.approx(3 / 4)
        assert matrix.recall == pytest.approx(3 / 4)
        assert matrix.f_measure == pytest.approx(3 / 4)
        assert matrix.roc_point == Point(pytest.approx(0.5), pytest.approx(0.75))

    def test_empty_denominators(self):
        matrix = ConfusionMatrix(0, 0, 0, 0)

        assert matrix.accuracy == 0.0
        assert matrix.precision == 0.0
        assert matrix.recall == 0.0
        assert matrix.f_measure == 0.0
        assert matrix.roc_point == Point(0.0, 0.0)

    def test_as_dict(self):
        assert ConfusionMatrix(2, 0, 2, 0).as_dict() == {
            'tp': 2, 'fp': 0, 'tn': 2, 'fn': 0,
            'accuracy': 1.0, 'precision': 1.0, 'recall': 1.0, 'fMeasure': 1.0,
        }
