# coding: UTF-8

from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, Dict, Iterable, Union

from .point import Point


def _ratio(numerator: int, denominator: int) -> float:
    if denominator == 0:
        return 0.0
    return numerator / denominator


@dataclass(frozen=True)
class ConfusionMatrix:
    """
    fold 하나의 test 예제에대한 분류 결과.

    :meth:`from_classification` 으로 test 예제들과 learning system 이 cover 한 예제들로부터 만드는것이 일반적이다.
    분모가 0인 척도는 0.0 으로 계산한다.
    """
    __slots__ = ('true_positives', 'false_positives', 'true_negatives', 'false_negatives')

    true_positives: int
    false_positives: int
    true_negatives: int
    false_negatives: int

    @classmethod
    def from_classification(cls,
                            positives: Iterable[str],
                            negatives: Iterable[str],
                            covered: AbstractSet[str]) -> ConfusionMatrix:
        """
        :param positives: test 예제 중 positive 예제들
        :type positives: typing.Iterable[str]
        :param negatives: test 예제 중 negative 예제들
        :type negatives: typing.Iterable[str]
        :param covered: learning system 이 학습한 가설로 positive 로 분류된 예제들
        :type covered: typing.AbstractSet[str]
        :return: 분류 결과
        :rtype: smlbench.measures.confusion.ConfusionMatrix
        """
        tp = fn = fp = tn = 0

        for example in positives:
            if example in covered:
                tp += 1
            else:
                fn += 1

        for example in negatives:
            if example in covered:
                fp += 1
            else:
                tn += 1

        return cls(tp, fp, tn, fn)

    @property
    def total(self) -> int:
        return self.true_positives + self.false_positives + self.true_negatives + self.false_negatives

    @property
    def accuracy(self) -> float:
        return _ratio(self.true_positives + self.true_negatives, self.total)

    @property
    def precision(self) -> float:
        return _ratio(self.true_positives, self.true_positives + self.false_positives)

    @property
    def recall(self) -> float:
        return _ratio(self.true_positives, self.true_positives + self.false_negatives)

    @property
    def f_measure(self) -> float:
        precision = self.precision
        recall = self.recall
        if precision + recall == 0:
            return 0.0
        return 2 * precision * recall / (precision + recall)

    @property
    def roc_point(self) -> Point:
        """ (false positive rate, true positive rate) """
        return Point(_ratio(self.false_positives, self.false_positives + self.true_negatives), self.recall)

    def as_dict(self) -> Dict[str, Union[int, float]]:
        return {
            'tp': self.true_positives,
            'fp': self.false_positives,
            'tn': self.true_negatives,
            'fn': self.false_negatives,
            'accuracy': self.accuracy,
            'precision': self.precision,
            'recall': self.recall,
            'fMeasure': self.f_measure,
        }
