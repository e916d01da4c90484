# coding: UTF-8

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """ XY 평면 위의 점. ROC 곡선 등 point 기반 곡선을 표현할 때 쓰인다. """
    __slots__ = ('x', 'y')

    x: float
    y: float
