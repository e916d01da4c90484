# coding: UTF-8

"""
:mod:`measures` -- learning system 의 예측 결과로부터 계산하는 척도들
=====================================================================

fold 하나의 test 예제들과 learning system 이 positive 로 분류(cover)한 예제들로부터
:class:`~smlbench.measures.confusion.ConfusionMatrix` 를 만들고, 그로부터 accuracy, precision, recall, F-measure
그리고 ROC 공간 위의 :class:`~smlbench.measures.point.Point` 를 계산한다.

.. module:: smlbench.measures
    :synopsis: 예측 결과에 대한 척도 계산
"""

from .confusion import ConfusionMatrix
from .point import Point
