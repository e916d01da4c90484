# coding: UTF-8

"""
:mod:`smlbench` -- 구조적 기계학습 시스템 벤치마크 프레임워크
===============================================================

설정 파일에 적힌 learning system 들과 scenario (learning task + learning problem) 들을 읽어,
scenario 별로 cross-validation 을 수행하고 그 결과를 모아 내보낸다.

* 실행 전체의 생명주기를 담당하는 클래스: :class:`smlbench.benchmark.runner.BenchmarkRunner`

* learning system 을 실제로 실행하는 클래스들: :mod:`smlbench.systems`

* 설정 파일 파싱: :mod:`smlbench.configs`

.. module:: smlbench
    :synopsis: 구조적 기계학습 시스템 벤치마크 프레임워크
"""

from .context import Context, ContextReadable
