# coding: UTF-8

"""
:mod:`benchmark` -- 벤치마크 실행의 구성과 진행을 담당하는 클래스 모음
=========================================================================

벤치마크 한번의 실행은 :class:`~smlbench.benchmark.runner.BenchmarkRunner` 가 처음부터 끝까지 담당한다.
나머지 클래스들은 실행의 각 단계를 나누어 맡는다.

* 벤치마크 루트 폴더의 구조: :class:`~smlbench.benchmark.layout.RootLayout`
* `task/problem` 혹은 `task/*` 형태의 scenario 해석: :class:`~smlbench.benchmark.scenario.ScenarioResolver`
* learning system 정보의 조회와 캐싱: :class:`~smlbench.benchmark.registry.SystemRegistry`
* 예제 읽기와 fold 나누기: :mod:`smlbench.benchmark.folds`
* scenario 하나를 (learning system, fold) job 들로 나누기:
  :class:`~smlbench.benchmark.cross_validation.CrossValidationDispatcher`
* 동시에 실행되는 job 의 수 제한: :class:`~smlbench.benchmark.pool.WorkerPool`

실행 순서는 다음과 같다.

1. 설정 파일을 :class:`~smlbench.configs.parsers.bench.BenchmarkParser` 로 읽는다.
2. :class:`~smlbench.benchmark.runner.BenchmarkRunner` 가 루트 폴더와 learning system 들을 확인하고 작업 폴더를 만든다.
3. scenario 들을 해석한 뒤, scenario 마다 fold 를 나누어 job 들을 worker pool 에 넣는다.
4. 모든 job 이 끝나면 결과를 내보낸다.

.. module:: smlbench.benchmark
    :synopsis: 벤치마크 실행의 구성과 진행
"""

from .layout import RootLayout
from .pool import WorkerPool
from .registry import SystemRegistry
from .runner import BenchmarkRunner
from .scenario import Scenario, ScenarioResolver
