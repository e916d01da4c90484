# coding: UTF-8

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, TYPE_CHECKING, Tuple

from .base import BaseConfig

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True)
class BenchmarkConfig(BaseConfig):
    """
    벤치마크 한번의 실행을 서술하는 설정.

    :class:`~smlbench.configs.parsers.bench.BenchmarkParser` 를 통해서 생성되며,
    :class:`~smlbench.benchmark.runner.BenchmarkRunner` 가 이 객체 하나로 실행 전체를 구성한다.
    """
    __slots__ = (
        'learning_systems', 'scenarios', 'seed', 'cross_validation_folds', 'threads_count', 'delete_work_dir',
        'mex_output_file', 'root_dir', 'settings', 'source'
    )

    learning_systems: Tuple[str, ...]
    """ 벤치마크할 learning system 이름들. 순서가 유지되며 중복을 제거하지 않는다. """
    scenarios: Tuple[str, ...]
    """ `task/problem` 혹은 `task/*` 형태의 scenario 명세들 """
    seed: int
    cross_validation_folds: int
    threads_count: int
    delete_work_dir: bool
    mex_output_file: Optional[Path]
    """ 값이 있다면 실행이 끝난 후 결과를 이 경로에 내보낸다. """
    root_dir: Optional[Path]
    settings: Mapping[str, Mapping[str, Any]]
    """ learning system 별로 실행 설정에 추가로 넘겨줄 값들 """
    source: Mapping[str, Any]
    """ 파싱 전의 설정 내용 그대로 """

    def system_settings(self, system_name: str) -> Mapping[str, Any]:
        return self.settings.get(system_name, dict())
