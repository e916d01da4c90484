# coding: UTF-8

from __future__ import annotations

from abc import ABCMeta, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from ..configs.containers import BenchmarkConfig
    from ..results import ResultAggregator


@dataclass
class RunMetadata:
    """ 결과가 어떤 설정과 환경에서 만들어졌는지 기록한다. """
    config: BenchmarkConfig
    root_dir: Path
    learning_tasks_dir: Path
    learning_systems_dir: Path
    workdir: Path
    started_at: float
    finished_at: Optional[float] = field(default=None)

    def as_dict(self) -> Dict[str, Any]:
        return {
            'config': dict(self.config.source),
            'rootDir': str(self.root_dir),
            'learningTasksDir': str(self.learning_tasks_dir),
            'learningSystemsDir': str(self.learning_systems_dir),
            'workDir': str(self.workdir),
            'startedAt': self.started_at,
            'finishedAt': self.finished_at,
        }


class BaseExporter(metaclass=ABCMeta):
    EXTENSION: str

    def output_path(self, path: Path) -> Path:
        return path.with_name(f'{path.name}.{self.EXTENSION}')

    @abstractmethod
    def write(self, results: ResultAggregator, metadata: RunMetadata, path: Path) -> Path:
        """
        `path` 에 확장자를 붙인 경로에 결과를 쓴다.

        :param results: 모든 job 의 결과
        :type results: smlbench.results.ResultAggregator
        :param metadata: 실행 정보
        :type metadata: smlbench.export.base.RunMetadata
        :param path: 확장자를 제외한 출력 경로
        :type path: pathlib.Path
        :return: 실제로 쓰여진 파일의 경로
        :rtype: pathlib.Path
        """
        pass
