# coding: UTF-8

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, TYPE_CHECKING

from .. import ContextReadable

if TYPE_CHECKING:
    from pathlib import Path

    from .. import Context
    from ..benchmark.folds import Fold
    from ..benchmark.scenario import Scenario
    from ..results import ResultKey


@dataclass(frozen=True)
class FoldTask(ContextReadable):
    """
    learning system 하나가 scenario 하나의 fold 하나를 실행하기 위해 필요한 모든 정보.
    :class:`드라이버 <smlbench.systems.base.LearningSystemDriver>` 는 이 객체를 :class:`~smlbench.context.Context`
    로부터 꺼내서 사용한다.
    """
    __slots__ = ('key', 'scenario', 'language', 'fold', 'problem_dir', 'workdir', 'seed', 'settings')

    key: ResultKey
    scenario: Scenario
    language: str
    fold: Fold
    problem_dir: Path
    workdir: Path
    """ 이 job 만 사용하는 폴더. (system, scenario, trial, fold) 별로 다르다. """
    seed: int
    settings: Mapping[str, Any]
    """ `system.json` 의 settings 위에 벤치마크 설정의 settings 를 덮어쓴 값 """

    @classmethod
    def of(cls, context: Context) -> FoldTask:
        # noinspection PyProtectedMember
        return context._variable_dict[cls]

    @property
    def train_pos_file(self) -> Path:
        return self.workdir / f'train.pos.{self._ext}'

    @property
    def train_neg_file(self) -> Path:
        return self.workdir / f'train.neg.{self._ext}'

    @property
    def test_pos_file(self) -> Path:
        return self.workdir / f'test.pos.{self._ext}'

    @property
    def test_neg_file(self) -> Path:
        return self.workdir / f'test.neg.{self._ext}'

    @property
    def _ext(self) -> str:
        from ..benchmark.folds import Examples
        return Examples.file_extension(self.language)
