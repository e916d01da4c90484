# coding: UTF-8

from __future__ import annotations

import os
from pathlib import Path
from typing import ClassVar, Optional, TYPE_CHECKING, Tuple

from ..exceptions import BenchEnvironmentError

if TYPE_CHECKING:
    from .scenario import Scenario


class RootLayout:
    """
    SML-Bench 루트 폴더 밑의 learning system 과 learning task 들의 위치를 계산한다.

    .. code-block:: text

        <root>/learningsystems/<system>/
        <root>/learningtasks/<task>/<language>/learningproblems/<problem>/
    """
    __slots__ = ('_root',)

    LEARNING_SYSTEMS: ClassVar[str] = 'learningsystems'
    LEARNING_TASKS: ClassVar[str] = 'learningtasks'
    LEARNING_PROBLEMS: ClassVar[str] = 'learningproblems'
    ROOT_ENV: ClassVar[str] = 'SMLBENCH_ROOT'

    _root: Path

    def __init__(self, root: Path) -> None:
        self._root = root.resolve()

    @classmethod
    def locate(cls, root: Optional[Path] = None) -> RootLayout:
        """
        `root` 가 주어지지 않으면 환경변수 `SMLBENCH_ROOT`, 그것도 없으면 현재 폴더를 루트로 삼는다.

        :raises smlbench.exceptions.BenchEnvironmentError: 루트 폴더 밑에 `learningsystems` 나 `learningtasks` 가 없을 경우

        :param root: 루트 폴더
        :type root: typing.Optional[pathlib.Path]
        :return: 찾아진 레이아웃
        :rtype: smlbench.benchmark.layout.RootLayout
        """
        if root is None:
            root = Path(os.environ.get(cls.ROOT_ENV, os.getcwd()))

        layout = cls(root)

        for directory in (layout.learning_systems_dir, layout.learning_tasks_dir):
            if not directory.is_dir():
                raise BenchEnvironmentError(f'Can not locate SML-Bench root directory: {directory} is not exist')

        return layout

    @property
    def root(self) -> Path:
        return self._root

    @property
    def learning_systems_dir(self) -> Path:
        return self._root / self.LEARNING_SYSTEMS

    @property
    def learning_tasks_dir(self) -> Path:
        return self._root / self.LEARNING_TASKS

    def learning_system_dir(self, system: str) -> Path:
        return self.learning_systems_dir / system

    def learning_problems_dir(self, task: str, language: str) -> Path:
        return self.learning_tasks_dir / task / language / self.LEARNING_PROBLEMS

    def learning_problem_dir(self, scenario: Scenario, language: str) -> Path:
        return self.learning_problems_dir(scenario.task, language) / scenario.problem

    def available_systems(self) -> Tuple[str, ...]:
        """ `learningsystems` 밑에 폴더로 존재하는 learning system 들의 이름 """
        return tuple(sorted(path.name for path in self.learning_systems_dir.iterdir() if path.is_dir()))
