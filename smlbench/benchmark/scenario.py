# coding: UTF-8

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar, Iterable, List, TYPE_CHECKING

from ordered_set import OrderedSet

from ..exceptions import ConfigurationError

if TYPE_CHECKING:
    from .layout import RootLayout


@dataclass(frozen=True)
class Scenario:
    """ 벤치마크할 learning task 와 learning problem 의 쌍 """
    __slots__ = ('task', 'problem')

    task: str
    problem: str

    @classmethod
    def parse(cls, spec: str) -> Scenario:
        """
        `task/problem` 형태의 문자열을 파싱한다.

        :raises smlbench.exceptions.ConfigurationError: 형식이 맞지 않을 경우
        """
        parts = spec.split('/')
        if len(parts) != 2 or not all(parts) or '*' in parts:
            raise ConfigurationError(f'Malformed scenario: {spec!r} (expected "task/problem" or "task/*")')

        return cls(*parts)

    def __str__(self) -> str:
        return f'{self.task}/{self.problem}'


class ScenarioResolver:
    """
    설정에 적힌 scenario 명세들을 실제 :class:`Scenario` 들의 목록으로 바꾼다.

    * `task/problem` 형태는 그대로 하나의 :class:`Scenario` 가 된다. 폴더의 존재 여부는 확인하지 않는다.
    * `task/*` 형태는 요청된 모든 언어에 대해 `<task>/<language>/learningproblems/` 밑의 폴더들로 확장된다.
      명세 하나 안에서는 중복이 제거되고 처음 발견된 순서가 유지된다.

    .. note::

        * 서로 다른 명세끼리의 중복은 제거하지 않는다.
          즉 같은 `task/problem` 을 두번 적으면 두번 실행된다.
    """
    __slots__ = ('_layout',)

    WILDCARD_SUFFIX: ClassVar[str] = '/*'

    _layout: RootLayout

    def __init__(self, layout: RootLayout) -> None:
        self._layout = layout

    def resolve(self, specifications: Iterable[str], languages: Iterable[str]) -> List[Scenario]:
        """
        :raises smlbench.exceptions.ConfigurationError: 형식이 맞지 않는 명세가 있을 경우

        :param specifications: scenario 명세들
        :type specifications: typing.Iterable[str]
        :param languages: wildcard 를 확장할 때 살펴볼 지식 표현 언어들
        :type languages: typing.Iterable[str]
        :return: 확장된 scenario 들. 명세의 순서를 따른다.
        :rtype: typing.List[smlbench.benchmark.scenario.Scenario]
        """
        languages = tuple(languages)
        ret: List[Scenario] = list()

        for spec in specifications:
            if spec.endswith(self.WILDCARD_SUFFIX):
                ret.extend(self._expand(spec, languages))
            else:
                ret.append(Scenario.parse(spec))

        return ret

    def _expand(self, spec: str, languages: Iterable[str]) -> List[Scenario]:
        task = spec[:-len(self.WILDCARD_SUFFIX)]
        if not task or '/' in task or task == '*':
            raise ConfigurationError(f'Malformed scenario: {spec!r} (expected "task/problem" or "task/*")')

        expansion: OrderedSet[str] = OrderedSet()

        for language in languages:
            problems_dir = self._layout.learning_problems_dir(task, language)
            if not problems_dir.is_dir():
                logging.getLogger('smlbench').debug(f'{problems_dir} is not exist. skip {spec} for {language}')
                continue

            for path in sorted(problems_dir.iterdir()):
                if path.is_dir():
                    expansion.add(path.name)

        if len(expansion) == 0:
            logging.getLogger('smlbench').warning(f'{spec} has been expanded to nothing')

        return [Scenario(task, problem) for problem in expansion]
