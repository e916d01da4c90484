# coding: UTF-8

from __future__ import annotations

import logging
from typing import Dict, Iterable, Tuple, TYPE_CHECKING

from ..configs.parsers import SystemParser

if TYPE_CHECKING:
    from .layout import RootLayout
    from ..configs.containers import LearningSystemInfo


class SystemRegistry:
    """
    learning system 의 이름으로 :class:`~smlbench.configs.containers.system.LearningSystemInfo` 를 찾아준다.

    처음 찾을 때만 `system.json` 을 읽고, 그 이후에는 캐싱된 객체를 반환한다.
    :class:`~smlbench.benchmark.runner.BenchmarkRunner` 는 생성될 때 :meth:`warm_up` 으로
    실행할 모든 learning system 을 미리 읽어두기 때문에, job 들이 동시에 실행되는 동안에는 캐시를 읽기만 한다.
    """
    __slots__ = ('_layout', '_infos')

    _layout: RootLayout
    _infos: Dict[str, LearningSystemInfo]

    def __init__(self, layout: RootLayout) -> None:
        self._layout = layout
        self._infos = dict()

    def describe(self, system: str) -> LearningSystemInfo:
        """
        :raises smlbench.exceptions.ConfigurationError: learning system 폴더나 `system.json` 이 없거나 잘못된 경우

        :param system: learning system 이름
        :type system: str
        :return: learning system 의 정보
        :rtype: smlbench.configs.containers.system.LearningSystemInfo
        """
        info = self._infos.get(system)

        if info is None:
            info = SystemParser(system, self._layout.learning_system_dir(system)).parse()
            self._infos[system] = info
            logging.getLogger('smlbench').debug(f'language for {system}: {info.language}')

        return info

    def language_of(self, system: str) -> str:
        return self.describe(system).language

    def warm_up(self, systems: Iterable[str]) -> Tuple[LearningSystemInfo, ...]:
        """ `systems` 를 순서대로 모두 읽어서 캐싱한다. """
        return tuple(self.describe(system) for system in systems)

    def available_systems(self) -> Tuple[str, ...]:
        return self._layout.available_systems()
