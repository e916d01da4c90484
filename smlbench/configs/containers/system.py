# coding: UTF-8

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, TYPE_CHECKING

from .base import BaseConfig
from ... import ContextReadable

if TYPE_CHECKING:
    from pathlib import Path

    from ... import Context


@dataclass(frozen=True)
class LearningSystemInfo(BaseConfig, ContextReadable):
    """
    `learningsystems/<name>/system.json` 를 읽어 만들어진 learning system 의 정보.

    learning system 이 어떤 지식 표현 언어 (e.g. `owl`, `prolog`) 를 입력으로 받는지,
    어떤 :mod:`드라이버 <smlbench.systems>` 로 실행해야 하는지가 적혀있다.
    """
    __slots__ = ('name', 'language', 'directory', 'driver', 'config_format', 'settings')

    name: str
    language: str
    directory: Path
    driver: str
    """ 이 learning system 을 실행할 드라이버의 종류 (e.g. `script`) """
    config_format: str
    """ learning system 에게 넘겨줄 실행 설정 파일의 형식 (`json` 혹은 `prop`) """
    settings: Mapping[str, Any]

    @classmethod
    def of(cls, context: Context) -> LearningSystemInfo:
        # noinspection PyProtectedMember
        return context._variable_dict[cls]
