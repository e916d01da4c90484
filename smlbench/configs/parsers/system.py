# coding: UTF-8

from __future__ import annotations

from typing import Any, ClassVar, Dict, Tuple, TYPE_CHECKING

from .base import LocalReadParser
from ..containers import LearningSystemInfo
from ...exceptions import ConfigurationError

if TYPE_CHECKING:
    from pathlib import Path


class SystemParser(LocalReadParser[LearningSystemInfo]):
    """
    learning system 폴더 안에 있는 `system.json` 을 읽어 :class:`~smlbench.configs.containers.system.LearningSystemInfo`
    를 만든다.

    `system.json` 의 예:

    .. code-block:: json

        {
            "language": "owl",
            "driver": "script",
            "configFormat": "prop",
            "settings": {"algorithm": "celoe"}
        }
    """
    __slots__ = ('_name', '_directory')

    FILE_NAME: ClassVar[str] = 'system.json'
    _CONFIG_FORMATS: ClassVar[Tuple[str, ...]] = ('json', 'prop')

    _name: str
    _directory: Path

    def __init__(self, name: str, directory: Path) -> None:
        if not directory.is_dir():
            raise ConfigurationError(f'Learning system {name} is not available: {directory} is not exist')

        self._name = name
        self._directory = directory

        super().__init__(directory / self.FILE_NAME)

    def _parse(self) -> LearningSystemInfo:
        config: Dict[str, Any] = dict(self._local_config)

        language = config.get('language')
        if not isinstance(language, str) or not language:
            raise ConfigurationError(f'Learning system {self._name} does not declare its language '
                                     f'in {self._config_path}')

        config_format = config.get('configFormat', 'json')
        if config_format not in self._CONFIG_FORMATS:
            raise ConfigurationError(f'Learning system {self._name} has unsupported configFormat: {config_format}')

        return LearningSystemInfo(self._name, language, self._directory, config.get('driver', 'script'),
                                  config_format, config.get('settings', dict()))
