# coding: UTF-8

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple, Type

from .base import LocalReadParser
from .. import get_full_path, lookup, validate_and_load
from ..containers import BenchmarkConfig
from ...exceptions import ConfigurationError

BenchmarkJson = Dict[str, Any]


class BenchmarkParser(LocalReadParser[BenchmarkConfig]):
    """
    벤치마크 설정 파일을 읽어서 :class:`~smlbench.configs.containers.bench.BenchmarkConfig` 를 만든다.

    설정 파일에 없는 값은 :mod:`smlbench.configs` 안에있는 `defaults.json` 의 값으로 채운다.
    `rootDir` 가 상대경로일 경우 설정 파일이 있는 폴더를 기준으로 한다.
    """

    def _parse(self) -> BenchmarkConfig:
        return self.from_mapping(self._local_config, self._config_path.parent)

    @classmethod
    def from_mapping(cls, local_config: Mapping[str, Any], base_dir: Optional[Path] = None) -> BenchmarkConfig:
        """
        파일을 거치지 않고 이미 읽어들인 설정 내용으로부터 :class:`~smlbench.configs.containers.bench.BenchmarkConfig`
        를 만든다.

        :raises smlbench.exceptions.ConfigurationError: 필수 값이 없거나 값의 타입이 맞지 않을 경우

        :param local_config: 벤치마크 설정 내용
        :type local_config: typing.Mapping[str, typing.Any]
        :param base_dir: 상대경로로 적힌 `rootDir` 의 기준 폴더
        :type base_dir: typing.Optional[pathlib.Path]
        :return: 파싱 결과
        :rtype: smlbench.configs.containers.bench.BenchmarkConfig
        """
        default_config: BenchmarkJson = validate_and_load(get_full_path('defaults.json'))

        def _get(key: str, required: bool = False) -> Any:
            value = lookup(local_config, key, None)
            if value is None:
                if required:
                    raise ConfigurationError(f'Missing required config key: {key}')
                value = lookup(default_config, key, None)
            return value

        learning_systems = cls._str_tuple(_get('learningSystems', required=True), 'learningSystems')
        scenarios = cls._str_tuple(_get('scenarios', required=True), 'scenarios')

        seed = cls._typed(_get('seed'), int, 'seed')
        folds = cls._typed(_get('crossValidationFolds'), int, 'crossValidationFolds')
        threads = cls._typed(_get('threadsCount'), int, 'threadsCount')
        if threads < 1:
            raise ConfigurationError(f'threadsCount should be at least 1, but {threads} is given')

        delete_work_dir = cls._typed(_get('deleteWorkDir'), bool, 'deleteWorkDir')

        mex_output: Optional[str] = _get('mex.outputFile')
        if mex_output is not None:
            mex_output = Path(cls._typed(mex_output, str, 'mex.outputFile'))

        root_dir: Optional[str] = _get('rootDir')
        if root_dir is not None:
            root_dir = Path(cls._typed(root_dir, str, 'rootDir'))
            if not root_dir.is_absolute() and base_dir is not None:
                root_dir = base_dir / root_dir

        settings = _get('settings') or dict()
        if not isinstance(settings, Mapping) or not all(isinstance(v, Mapping) for v in settings.values()):
            raise ConfigurationError('settings should map a learning system name to an object')

        return BenchmarkConfig(learning_systems, scenarios, seed, folds, threads, delete_work_dir,
                               mex_output, root_dir, settings, local_config)

    @classmethod
    def _typed(cls, value: Any, expected: Type, key: str) -> Any:
        # bool is a subclass of int
        if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
            raise ConfigurationError(f'{key} should be {expected.__name__}, but {value!r} is given')
        return value

    @classmethod
    def _str_tuple(cls, value: Any, key: str) -> Tuple[str, ...]:
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ConfigurationError(f'{key} should be a list of string, but {value!r} is given')
        return tuple(value)
