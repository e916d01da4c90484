# coding: UTF-8

"""
:mod:`configs` -- JSON 형태의 설정 파일들을 파싱
=========================================================

벤치마크 한번의 실행을 서술하는 benchmark 설정 파일과, 각 learning system 의 디렉토리에 들어있는
`system.json` 을 읽어서 파싱하는 모듈.

:mod:`~smlbench.configs.parsers` 의 파서들이 파싱하여 :mod:`~smlbench.configs.containers` 의 컨테이너를 생성한다.

benchmark 설정에서 생략된 값들은 이 패키지 안에 들어있는 `defaults.json` 의 값을 따른다.

.. module:: smlbench.configs
    :synopsis: 각종 설정파일들을 파싱
"""

import json
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Mapping, Tuple

_MISSING = object()


def get_full_path(config_file_name: str) -> Path:
    """
    이 패키지에 포함된 설정파일의 이름을 주면, 파일 읽기를 위한 :class:`~pathlib.Path` 객체로 반환.

    :param config_file_name: 읽고싶은 설정파일의 이름
    :type config_file_name: str
    :return: 설정파일의 경로 객체
    :rtype: pathlib.Path
    """
    return Path(str(resources.files(__package__).joinpath(config_file_name)))


_cached_config_map: Dict[Path, Tuple[Dict[str, Any], float]] = dict()


def validate_and_load(config_path: Path) -> Dict[str, Any]:
    """
    JSON 설정파일의 경로를 통해 파일을 읽어 내용을 반환한다.
    같은 파일을 여러번 읽을 경우, 파일이 수정되지 않았다면 캐싱된 내용을 반환한다.

    .. note::
        * 함수 이름에는 validate이 있지만 여기서 validate이란, 존재하는 파일인지, 읽을 수 JSON파일인지만 체크한다.
          내용에대한 validation은 각 파서 내부에서 진행해야한다.

    :raises FileNotFoundError: 해당 경로에 파일이 없을 경우
    :raises json.JSONDecodeError: JSON 파일이 아닐 경우

    :param config_path: 읽고싶은 파일의 경로
    :type config_path: pathlib.Path
    :return: JSON 설정파일의 내용
    :rtype: typing.Dict[str, typing.Any]
    """
    if not config_path.is_file():
        raise FileNotFoundError(f'\'{config_path.absolute()}\' does not exist.')

    current_mtime = config_path.stat().st_mtime

    if config_path in _cached_config_map \
            and current_mtime <= _cached_config_map[config_path][1]:
        return _cached_config_map[config_path][0]

    else:
        with config_path.open() as fp:
            content = json.load(fp)
            _cached_config_map[config_path] = (content, current_mtime)
            return content


def lookup(config: Mapping[str, Any], key: str, default: Any = _MISSING) -> Any:
    """
    `mex.outputFile` 처럼 ``.`` 으로 구분된 key를 중첩된 설정에서 찾는다.
    key 전체가 그대로 들어있는 경우를 먼저 확인한다.

    :raises KeyError: `default` 가 주어지지 않았는데 key를 찾을 수 없을 경우

    :param config: 찾을 대상 설정
    :type config: typing.Mapping[str, typing.Any]
    :param key: 찾을 key
    :type key: str
    :param default: key가 없을 때 반환할 값
    :return: 찾은 값
    """
    if key in config:
        return config[key]

    node: Any = config
    for part in key.split('.'):
        if not isinstance(node, Mapping) or part not in node:
            if default is _MISSING:
                raise KeyError(key)
            return default
        node = node[part]

    return node
