# coding: UTF-8

"""
:mod:`parsers` -- 각종 설정파일을 읽어들이는 파서들
=========================================================

다양한 설정파일을 읽어서 파싱하여 :mod:`~smlbench.configs.containers` 의 컨테이너를 생성한다.

* 벤치마크 설정 파일: :class:`~smlbench.configs.parsers.bench.BenchmarkParser`
* learning system 의 `system.json`: :class:`~smlbench.configs.parsers.system.SystemParser`

.. module:: smlbench.configs.parsers
    :synopsis: JSON 형태의 설정을 읽는 파서
"""

from .base import BaseParser, LocalReadParser
from .bench import BenchmarkParser
from .system import SystemParser
