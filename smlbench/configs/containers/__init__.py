# coding: UTF-8

"""
:mod:`containers` -- 각종 설정파일을 읽어 저장하는 결과
=========================================================

다양한 설정파일을 읽어서 :mod:`~smlbench.configs.parsers` 로 파싱 한 결과를 저장하는 컨테이너들이 정의되어있다.

.. module:: smlbench.configs.containers
    :synopsis: 설정파일을 파서를 통해 파싱된 결과
"""

from .base import BaseConfig
from .bench import BenchmarkConfig
from .system import LearningSystemInfo
