# coding: UTF-8

"""
:mod:`export` -- 벤치마크 결과를 파일로 내보내기
=================================================

실행이 모두 끝난 후 :class:`~smlbench.results.ResultAggregator` 에 모인 결과와 실행 정보
(:class:`~smlbench.export.base.RunMetadata`) 를 설정의 `mex.outputFile` 경로에 내보낸다.
내보내는 형식에 따라 경로 뒤에 확장자가 붙는다.

.. module:: smlbench.export
    :synopsis: 벤치마크 결과 내보내기
"""

from .base import BaseExporter, RunMetadata
from .json_writer import JsonResultExporter
