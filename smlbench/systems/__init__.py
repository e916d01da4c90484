# coding: UTF-8

"""
:mod:`systems` -- learning system 별로 실제 실행 방법을 서술
=============================================================

벤치마크되는 learning system 들은 외부 프로그램이며, 이 모듈의 :class:`드라이버 <smlbench.systems.base.LearningSystemDriver>`
가 job 하나 (learning system x scenario x fold) 마다 learning system 을 실행하고 그 출력을 해석한다.

learning system 의 `system.json` 에 적힌 `driver` 값으로 드라이버를 찾으며, 기본값은
:class:`~smlbench.systems.script.ScriptDriver` (`script`) 이다.

새로운 방식으로 실행되는 learning system 을 사용하려면 :class:`~smlbench.systems.base.LearningSystemDriver` 를 상속받는
새로운 드라이버를 작성하고 :meth:`~smlbench.systems.base.LearningSystemDriver.register_driver` 로 등록해야한다.

.. module:: smlbench.systems
    :synopsis: learning system 의 실행과 출력 해석
"""

from .base import LearningSystemDriver
from .script import ScriptDriver
from .task import FoldTask

LearningSystemDriver.register_driver(ScriptDriver)
