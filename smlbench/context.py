# coding: UTF-8

from __future__ import annotations

import logging
from abc import ABCMeta, abstractmethod
from typing import Any, Dict, Optional, Type


class Context:
    """
    하나의 job (learning system x scenario x fold) 이 실행되는 동안 필요한 객체들을 타입별로 하나씩 담아두는 컨테이너.

    :class:`ContextReadable` 를 상속받은 클래스들은 :meth:`ContextReadable.of` 를 통해 자신의 객체를 꺼내갈 수 있다.
    """
    __slots__ = ('_variable_dict',)

    _variable_dict: Dict[Type, Any]

    def __init__(self) -> None:
        self._variable_dict = dict()

    def _assign(self, val: Any, cls: Optional[Type] = None) -> None:
        if cls is None:
            cls = type(val)
        self._variable_dict[cls] = val

    @property
    def logger(self) -> logging.Logger:
        return self._variable_dict[logging.Logger]


class ContextReadable(metaclass=ABCMeta):
    @classmethod
    @abstractmethod
    def of(cls, context: Context) -> Any:
        pass
