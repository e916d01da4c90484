# coding: UTF-8

"""
:mod:`results` -- job 들의 실행 결과를 모으는 저장소
=====================================================

job (learning system x scenario x fold) 하나는 끝날 때 :class:`ResultEntry` 를 정확히 하나 남긴다.
실패한 job 도 :attr:`ResultStatus.FAILED` 상태의 결과를 남기기 때문에, 결과가 없는 job 은 존재하지 않는다.

.. module:: smlbench.results
    :synopsis: job 실행 결과 저장소
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from .exceptions import DuplicateResultError


class ResultStatus(enum.Enum):
    SUCCEEDED = 'succeeded'
    FAILED = 'failed'


@dataclass(frozen=True, order=True)
class ResultKey:
    """
    결과를 구분하는 key.

    같은 scenario 나 learning system 이 설정에 여러번 적혀있을 경우 `trial` 로 구분하며, 처음 실행되는 것이 0이다.
    """
    __slots__ = ('system', 'scenario', 'fold', 'trial')

    system: str
    scenario: str
    fold: int
    trial: int

    def __str__(self) -> str:
        if self.trial == 0:
            return f'{self.scenario}.{self.system}.fold-{self.fold}'
        else:
            return f'{self.scenario}.{self.system}.fold-{self.fold}.trial-{self.trial}'


@dataclass(frozen=True)
class ResultEntry:
    __slots__ = ('key', 'status', 'measures', 'error', 'duration')

    key: ResultKey
    status: ResultStatus
    measures: Mapping[str, Any]
    error: Optional[str]
    duration: float

    @property
    def failed(self) -> bool:
        return self.status is ResultStatus.FAILED

    def as_dict(self) -> Dict[str, Any]:
        return {
            'system': self.key.system,
            'scenario': self.key.scenario,
            'fold': self.key.fold,
            'trial': self.key.trial,
            'status': self.status.value,
            'measures': dict(self.measures),
            'error': self.error,
            'duration': self.duration,
        }


class ResultAggregator:
    """
    :class:`ResultEntry` 들을 key 별로 한번씩만 기록하는 저장소.

    job 들은 모두 같은 이벤트 루프에서 결과를 기록하며, key 가 job 마다 다르기 때문에 별도의 lock 은 필요없다.
    같은 key 로 두번 기록하는 것은 프로그래밍 오류이므로 덮어쓰지 않고 :class:`~smlbench.exceptions.DuplicateResultError`
    를 던진다.
    """
    __slots__ = ('_entries',)

    _entries: Dict[ResultKey, ResultEntry]

    def __init__(self) -> None:
        self._entries = dict()

    def record(self, entry: ResultEntry) -> None:
        if entry.key in self._entries:
            raise DuplicateResultError(f'Result of {entry.key} is already recorded')

        self._entries[entry.key] = entry

    def succeed(self, key: ResultKey, measures: Mapping[str, Any], duration: float) -> ResultEntry:
        entry = ResultEntry(key, ResultStatus.SUCCEEDED, measures, None, duration)
        self.record(entry)
        return entry

    def fail(self, key: ResultKey, error: str, duration: float) -> ResultEntry:
        entry = ResultEntry(key, ResultStatus.FAILED, dict(), error, duration)
        self.record(entry)
        return entry

    def __getitem__(self, key: ResultKey) -> ResultEntry:
        return self._entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ResultEntry]:
        return iter(self.entries())

    def entries(self) -> Tuple[ResultEntry, ...]:
        """ key 순서 (system, scenario, fold, trial) 로 정렬된 결과들 """
        return tuple(self._entries[key] for key in sorted(self._entries))

    def failed(self) -> List[ResultEntry]:
        return [entry for entry in self.entries() if entry.failed]

    def of_system(self, system: str) -> List[ResultEntry]:
        return [entry for entry in self.entries() if entry.key.system == system]
