# coding: UTF-8

from __future__ import annotations

from abc import ABCMeta, abstractmethod
from typing import AbstractSet, ClassVar, MutableMapping, TYPE_CHECKING, Tuple, Type

from .task import FoldTask
from ..exceptions import ConfigurationError
from ..measures import ConfusionMatrix

if TYPE_CHECKING:
    from .. import Context
    from ..configs.containers import LearningSystemInfo


class LearningSystemDriver(metaclass=ABCMeta):
    """
    learning system 하나를 어떻게 실행하고, 그 출력을 어떻게 해석하는지 서술하는 클래스.

    job 하나마다 드라이버 객체가 하나씩 만들어지며, :meth:`evaluate` 가 fold 하나의 학습과 검증을 모두 담당한다.
    자식 클래스는 :meth:`_classify` 를 override 해서 학습된 가설이 test 예제 중 어떤 예제를 positive 로
    분류하는지 반환해야한다.

    .. note::

        * 이 클래스를 상속받는 드라이버는 `_DRIVER_TYPES` 를 override 하고 :meth:`register_driver` 로 자신을 등록해야
          `system.json` 의 `driver` 값으로 찾을 수 있다.
    """
    __slots__ = ('_info',)

    _registered_drivers: ClassVar[MutableMapping[str, Type[LearningSystemDriver]]] = dict()
    _DRIVER_TYPES: ClassVar[Tuple[str, ...]]

    _info: LearningSystemInfo

    def __init__(self, info: LearningSystemInfo) -> None:
        self._info = info

    @classmethod
    def register_driver(cls, driver: Type[LearningSystemDriver]) -> None:
        """
        `driver` 를 드라이버로 등록한다.

        :raises ValueError: 이미 등록된 드라이버 종류와 겹칠 경우

        :param driver: 등록할 드라이버
        :type driver: typing.Type[smlbench.systems.base.LearningSystemDriver]
        """
        if not issubclass(driver, LearningSystemDriver):
            raise ValueError(f'{driver} is not registrable driver')

        overlapped = {t for t in driver._DRIVER_TYPES
                      if t in LearningSystemDriver._registered_drivers
                      and LearningSystemDriver._registered_drivers[t] is not driver}
        if len(overlapped) != 0:
            raise ValueError(f'{driver} has types that overlap with existing registered types: {overlapped}')

        for driver_type in driver._DRIVER_TYPES:
            LearningSystemDriver._registered_drivers[driver_type] = driver

    @classmethod
    def get_driver(cls, driver_type: str) -> Type[LearningSystemDriver]:
        """
        :raises smlbench.exceptions.ConfigurationError: `driver_type` 을 다루는 드라이버가 등록되어있지 않을 경우
        """
        if driver_type not in LearningSystemDriver._registered_drivers:
            raise ConfigurationError(f'{driver_type} is not a registered driver type')

        return LearningSystemDriver._registered_drivers[driver_type]

    @classmethod
    def gen_driver(cls, info: LearningSystemInfo) -> LearningSystemDriver:
        return cls.get_driver(info.driver)(info)

    async def evaluate(self, context: Context) -> ConfusionMatrix:
        """
        fold 의 예제들을 job 폴더에 쓰고, learning system 을 실행하여 test 예제들에 대한 분류 결과를 만든다.

        :raises smlbench.exceptions.JobFailure: learning system 의 실행이나 출력 해석에 실패한 경우

        :param context: :class:`~smlbench.systems.task.FoldTask` 와 logger 를 담고있는 객체
        :type context: smlbench.context.Context
        :return: test 예제들에 대한 분류 결과
        :rtype: smlbench.measures.confusion.ConfusionMatrix
        """
        task = FoldTask.of(context)

        task.workdir.mkdir(parents=True, exist_ok=True)
        await task.fold.train.dump(task.train_pos_file, task.train_neg_file)
        await task.fold.test.dump(task.test_pos_file, task.test_neg_file)

        covered = await self._classify(context)
        context.logger.debug(f'{len(covered)} examples are covered on fold {task.fold.index}')

        return ConfusionMatrix.from_classification(task.fold.test.positives, task.fold.test.negatives, covered)

    @abstractmethod
    async def _classify(self, context: Context) -> AbstractSet[str]:
        """
        train 예제로 학습한 뒤 test 예제 중 positive 로 분류되는 예제들을 반환한다.

        :param context: :class:`~smlbench.systems.task.FoldTask` 와 logger 를 담고있는 객체
        :type context: smlbench.context.Context
        :return: positive 로 분류된 test 예제들
        :rtype: typing.AbstractSet[str]
        """
        pass

    @property
    def info(self) -> LearningSystemInfo:
        return self._info
