# coding: UTF-8

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, List, Optional, Tuple

from ..exceptions import AlreadyFinalizedError, FinalizationError

Job = Callable[[], Awaitable[None]]


class WorkerPool:
    """
    한 번의 벤치마크 실행 전체가 공유하는 고정 크기의 worker pool.

    `size` 개의 worker task 가 하나의 FIFO 큐에서 job 을 꺼내 실행하기 때문에,
    scenario 나 fold 가 몇개이든 동시에 실행되는 job 은 `size` 개를 넘지 않는다.
    `size` 가 1일 경우 worker 하나가 모든 job 을 순서대로 실행한다.

    .. note::

        * :meth:`submit` 은 큐에 넣기만 하고 바로 반환된다. 실제 실행은 호출자가 이벤트 루프에게 제어를 넘길 때 시작된다.
        * :meth:`drain` 은 timeout 없이 모든 job 이 끝날 때 까지 기다린다.
          실행이 멈춘 learning system 이 있다면 :meth:`drain` 도 끝나지 않는다.
        * job 은 자신의 실패를 스스로 처리해야한다. job 밖으로 나온 예외는 프로그래밍 오류로 보고,
          :meth:`drain` 이 끝난 후 다시 던진다.
    """
    __slots__ = ('_size', '_queue', '_workers', '_is_finalized', '_errors')

    _size: int
    _queue: Optional[asyncio.Queue]
    _workers: Tuple[asyncio.Task, ...]
    _is_finalized: bool
    _errors: List[BaseException]

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f'The size of worker pool should be at least 1, but {size} is given')

        self._size = size
        self._queue = None
        self._workers = tuple()
        self._is_finalized = False
        self._errors = list()

    def _start_workers(self) -> None:
        self._queue = asyncio.Queue()
        self._workers = tuple(asyncio.create_task(self._work(worker_id)) for worker_id in range(self._size))

        if self._size == 1:
            logging.getLogger('smlbench').debug('Single worker has been started')
        else:
            logging.getLogger('smlbench').debug(f'{self._size} workers have been started')

    async def _work(self, worker_id: int) -> None:
        while True:
            job: Job = await self._queue.get()

            try:
                await job()
            except asyncio.CancelledError:
                raise
            except Exception as e:
                logging.getLogger('smlbench').critical(f'Worker {worker_id} got an unexpected error: {e!r}')
                self._errors.append(e)
            finally:
                self._queue.task_done()

    def submit(self, job: Job) -> None:
        """
        `job` 을 큐에 넣는다. 이벤트 루프 안에서 호출되어야 한다.

        :raises smlbench.exceptions.AlreadyFinalizedError: :meth:`drain` 이 이미 호출된 경우

        :param job: 인자 없이 호출하면 awaitable 을 반환하는 callable
        :type job: typing.Callable[[], typing.Awaitable[None]]
        """
        if self._is_finalized:
            raise AlreadyFinalizedError('Can not submit a job to the drained worker pool.')

        if self._queue is None:
            self._start_workers()

        self._queue.put_nowait(job)

    async def drain(self) -> None:
        """
        더 이상 job 을 받지 않고, 이미 들어온 모든 job 이 끝날 때 까지 기다린다.

        :raises smlbench.exceptions.FinalizationError: 기다리는 도중 취소된 경우
        """
        self._is_finalized = True

        if self._queue is None:
            return

        try:
            await self._queue.join()

        except asyncio.CancelledError as e:
            await self._stop_workers()
            raise FinalizationError('Jobs could not finish') from e

        await self._stop_workers()

        if len(self._errors) != 0:
            raise self._errors[0]

    async def _stop_workers(self) -> None:
        for worker in self._workers:
            worker.cancel()

        await asyncio.gather(*self._workers, return_exceptions=True)

    @property
    def size(self) -> int:
        return self._size

    @property
    def is_finalized(self) -> bool:
        return self._is_finalized

    @property
    def pending(self) -> int:
        """ 아직 시작되지 않은 job 의 수 """
        if self._queue is None:
            return 0
        return self._queue.qsize()
