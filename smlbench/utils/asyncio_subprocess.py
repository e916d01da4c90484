# coding: UTF-8

import asyncio
from subprocess import CalledProcessError
from typing import Optional, Tuple

import psutil


def kill_tree(pid: int) -> None:
    """ `pid` 프로세스와 그 자식 프로세스들을 모두 죽인다. 이미 종료된 프로세스는 무시한다. """
    try:
        parent = psutil.Process(pid)
        children = parent.children(recursive=True)
    except psutil.NoSuchProcess:
        return

    for proc in (*children, parent):
        try:
            proc.kill()
        except psutil.NoSuchProcess:
            pass


# noinspection PyShadowingBuiltins
async def check_run(program: str, *args: str, input: Optional[bytes] = None, **kwargs) -> Tuple[bytes, bytes]:
    """
    `program` 을 실행하고 종료될 때 까지 기다린다.
    기다리는 도중 취소되면 실행한 프로세스를 자식 프로세스까지 포함해서 모두 죽인다.

    :raises subprocess.CalledProcessError: 프로세스가 0이 아닌 값으로 종료 되었을 경우

    :param program: 실행할 프로그램
    :type program: str
    :param input: 실행한 프로세스의 stdin으로 보낼 값
    :type input: typing.Optional[bytes]
    :return: 실행한 프로세스의 stdout과 stderr
    :rtype: typing.Tuple[bytes, bytes]
    """
    if input is not None:
        if 'stdin' in kwargs:
            raise ValueError('stdin and input arguments may not both be used.')
        kwargs['stdin'] = asyncio.subprocess.PIPE

    kwargs.setdefault('stdout', asyncio.subprocess.PIPE)
    kwargs.setdefault('stderr', asyncio.subprocess.PIPE)

    proc = await asyncio.create_subprocess_exec(program, *args, **kwargs)

    try:
        out, err = await proc.communicate(input)
    except asyncio.CancelledError:
        kill_tree(proc.pid)
        raise

    if proc.returncode:
        raise CalledProcessError(proc.returncode, (program, *args), output=out, stderr=err)

    return out, err
