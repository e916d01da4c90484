# coding: UTF-8

"""
cross-validation 을 위해 learning problem 의 예제들을 fold 로 나누는 기능.

같은 (seed, scenario, fold 수) 에 대해서는 언제나, 다른 프로세스에서 실행하더라도 같은 결과가 나와야한다.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import ClassVar, Dict, List, Tuple, TYPE_CHECKING

import aiofiles

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True)
class Examples:
    __slots__ = ('positives', 'negatives')

    positives: Tuple[str, ...]
    negatives: Tuple[str, ...]

    _EXTENSIONS: ClassVar[Dict[str, str]] = {'prolog': 'pl'}
    _DEFAULT_EXTENSION: ClassVar[str] = 'txt'
    _COMMENT_PREFIXES: ClassVar[Tuple[str, ...]] = ('%', '#')

    @classmethod
    def file_extension(cls, language: str) -> str:
        return cls._EXTENSIONS.get(language, cls._DEFAULT_EXTENSION)

    @classmethod
    async def load(cls, problem_dir: Path, language: str) -> Examples:
        """
        learning problem 폴더에서 `pos.<ext>` 와 `neg.<ext>` 를 읽는다.
        빈 줄과 `%` 나 `#` 로 시작하는 줄은 무시하며, 나머지 한 줄이 예제 하나가 된다.

        :raises FileNotFoundError: 예제 파일이 없을 경우
        """
        ext = cls.file_extension(language)

        return cls(await cls._read(problem_dir / f'pos.{ext}'), await cls._read(problem_dir / f'neg.{ext}'))

    @classmethod
    async def _read(cls, path: Path) -> Tuple[str, ...]:
        async with aiofiles.open(path) as afp:
            content: str = await afp.read()

        return tuple(
                line for line in map(str.strip, content.splitlines())
                if line and not line.startswith(cls._COMMENT_PREFIXES)
        )

    async def dump(self, pos_path: Path, neg_path: Path) -> None:
        for path, examples in ((pos_path, self.positives), (neg_path, self.negatives)):
            async with aiofiles.open(path, mode='w') as afp:
                await afp.write(''.join(f'{example}\n' for example in examples))


@dataclass(frozen=True)
class Fold:
    """ fold 하나의 train / test 예제 """
    __slots__ = ('index', 'train', 'test')

    index: int
    train: Examples
    test: Examples


def _deal(items: List[str], folds: int) -> List[Tuple[str, ...]]:
    return [tuple(items[i::folds]) for i in range(folds)]


def partition(examples: Examples, folds: int, seed: int) -> Tuple[Fold, ...]:
    """
    positive 와 negative 예제를 각각 `seed` 로 섞은 후, 돌아가면서 fold 에 하나씩 나눠준다 (stratified).
    fold `i` 의 test 예제는 `i` 번째로 나눠받은 예제들이고, 나머지 fold 의 예제들이 train 예제가 된다.

    :param examples: learning problem 의 전체 예제
    :type examples: smlbench.benchmark.folds.Examples
    :param folds: fold 수
    :type folds: int
    :param seed: 섞을 때 쓰는 seed
    :type seed: int
    :return: fold 번호 순서대로 정렬된 fold 들
    :rtype: typing.Tuple[smlbench.benchmark.folds.Fold, ...]
    """
    if folds < 2:
        raise ValueError(f'At least 2 folds are required, but {folds} is given')

    rng = random.Random(seed)

    positives = list(examples.positives)
    rng.shuffle(positives)
    negatives = list(examples.negatives)
    rng.shuffle(negatives)

    pos_folds = _deal(positives, folds)
    neg_folds = _deal(negatives, folds)

    ret: List[Fold] = list()

    for idx in range(folds):
        train_pos = tuple(e for i, part in enumerate(pos_folds) if i != idx for e in part)
        train_neg = tuple(e for i, part in enumerate(neg_folds) if i != idx for e in part)
        ret.append(Fold(idx, Examples(train_pos, train_neg), Examples(pos_folds[idx], neg_folds[idx])))

    return tuple(ret)
