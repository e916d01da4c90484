# coding: UTF-8

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from .base import BaseExporter

if TYPE_CHECKING:
    from pathlib import Path

    from .base import RunMetadata
    from ..results import ResultAggregator


class JsonResultExporter(BaseExporter):
    EXTENSION = 'json'

    def write(self, results: ResultAggregator, metadata: RunMetadata, path: Path) -> Path:
        output = self.output_path(path)
        output.parent.mkdir(parents=True, exist_ok=True)

        with output.open(mode='w') as fp:
            json.dump({
                'metadata': metadata.as_dict(),
                'results': [entry.as_dict() for entry in results.entries()],
            }, fp, indent=4)

        return output
