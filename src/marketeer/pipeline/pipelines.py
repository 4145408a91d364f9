# topmark:header:start
#
#   project      : X4 Marketeer Unlocker
#   file         : pipelines.py
#   file_relpath : src/marketeer/pipeline/pipelines.py
#   license      : MIT
#   copyright    : (c) 2025 Robert Peter Meyer
#
# topmark:header:end

"""The unlock pipeline as an immutable step sequence.

```mermaid
flowchart LR
  B[backup] --> D[decompress] --> P[parse] --> U[unlock] --> S[serialize] --> C[compress]
```

Dry runs use the same steps: the backup step and the compressor's sink consult
``Config.dry_run`` and write nothing.
"""

from __future__ import annotations

from typing import Final

from marketeer.pipeline.steps.backup import BackupStep
from marketeer.pipeline.steps.base import BaseStep
from marketeer.pipeline.steps.compressor import CompressStep
from marketeer.pipeline.steps.decompressor import DecompressStep
from marketeer.pipeline.steps.parser import ParseStep
from marketeer.pipeline.steps.serializer import SerializeStep
from marketeer.pipeline.steps.unlocker import UnlockStep

UNLOCK_PIPELINE: Final[tuple[BaseStep, ...]] = (
    BackupStep(),
    DecompressStep(),
    ParseStep(),
    UnlockStep(),
    SerializeStep(),
    CompressStep(),
)
