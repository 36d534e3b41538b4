"""Shell — terminal I/O around the big-integer core.

Приглашения, чтение двух строк, вывод результата и exit codes.
"""

from .config import ShellConfig
from .pipeline import MultiplyPipeline, PipelineResult

__all__ = [
    "ShellConfig",
    "MultiplyPipeline",
    "PipelineResult",
]
