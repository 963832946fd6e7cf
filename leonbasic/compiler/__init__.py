"""External interpreter contracts and output mapping."""

from leonbasic.compiler.output import (
    CompilerOutput,
    CompilerOutputSource,
    parse_compiler_output,
)
from leonbasic.compiler.resolver import (
    CompilerPathResolver,
    NullCompilerPathResolver,
    StaticCompilerPathResolver,
)

__all__ = [
    "CompilerOutput",
    "CompilerOutputSource",
    "CompilerPathResolver",
    "NullCompilerPathResolver",
    "StaticCompilerPathResolver",
    "parse_compiler_output",
]
