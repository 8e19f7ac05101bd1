"""Reading and writing semidefinite programs in SDPA format.

A program is a linear matrix inequality given by matrices ``A0, A1, ..., An``
together with an objective vector of length ``n``. In the file the LMI is
``F1 x1 + ... + Fn xn - F0 >= 0``; the matrices handed out are
``A0 = F0`` and ``Ai = -Fi`` so the inequality reads
``A0 + A1 x1 + ... + An xn <= 0``.
"""

from __future__ import annotations

import os
import re
from collections.abc import Iterator, Sequence
from typing import IO

import numpy as np

_NUMBER = re.compile(r"[ \t\r\n\f\v]*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INTEGER = re.compile(r"\s*([+-]?\d+)")


class SdpaFormatError(ValueError):
    """Raised when an SDPA file is malformed or ends too early."""


def _is_comment(line: str) -> bool:
    stripped = line.lstrip(" \t")
    return stripped[:1] in ('"', "*")


def _read_numbers(line: str) -> list[float]:
    """Leading numbers of a line, stopping at the first token that is not one."""
    values = []
    pos = 0
    while True:
        match = _NUMBER.match(line, pos)
        if match is None:
            return values
        values.append(float(match.group(1)))
        pos = match.end()


def _read_integer(line: str) -> int:
    match = _INTEGER.match(line)
    if match is None:
        raise SdpaFormatError(f"expected an integer, got {line!r}")
    return int(match.group(1))


def _next_line(lines: Iterator[str]) -> str:
    try:
        return next(lines).rstrip("\n")
    except StopIteration:
        raise SdpaFormatError("Unexpected end of file") from None


def _read_block(lines: Iterator[str], count: int) -> list[float]:
    values: list[float] = []
    while len(values) < count:
        values.extend(_read_numbers(_next_line(lines)))
    if len(values) > count:
        raise SdpaFormatError("too many entries in a block")
    return values


def load_sdpa(stream: IO[str]) -> tuple[list[np.ndarray], np.ndarray]:
    """Read a program; return the matrices ``[A0, ..., An]`` and the objective."""
    lines = iter(stream)

    line = _next_line(lines)
    while _is_comment(line):
        line = _next_line(lines)
    variables = _read_integer(line)
    if variables < 0:
        raise SdpaFormatError("the number of variables must be non-negative")

    blocks_num = _read_integer(_next_line(lines))
    block_structure = [int(abs(x)) * (1 if x > 0 else -1) for x in _read_numbers(_next_line(lines))]
    if len(block_structure) != blocks_num:
        raise SdpaFormatError("Wrong number of blocks")

    constants = _read_numbers(_next_line(lines))
    while len(constants) < variables:
        constants.extend(_read_numbers(_next_line(lines)))
    if len(constants) > variables:
        raise SdpaFormatError("too many objective coefficients")

    matrix_dim = sum(abs(size) for size in block_structure)
    matrices = []
    for index in range(variables + 1):
        matrix = np.zeros((matrix_dim, matrix_dim))
        offset = 0
        for size in block_structure:
            width = abs(size)
            block = slice(offset, offset + width)
            if size > 0:
                values = _read_block(lines, width * width)
                matrix[block, block] = np.array(values).reshape(width, width)
            else:
                values = _read_block(lines, width)
                matrix[block, block] = np.diag(values)
            offset += width
        matrices.append(matrix if index == 0 else -matrix)

    return matrices, np.array(constants, dtype=float)


def _format_row(values: np.ndarray) -> str:
    return " ".join(f"{x:g}" for x in values)


def write_sdpa(
    stream: IO[str],
    matrices: Sequence[Sequence[Sequence[float]]] | Sequence[np.ndarray],
    objective: Sequence[float] | np.ndarray,
) -> None:
    """Write ``[A0, ..., An]`` and the objective as a single-block program."""
    mats = [np.atleast_2d(np.asarray(m, dtype=float)) for m in matrices]
    if not mats:
        raise ValueError("at least the matrix A0 is required")
    rows = mats[0].shape[0]
    if any(m.shape != (rows, rows) for m in mats):
        raise ValueError("all matrices must be square and of the same size")
    objective = np.asarray(objective, dtype=float).ravel()

    stream.write(f"{len(mats) - 1}\n")
    stream.write("1\n")
    stream.write(f"{rows}\n")
    stream.write(_format_row(objective) + "\n")
    for row in mats[0]:
        stream.write(_format_row(row) + "\n")
    for matrix in mats[1:]:
        for row in matrix:
            stream.write(_format_row(-1.0 * row) + "\n")


def read_sdpa_format_file(path: str | os.PathLike[str]) -> tuple[list[np.ndarray], np.ndarray]:
    """Read a program from the file at ``path``."""
    with open(path, encoding="utf-8") as handle:
        return load_sdpa(handle)


def write_sdpa_format_file(
    matrices: Sequence[Sequence[Sequence[float]]] | Sequence[np.ndarray],
    objective: Sequence[float] | np.ndarray,
    path: str | os.PathLike[str],
) -> None:
    """Write a program to the file at ``path``."""
    with open(path, "w", encoding="utf-8") as handle:
        write_sdpa(handle, matrices, objective)