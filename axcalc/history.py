# axcalc, a simple calculator.
#
# Copyright (c) 2024 zhengxyz123
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""Calculation history kept as a JSON array of expression/result records."""

import json
import logging
import math
from pathlib import Path
from typing import NamedTuple

logger = logging.getLogger(__name__)

_special = {"+∞": math.inf, "-∞": -math.inf, "NaN": math.nan}


class Entry(NamedTuple):
    expression: str
    result: float


def _dump_result(value: float) -> float | str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+∞" if value > 0 else "-∞"
    return value


def _load_result(value: float | str) -> float:
    if isinstance(value, str):
        return _special[value]
    return float(value)


def read(path: Path) -> list[Entry]:
    """Return all entries, oldest first; a missing or empty file is no history.

    Raises :class:`ValueError` when the file is not a JSON array of
    expression/result records.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return []
    if not text.strip():
        return []
    try:
        return [
            Entry(str(item["expression"]), _load_result(item["result"]))
            for item in json.loads(text)
        ]
    except (KeyError, TypeError) as error:
        raise ValueError(f"malformed history file {path}") from error


def append(path: Path, expression: str, result: float) -> None:
    entries = read(path)
    entries.append(Entry(expression, result))
    data = [
        {"expression": entry.expression, "result": _dump_result(entry.result)}
        for entry in entries
    ]
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
    logger.debug("saved %r to %s", expression, path)
