"""Detect super-linear parse times by timing repeated input patterns.

A :class:`Pattern` is a prefix, a piece repeated many times, and a suffix.
The input is grown in evenly spaced steps, each step is parsed and timed on
the calling thread's CPU clock, and the resulting ``(repeats, nanoseconds)``
samples are scored with :func:`cmarkhtml.scoring.slope_stddev`.
"""

from __future__ import annotations

import enum
import json
import time
from collections.abc import Callable, Iterable
from dataclasses import asdict, dataclass, field

from cmarkhtml.scoring import Sample, slope_stddev

SAMPLE_SIZE = 5
"""Number of samples taken per pattern."""

NUM_BYTES = 32 * 1024
"""Byte length of the largest input built from a pattern."""

MAX_MILLIS = 500
"""Parsing that takes longer than this is assumed to be super-linear."""

TEST_COUNT = 5
"""How many times a non-linear result is retested before it is reported."""

Parse = Callable[[str], Iterable[object]]


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


@dataclass(frozen=True)
class Pattern:
    """An input of the form ``prefix + repeating_pattern * n + suffix``."""

    prefix: str = ""
    repeating_pattern: str = ""
    suffix: str = ""

    @classmethod
    def from_text(cls, text: str) -> Pattern:
        """A pattern that only repeats ``text``."""
        return cls(repeating_pattern=text)

    def to_json(self) -> str:
        """Serialise the pattern as a JSON object."""
        return json.dumps(asdict(self), ensure_ascii=False)

    @classmethod
    def from_json(cls, data: str) -> Pattern:
        """Read a pattern from the JSON produced by :meth:`to_json`."""
        obj = json.loads(data)
        if not isinstance(obj, dict):
            raise ValueError("a pattern must be a JSON object")
        values = {}
        for name in ("prefix", "repeating_pattern", "suffix"):
            if name not in obj:
                raise ValueError(f"missing field {name!r}")
            if not isinstance(obj[name], str):
                raise ValueError(f"field {name!r} must be a string")
            values[name] = obj[name]
        return cls(**values)


class Verdict(enum.Enum):
    """Outcome of timing a pattern."""

    LINEAR = "linear"
    NON_LINEAR = "non_linear"
    TOO_LONG = "too_long"


@dataclass(frozen=True)
class PatternResult:
    """A verdict together with the statistic and samples it was drawn from."""

    verdict: Verdict
    statistic: float = 0.0
    samples: tuple[Sample, ...] = field(default_factory=tuple)

    def score(self) -> float:
        """The scoring statistic; ``0.0`` when parsing took too long."""
        if self.verdict is Verdict.TOO_LONG:
            return 0.0
        return self.statistic


def sample_pattern(
    pattern: Pattern,
    buf: str,
    sample_size: int,
    sample_count: int,
    num_bytes: int = NUM_BYTES,
) -> tuple[str, int]:
    """Grow ``buf`` towards step ``sample_size`` of ``sample_count``.

    Appends as many repetitions as fit into the step's share of ``num_bytes``
    (leaving room for the suffix), then the suffix. Returns the new buffer and
    the number of repetitions appended.
    """
    repeat_len = _byte_len(pattern.repeating_pattern)
    if repeat_len == 0:
        raise ValueError("the repeating pattern must not be empty")
    target_byte_count = sample_size * num_bytes // sample_count
    target_repeat_bytes = target_byte_count - _byte_len(buf) - _byte_len(pattern.suffix)
    if target_repeat_bytes < 0:
        raise ValueError("the buffer already exceeds the target size")
    num_repeats = target_repeat_bytes // repeat_len
    return buf + pattern.repeating_pattern * num_repeats + pattern.suffix, num_repeats


def time_needed(parse: Parse, sample: str) -> int:
    """Thread CPU time in nanoseconds taken to parse ``sample`` completely."""
    start = time.thread_time_ns()
    for _event in parse(sample):
        pass
    return time.thread_time_ns() - start


def test_pattern(
    pattern: Pattern,
    parse: Parse,
    sample_count: int = SAMPLE_SIZE,
    num_bytes: int = NUM_BYTES,
    max_millis: int = MAX_MILLIS,
) -> PatternResult:
    """Time ``pattern`` at ``sample_count`` input sizes and score the growth."""
    samples: list[Sample] = []
    buf = pattern.prefix
    repeats = 0
    for step in range(1, sample_count + 1):
        buf, added = sample_pattern(pattern, buf, step, sample_count, num_bytes)
        repeats += added
        duration = time_needed(parse, buf)
        samples.append((float(repeats), float(duration)))
        if duration // 1_000_000 > max_millis:
            return PatternResult(Verdict.TOO_LONG, 0.0, tuple(samples))
        if pattern.suffix:
            buf = buf[: len(buf) - len(pattern.suffix)]

    statistic, non_linear = slope_stddev(samples)
    verdict = Verdict.NON_LINEAR if non_linear else Verdict.LINEAR
    return PatternResult(verdict, statistic, tuple(samples))


test_pattern.__test__ = False  # type: ignore[attr-defined]


def _format_samples(samples: Iterable[Sample]) -> str:
    return "[" + ", ".join(f"({x!r}, {y!r})" for x, y in samples) + "]"


def check_pattern(
    pattern: Pattern, parse: Parse, test_count: int = TEST_COUNT
) -> PatternResult:
    """Test ``pattern`` until it looks linear, at most ``test_count`` times.

    Non-linear results are retested to weed out timing noise; a pattern is
    reported on standard output only if every run is non-linear or if any
    run takes too long.
    """
    result = PatternResult(Verdict.TOO_LONG)
    for _ in range(test_count):
        result = test_pattern(pattern, parse)
        if result.verdict is Verdict.LINEAR:
            return result
        if result.verdict is Verdict.TOO_LONG:
            print(
                "\npossible non-linear behaviour found due to exceeding "
                "MAX_MILLIS (parsing took too long)\n"
                f"pattern: {pattern.to_json()}\n"
                "score: 0\n"
                f"{_format_samples(result.samples)}\n"
            )
            return result

    if result.verdict is Verdict.NON_LINEAR:
        print(
            "\npossible non-linear behaviour found\n"
            f"pattern: {pattern.to_json()}\n"
            f"score: {result.statistic}\n"
            f"{_format_samples(result.samples)}\n"
        )
    return result


def regression_patterns() -> list[Pattern]:
    """Patterns that once caused super-linear parsing."""
    text = Pattern.from_text
    return [
        text("[]("),
        text("``\\"),
        text("a***"),
        Pattern(prefix="", repeating_pattern="* ", suffix="a"),
        text("[ (]("),
        text("[*_a"),
        text("a <![CDATA["),
        text("a <!A"),
        text("a<?"),
        text("[[]()"),
        text("[](<"),
        text('["[]]\\('),
        text(")-\r%<["),
        text("\x00[@[{<"),
        text("a <!A "),
        text("a <? "),
        text("[ (]( "),
        Pattern(prefix="", repeating_pattern="`a`", suffix="`"),
        text("\\``"),
        text("a***b~~"),
        text("*~~\u00a0"),
        text("[*_a"),
        text("a***_b__"),
        text("a***"),
        text("[[]()"),
        text("[a](<"),
    ]