# cmarkhtml

Building blocks for working with Markdown documents as streams of events.

- `cmarkhtml.events` defines the `Event` and `Tag` values that describe a parsed document.
- `cmarkhtml.linklabel` scans and normalises link reference labels.
- `cmarkhtml.spec` reads example cases out of CommonMark-style spec files.
- `cmarkhtml.scoring` and `cmarkhtml.linearity` check whether a parser's running time grows linearly with its input.

The package has no dependencies outside the standard library.

## Installation

```
pip install cmarkhtml
```

To run the tests:

```
pip install "cmarkhtml[test]"
pytest
```

## Events

```python
from cmarkhtml.events import Event, Tag, TagKind

events = [
    Event.start(Tag(TagKind.PARAGRAPH)),
    Event.text("Hello "),
    Event.start(Tag(TagKind.EMPHASIS)),
    Event.text("world"),
    Event.end(Tag(TagKind.EMPHASIS)),
    Event.end(Tag(TagKind.PARAGRAPH)),
]
```

`Event` is a frozen dataclass. Its `kind` is an `EventKind`. The class methods
that build events are:

- `start` and `end`, which take a `Tag`
- `text`, `code` and `html`
- `soft_break`, `hard_break` and `rule`
- `footnote_reference`
- `task_list_marker`

`Tag` is also frozen. Its `kind` is a `TagKind`. Only the fields that belong to
that kind are meaningful:

- `level` for headings
- `info` for code blocks
- `start` for lists, which is `None` for a bullet list
- `alignments` for tables, a tuple of `Alignment`
- `link_type`, `dest` and `title` for links and images, where `link_type` is a `LinkType`
- `name` for footnote definitions

Because events are plain values, a stream can be filtered or rewritten with
ordinary Python. For example, this generator expression replaces text and drops
image tags:

```python
from cmarkhtml.events import EventKind, TagKind

rewritten = (
    Event.text(e.value.replace("Peter", "John")) if e.kind is EventKind.TEXT else e
    for e in events
    if not (e.tag is not None and e.tag.kind is TagKind.IMAGE)
)
```

## Link labels

`scan_link_label_rest(text, linebreak_handler)` scans a label whose opening
bracket has already been consumed.

- It returns `(consumed, label)`. `consumed` includes the closing bracket.
- It returns `None` when no valid label is found. This covers:
  - a nested `[`
  - a label that is only whitespace
  - more than one line break
  - a label longer than 1000 code points
  - no closing bracket
- Runs of whitespace other than a single space are collapsed to one space.
- At a line break, `linebreak_handler` receives the text that follows the break. It returns how many characters to skip, or `None` to abort.

```python
from cmarkhtml.linklabel import scan_link_label_rest

_, label = scan_link_label_rest("«\t\tBlurry Eyes\t\t»][blurry_eyes]", lambda rest: None)
assert label == "« Blurry Eyes »"
```

`normalize_label(label)` returns the case-folded key used to match labels.
`ReferenceLabel(kind, label)` pairs a label with a `ReferenceKind` (`LINK` or
`FOOTNOTE`), and its `key` property gives the normalised label.

## Spec files

`iter_spec_cases(text)` yields `SpecCase(original, expected)` for every example
block in a spec document, in the order the blocks appear. Each `→` is turned
back into a tab. Scanning stops at the first incomplete example.
`read_spec_file(path)` reads a UTF-8 file and returns the cases as a list.

## Linearity checks

`cmarkhtml.scoring` judges `(length, time)` samples:

- `slope_stddev(samples)` returns the standard deviation of the slopes between every pair of points. It flags the samples as non-linear above `ACCEPTANCE_STDDEV` (300).
- `pearson_correlation(samples)` returns the correlation coefficient. It flags the samples as non-linear below `ACCEPTANCE_CORRELATION` (0.995).

`cmarkhtml.linearity` times a parse function of your choosing. The function
takes a string and returns an iterable of events.

- `Pattern(prefix, repeating_pattern, suffix)` describes an input. `Pattern.from_text` builds one from a repeated part alone. `to_json` and `from_json` serialise it; `from_json` raises `ValueError` on malformed data.
- `sample_pattern(pattern, buf, sample_size, sample_count, num_bytes)` grows a buffer towards one step of the target size. It returns the new buffer and the number of repeats added.
- `time_needed(parse, sample)` returns the thread CPU time, in nanoseconds, taken to consume every event.
- `test_pattern(pattern, parse, ...)` times the pattern at `SAMPLE_SIZE` input sizes, up to `NUM_BYTES`. It returns a `PatternResult` with a `Verdict` of `LINEAR`, `NON_LINEAR` or `TOO_LONG`. The verdict is `TOO_LONG` if a step exceeds `MAX_MILLIS`.
- `check_pattern(pattern, parse, test_count)` retests non-linear results up to `test_count` times. It prints a report to standard output when every run is non-linear, or when a run takes too long.
- `regression_patterns()` lists inputs known to have caused super-linear parsing.

```python
from cmarkhtml.linearity import Verdict, check_pattern, regression_patterns

for pattern in regression_patterns():
    result = check_pattern(pattern, my_parser)
    assert result.verdict is Verdict.LINEAR
```

## What this package does not do

The package contains:

- no Markdown parser that produces events
- no renderer that turns events into HTML
- no HTML or URL escaping helpers
- no command-line program

The linearity tools need a parse function supplied by the caller.