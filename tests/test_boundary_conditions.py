"""Test boundary conditions and chunking behaviour."""

import json
import random
import time

from jsoncomplete import JSONBuilder, StructuralError


SAMPLE = {
    "name": "Alice",
    "quote": "She said \"hi\" \\ left {early} [ok], é世",
    "items": [
        {"id": 1, "value": "first", "tags": []},
        {"id": 2, "value": "second", "tags": ["a", "b"]},
    ],
    "ratio": -1.5e3,
    "flags": [True, False, None],
    "nested": {"deep": {"deeper": [[1, 2], [3]]}},
}


def snapshot(builder):
    return (
        builder.text,
        builder.stack,
        builder.state_name,
        builder.escape_pending,
        builder.context.separator_at,
        builder.render(),
    )


def test_single_character_chunks():
    """Feeding one character at a time matches a single write."""
    json_str = json.dumps(SAMPLE)

    whole = JSONBuilder()
    whole.write(json_str)

    chars = JSONBuilder()
    for char in json_str:
        chars.write(char)

    assert snapshot(chars) == snapshot(whole)
    assert chars.value().value == SAMPLE


def test_random_chunk_boundaries():
    """Any partition of the stream yields the same state at every prefix end."""
    json_str = json.dumps(SAMPLE, indent=2, ensure_ascii=False)
    rng = random.Random(42)

    for _ in range(20):
        builder = JSONBuilder()
        pos = 0
        while pos < len(json_str):
            size = rng.randint(1, 9)
            builder.write(json_str[pos:pos + size])
            pos += size

            reference = JSONBuilder()
            reference.write(json_str[:pos])
            assert snapshot(builder) == snapshot(reference)

        assert builder.value().value == SAMPLE


def test_empty_write_is_noop():
    """Writing an empty string changes nothing."""
    builder = JSONBuilder()
    builder.write('{"a": [')
    before = snapshot(builder)

    builder.write('')

    assert snapshot(builder) == before


def test_empty_builder_renders_empty_string():
    """Nothing written means nothing to decode."""
    builder = JSONBuilder()

    assert builder.render() == ''
    assert builder.stack == ''
    value, error = builder.value()
    assert value is None
    assert error is not None


def test_every_prefix_is_accepted():
    """No prefix of a valid document raises a structural error."""
    json_str = json.dumps(SAMPLE, indent=1)

    for end in range(len(json_str) + 1):
        builder = JSONBuilder()
        try:
            builder.write(json_str[:end])
        except StructuralError as e:
            raise AssertionError(f"prefix {json_str[:end]!r} rejected: {e}")

        rendered = builder.render()
        # All owed closers are flushed into the render
        assert rendered.endswith(builder.tracker.completion())


def test_every_prefix_renders_balanced():
    """Every render of a prefix closes all brackets it opens."""
    json_str = json.dumps(SAMPLE)

    for end in range(len(json_str) + 1):
        builder = JSONBuilder()
        builder.write(json_str[:end])

        check = JSONBuilder()
        check.write(builder.render())
        assert check.stack == ''


def test_top_level_array():
    """Arrays at the root are completed too."""
    builder = JSONBuilder()
    builder.write('[{"id": 1}, {"id"')

    assert builder.render() == '[{"id": 1}, {"id"}]'
    assert not builder.value().ok

    builder.write(': 2}')
    assert builder.render() == '[{"id": 1}, {"id": 2}]'
    assert builder.value().value == [{"id": 1}, {"id": 2}]


def test_top_level_string():
    """A bare string at the root is closed."""
    builder = JSONBuilder(str)
    builder.write('"partial')

    assert builder.render() == '"partial"'
    assert builder.value().value == "partial"


def test_empty_containers():
    """Empty objects and arrays open and close cleanly."""
    builder = JSONBuilder()
    builder.write('{"a": {}, "b": [], "c": [{}, []]}')

    assert builder.stack == ''
    assert builder.value().value == {"a": {}, "b": [], "c": [{}, []]}


def test_deep_nesting():
    """Deeply nested arrays close in the right order."""
    depth = 200
    builder = JSONBuilder()
    builder.write('[' * depth + '"x')

    assert builder.stack == ']' * depth + '"'
    assert builder.render() == '[' * depth + '"x"' + ']' * depth


def test_separator_then_whitespace_split_across_chunks():
    """A dangling comma followed by whitespace chunks is elided."""
    builder = JSONBuilder()
    for chunk in ['{"a": "b"', ' ', ',', ' ', '\n', '\t']:
        builder.write(chunk)

    assert builder.render() == '{"a": "b"}'
    assert builder.context.separator_at == 10


def test_large_single_write_is_linear():
    """A multi-megabyte document written at once is scanned in linear time."""
    json_str = json.dumps({"content": "x" * 2_000_000, "tags": ["a", "b"]})

    builder = JSONBuilder()
    start = time.perf_counter()
    builder.write(json_str)
    elapsed = time.perf_counter() - start

    assert elapsed < 30
    assert len(builder.context) == len(json_str)
    assert builder.text == json_str
    assert builder.render() == json_str


def test_offsets_stay_exact_across_many_writes():
    """Lengths and comma offsets agree with the joined content."""
    builder = JSONBuilder()
    for chunk in ['{"a": ', '"xy', 'z"', ' ,', '  ']:
        builder.write(chunk)
        assert len(builder.context) == len(builder.text)

    assert builder.text[builder.context.separator_at] == ','
    assert builder.render() == '{"a": "xyz"}'
