"""Code extraction from model responses."""

from prompt_edit.core.edit import extract_code


def test_single_block_round_trips():
    code = "def f(x):\n    return x + 1"
    text = f"Sure, here it is:\n\n```python\n\n{code}\n\n```\nHope that helps."
    assert extract_code(text) == code


def test_no_fence_returns_trimmed_text():
    assert extract_code("\n  x = 1\n\n") == "x = 1"


def test_blocks_are_concatenated():
    text = "A:\n```\none\n```\nthen\n```js\ntwo\n```\n"
    assert extract_code(text) == "one\ntwo"


def test_unclosed_fence_keeps_rest():
    assert extract_code("```\nkeep\nthis") == "keep\nthis"


def test_indented_fence_counts():
    assert extract_code("  ```py\n  a = 1\n  ```") == "  a = 1"


def test_empty_input():
    assert extract_code("") == ""
    assert extract_code(None) == ""
