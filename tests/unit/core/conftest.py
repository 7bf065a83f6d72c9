"""Shared fixtures for core unit tests"""

import pytest

from mdnotion.core.lexer import Lexer


SAMPLE_MD = """\
# Title

Intro with **bold** and a [link](https://example.com).

## Setup

- first
  - nested `code`
1. one
2. two

> A ~~quoted~~ line

```python
print("hi")
```

![diagram](https://example.com/d.png)

https://user-images.githubusercontent.com/123/video.mov
"""

SAMPLE_FM_MD = """\
---
title: Test Doc
slug: test-doc
---

# Title

Body content.
"""


@pytest.fixture(name="lexer")
def lexer_fixture():
    return Lexer()


@pytest.fixture(name="sample_tokens")
def sample_tokens_fixture(lexer):
    return lexer.tokenize(SAMPLE_MD)
