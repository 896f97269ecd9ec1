from markdown_server.render import render_markdown


def test_plain_line_becomes_paragraph():
    assert render_markdown(b"hello world") == "<p>hello world</p>"


def test_carriage_returns_are_stripped():
    lf = b"# Title\n\nfirst line\nsecond line\n\n- a\n- b\n"
    crlf = lf.replace(b"\n", b"\r\n")
    assert render_markdown(crlf) == render_markdown(lf)
    assert "\r" not in render_markdown(b"a\rb\r\n")


def test_common_extensions():
    html = render_markdown(b"| a | b |\n|---|---|\n| 1 | 2 |\n")
    assert "<table>" in html
    assert "<td>1</td>" in html

    html = render_markdown(b"```python\nprint('hi')\n```\n")
    assert "<pre><code" in html
    assert 'class="language-python"' in html

    html = render_markdown(b"## Getting started\n")
    assert 'id="getting-started"' in html


def test_fragment_is_not_sanitized():
    html = render_markdown(b"<div class=\"note\">raw</div>\n")
    assert '<div class="note">raw</div>' in html


def test_malformed_input_degrades_to_text():
    html = render_markdown(b"[unclosed *emphasis `tick\n\n| broken | table\n")
    assert "unclosed" in html
    assert render_markdown(b"\xff\xfe bad bytes") != ""
    assert render_markdown(b"") == ""
