"""
ANSI SGR -> HTML conversion for probe output.

Only the sixteen foreground colors and reset are understood. Every other
escape sequence (bold, backgrounds, 256-color, cursor movement, ...) is
dropped without trace.
"""
import re

from markupsafe import Markup, escape as html_escape

FG_COLORS = {
    '30': '#000000',  # black
    '31': '#ff0000',  # red
    '32': '#00ff00',  # green
    '33': '#ffff00',  # yellow
    '34': '#0000ff',  # blue
    '35': '#ff00ff',  # magenta
    '36': '#00ffff',  # cyan
    '37': '#ffffff',  # white
    '90': '#808080',  # bright black
    '91': '#ff6666',  # bright red
    '92': '#66ff66',  # bright green
    '93': '#ffff66',  # bright yellow
    '94': '#6666ff',  # bright blue
    '95': '#ff66ff',  # bright magenta
    '96': '#66ffff',  # bright cyan
    '97': '#ffffff',  # bright white
}

# ESC [ params m with at least one digit or ';'
SGR_SEQUENCE = re.compile(r'\x1b\[([0-9;]+)m')
# Anything else that starts with ESC, including a bare ESC.
ESCAPE_SEQUENCE = re.compile(r'\x1b(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])?')

TEXT = 'text'
OPEN = 'open'
RESET = 'reset'


def _classify(params):
    """First recognised code in the sequence wins; None if nothing matched."""
    for code in params.split(';'):
        if code in ('0', ''):
            return RESET, None
        color = FG_COLORS.get(code)
        if color:
            return OPEN, f'color: {color}'
    return None


def strip_escapes(text):
    return ESCAPE_SEQUENCE.sub('', text)


def tokenize(text):
    """Yield (kind, value) tokens: literal text, color opens and resets."""
    pos = 0
    for m in SGR_SEQUENCE.finditer(text):
        literal = strip_escapes(text[pos:m.start()])
        if literal:
            yield TEXT, literal
        pos = m.end()
        action = _classify(m.group(1))
        if action is not None:
            yield action
    tail = strip_escapes(text[pos:])
    if tail:
        yield TEXT, tail


def render(tokens, escape=None):
    """Turn tokens into markup with at most one color span open at a time.

    A reset with no open span emits nothing, a new color closes the previous
    one, and a span still open at the end is closed.
    """
    parts = []
    span_open = False
    for kind, value in tokens:
        if kind == TEXT:
            parts.append(str(escape(value)) if escape else value)
        elif kind == OPEN:
            if span_open:
                parts.append('</span>')
            parts.append(f'<span style="{value}">')
            span_open = True
        elif span_open:
            parts.append('</span>')
            span_open = False
    if span_open:
        parts.append('</span>')
    return ''.join(parts)


def convert(text, escape=None):
    """Convert ANSI-colored text to span markup. Never raises.

    Literal text is left unescaped unless an *escape* callable is given.
    """
    return render(tokenize(text), escape=escape)


def ansi_to_html(text):
    """HTML-escaped conversion, safe to drop straight into a template."""
    return Markup(convert(text, escape=html_escape))
