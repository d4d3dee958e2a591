"""Converts note bodies to and from ENML, the XML dialect Evernote stores note content in.

BeautifulSoup4 (with lxml) is used for parsing; formatting of HTML input may be changed during conversion.
"""

from html import escape

from bs4 import BeautifulSoup, NavigableString

ENML_PREAMBLE = ('<?xml version="1.0" encoding="UTF-8"?>\n'
                 '<!DOCTYPE en-note SYSTEM "http://xml.evernote.com/pub/enml2.dtd">\n')

_PROHIBITED_TAGS = ['applet', 'base', 'basefont', 'bgsound', 'blink', 'button', 'dir', 'embed', 'fieldset',
                    'form', 'frame', 'frameset', 'iframe', 'ilayer', 'input', 'isindex', 'label',
                    'layer', 'legend', 'link', 'marquee', 'menu', 'meta', 'noframes', 'noscript', 'object',
                    'optgroup', 'option', 'param', 'plaintext', 'script', 'select', 'style', 'textarea', 'xml']

_PROHIBITED_ATTRS = {'id', 'class', 'accesskey', 'data', 'dynsrc', 'tabindex'}

_BLOCK_TAGS = ['div', 'p', 'li', 'tr', 'h1', 'h2', 'h3', 'h4', 'h5', 'h6', 'pre', 'blockquote']


def _wrap(inner: str) -> str:
    return f'{ENML_PREAMBLE}<en-note>{inner}</en-note>'


def is_enml(content: str) -> bool:
    """Returns True if the string looks like a complete ENML document rather than text or an HTML fragment.

    The document must start with the XML declaration, the ENML doctype, or the ``en-note`` root element.
    """
    stripped = (content or '').lstrip()
    return stripped.startswith(('<?xml', '<!DOCTYPE en-note', '<en-note')) and '<en-note' in stripped


def from_text(text: str) -> str:
    """Returns an ENML document with one ``<div>`` per line of the given plain text."""
    divs = []
    for line in text.splitlines():
        if line.strip():
            divs.append(f'<div>{escape(line, quote=False)}</div>')
        else:
            divs.append('<div><br/></div>')
    return _wrap(''.join(divs))


def from_html(fragment: str) -> str:
    """Returns an ENML document containing the given HTML fragment.

    Only the contents of the body are kept if the input is a full HTML document. Elements that ENML prohibits are
    removed along with their contents. Prohibited attributes, including event handlers, are removed.
    """
    soup = BeautifulSoup(fragment, 'lxml')
    root = soup.body
    if not root:
        return _wrap('')
    for el in root.find_all(_PROHIBITED_TAGS):
        el.decompose()
    for el in root.find_all(True):
        for attr in list(el.attrs):
            if attr.lower() in _PROHIBITED_ATTRS or attr.lower().startswith('on'):
                del el[attr]
    return _wrap(''.join(str(child) for child in root.contents))


def to_text(content: str) -> str:
    """Returns the plain text of an ENML document (or HTML), with block elements and ``<br>`` as line breaks.

    Nested blocks end a line only once. Media and other non-text content is dropped.
    """
    soup = BeautifulSoup(content, 'xml' if is_enml(content) else 'lxml')
    root = soup.find('en-note') or soup
    # innermost blocks first, so an outer block can see the line break its last child already ends with
    for block in reversed(root.find_all(_BLOCK_TAGS)):
        text = block.get_text()
        if not text:
            # an empty block, usually <div><br/></div>, is one blank line
            block.replace_with('\n')
        elif not text.endswith('\n'):
            block.append('\n')
    for br in root.find_all('br'):
        br.replace_with('\n')
    for block in root.find_all(_BLOCK_TAGS):
        prev = block.previous_sibling
        if prev is None:
            continue
        prev_text = str(prev) if isinstance(prev, NavigableString) else prev.get_text()
        if prev_text.strip() and not prev_text.endswith('\n'):
            block.insert_before('\n')
    return root.get_text().strip('\n')
