import contextlib

from lxml import etree
import lxml.html

from mdformatter.modules.formatter.errors import ConfigurationError

ELT_TEMP_ROOT = "mdf-fragment"


def AppendToText(node, what):
    # Appends 'what' after the last thing currently inside 'node'.
    if what is None or what == "": return
    if len(node):
        last = node[-1]
        last.tail = what if last.tail is None else last.tail + what
    else:
        node.text = what if node.text is None else node.text + what


class TMarkupBuilder:
    """Builds an HTML fragment with explicit open/close calls.

        b.Open("p", {"class": "code"})
        b.Tag("span", {"class": "label"}, "Code")
        b.Raw(childData)
        b.Close()

    Text() is escaped on output, Raw() is parsed as an HTML fragment and kept
    as markup.  Everything lives under a temporary root that is stripped by
    ToString(), so a fragment may have several top-level elements.
    """
    __slots__ = ["root", "stack"]

    def __init__(self):
        self.root = etree.Element(ELT_TEMP_ROOT)
        self.stack = [self.root]

    @property
    def current(self):
        return self.stack[-1]

    def Open(self, tag, attrib=None):
        attrib = {k: str(v) for k, v in (attrib or {}).items() if v is not None}
        self.stack.append(etree.SubElement(self.current, tag, attrib))
        return self

    def Close(self):
        if len(self.stack) == 1:
            raise ConfigurationError("Close() called without a matching Open()")
        self.stack.pop()
        return self

    def Text(self, s):
        if s is not None: AppendToText(self.current, str(s))
        return self

    def Raw(self, markup):
        if markup is None: return self
        markup = str(markup)
        if not markup.strip():
            return self.Text(markup)
        # the HTML parser drops leading whitespace; keep it verbatim
        stripped = markup.lstrip()
        AppendToText(self.current, markup[:len(markup) - len(stripped)])
        for frag in lxml.html.fragments_fromstring(stripped):
            if isinstance(frag, str): AppendToText(self.current, frag)
            else: self.current.append(frag)
        return self

    def Tag(self, tag, attrib=None, text=None):
        self.Open(tag, attrib)
        self.Text(text)
        return self.Close()

    @contextlib.contextmanager
    def Elem(self, tag, attrib=None):
        self.Open(tag, attrib)
        yield self
        self.Close()

    def ToString(self):
        del self.stack[1:]
        s = etree.tostring(self.root, method="html", encoding="unicode")
        return s[len("<%s>" % ELT_TEMP_ROOT):-len("</%s>" % ELT_TEMP_ROOT)]


def Html(func):
    b = TMarkupBuilder()
    func(b)
    return b.ToString()
