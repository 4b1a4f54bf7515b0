import io

from lxml import etree

from mdformatter.modules.formatter.errors import ConfigurationError

PATH_SEPARATOR = ">"

NS_GMD = "http://www.isotc211.org/2005/gmd"
NS_GCO = "http://www.isotc211.org/2005/gco"
NS_GML = "http://www.opengis.net/gml"
NS_GMX = "http://www.isotc211.org/2005/gmx"
NS_SRV = "http://www.isotc211.org/2005/srv"
NS_XLINK = "http://www.w3.org/1999/xlink"
NS_XSI = "http://www.w3.org/2001/XMLSchema-instance"
NS_XML = "http://www.w3.org/XML/1998/namespace"
# prefixes usable in root selectors even if the record declares them elsewhere
DEFAULT_NAMESPACES = {"gmd": NS_GMD, "gco": NS_GCO, "gml": NS_GML, "gmx": NS_GMX,
                      "srv": NS_SRV, "xlink": NS_XLINK, "xsi": NS_XSI}


def QualifiedName(elt, tag=None):
    # Turns "{ns}local" into "prefix:local" using the prefixes in scope at 'elt'.
    if tag is None: tag = elt.tag
    if not tag.startswith("{"): return tag
    ns, local = tag[1:].split("}", 1)
    if ns == NS_XML: return "xml:" + local
    for prefix, uri in elt.nsmap.items():
        if uri == ns and prefix: return prefix + ":" + local
    return local


def MakeParser():
    return etree.XMLParser(resolve_entities=False, no_network=True, remove_comments=False)


class TDocument:
    """A parsed metadata record.

    Root selectors and TNode.Xpath are evaluated against 'root' with the
    prefixes in 'nsmap': DEFAULT_NAMESPACES overridden by every prefix the
    record itself declares.
    """
    __slots__ = ["tree", "root", "nsmap"]

    def __init__(self, tree):
        self.tree = tree
        self.root = tree.getroot()
        self.nsmap = dict(DEFAULT_NAMESPACES)
        for elt in self.root.iter(tag=etree.Element):
            for prefix, uri in elt.nsmap.items():
                if prefix: self.nsmap[prefix] = uri

    @staticmethod
    def Parse(source):
        if isinstance(source, TDocument): return source
        if isinstance(source, etree._ElementTree): return TDocument(source)
        if isinstance(source, etree._Element): return TDocument(source.getroottree())
        if isinstance(source, str): source = source.encode("utf8")
        with io.BytesIO(source) as f:
            tree = etree.parse(f, parser=MakeParser())
        return TDocument(tree)

    def Node(self, elt):
        names = [QualifiedName(a) for a in elt.iterancestors()]
        names.reverse()
        names.append(QualifiedName(elt))
        return TNode(self, elt, None, tuple(names))

    def RootNode(self):
        return self.Node(self.root)

    def Select(self, expr):
        # Evaluates a root selector relative to the root element.  A relative
        # selector may also name the root element itself ("gmd:MD_Metadata"),
        # so "/expr | expr" is tried first; only elements are kept.
        expr = expr.strip()
        found = None
        if not expr.startswith(("/", "(", ".")) and "|" not in expr:
            try: found = self.root.xpath("/%s | %s" % (expr, expr), namespaces=self.nsmap)
            except etree.XPathError: found = None
        if found is None:
            try:
                found = self.root.xpath(expr, namespaces=self.nsmap)
            except etree.XPathError as e:
                raise ConfigurationError("Invalid root selector %s: %s" % (repr(expr), e))
        if not isinstance(found, list): return []
        return [self.Node(x) for x in found if isinstance(x, etree._Element) and isinstance(x.tag, str)]


class TNode:
    __slots__ = ["doc", "element", "parent", "pathNames", "name", "_children"]

    def __init__(self, doc, element, parent, pathNames):
        self.doc = doc
        self.element = element
        self.parent = parent
        self.pathNames = pathNames
        self.name = pathNames[-1]
        self._children = None

    def __repr__(self):
        return "<TNode %s>" % self.path

    def __bool__(self): return True

    def __len__(self): return len(self.children)

    def __iter__(self): return iter(self.children)

    @property
    def path(self):
        return PATH_SEPARATOR.join(self.pathNames)

    @property
    def localName(self):
        return etree.QName(self.element).localname

    @property
    def text(self):
        return self.element.xpath("string()")

    @property
    def attributes(self):
        return {QualifiedName(self.element, key): value for key, value in self.element.attrib.items()}

    @property
    def children(self):
        if self._children is None:
            self._children = [self.MakeChild(x) for x in self.element if isinstance(x.tag, str)]
        return self._children

    def MakeChild(self, elt):
        return TNode(self.doc, elt, self, self.pathNames + (QualifiedName(elt),))

    def Attr(self, name, default=None):
        return self.attributes.get(name, default)

    def Children(self, name=None):
        if name is None or name == "*": return list(self.children)
        return [x for x in self.children if x.name == name]

    def Child(self, name):
        for x in self.children:
            if x.name == name: return x
        return None

    def TextOf(self, name):
        x = self.Child(name)
        return "" if x is None else x.text

    def Descendants(self, name=None):
        out = []
        def Rec(node):
            for child in node.children:
                if name is None or child.name == name: out.append(child)
                Rec(child)
        Rec(self)
        return out

    def Xpath(self, expr):
        # Element results become TNodes; strings, numbers and attributes are returned as they are.
        try:
            found = self.element.xpath(expr, namespaces=self.doc.nsmap)
        except etree.XPathError as e:
            raise ConfigurationError("Invalid XPath expression %s: %s" % (repr(expr), e))
        if not isinstance(found, list): return found
        out = []
        for x in found:
            if isinstance(x, etree._Element):
                if isinstance(x.tag, str): out.append(self.doc.Node(x))
            else: out.append(str(x))
        return out
