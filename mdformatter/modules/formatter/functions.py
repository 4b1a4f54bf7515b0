import os
import threading

from lxml import etree

from mdformatter.modules.formatter import markup
from mdformatter.modules.formatter.environment import DEFAULT_LANGUAGE
from mdformatter.modules.formatter.nodes import MakeParser, TNode


class TLabels:
    # Element labels from <locDir>/<lang3>/labels.xml:
    #   <labels><element name="gmd:abstract"><label>Abstract</label></element>...</labels>
    # One dict per language; the cache dict is replaced, never modified, so reads need no lock.
    __slots__ = ["locDir", "defaultLang", "cache", "lock"]

    def __init__(self, locDir, defaultLang=DEFAULT_LANGUAGE):
        self.locDir = locDir
        self.defaultLang = defaultLang
        self.cache = {}
        self.lock = threading.Lock()

    def LoadFile(self, lang3):
        if not self.locDir or not lang3.isalnum(): return None
        fn = os.path.join(self.locDir, lang3, "labels.xml")
        if not os.path.isfile(fn): return None
        tree = etree.parse(fn, parser=MakeParser())
        h = {}
        for elt in tree.getroot().iter("element"):
            name = elt.get("name", None)
            label = elt.findtext("label")
            if name and label is not None and name not in h: h[name] = label.strip()
        return h

    def Get(self, lang3):
        labels = self.cache.get(lang3, None)
        if labels is not None: return labels
        labels = self.LoadFile(lang3)
        if labels is None:
            # only languages with a labels file get a cache entry
            if lang3 != self.defaultLang: return self.Get(self.defaultLang)
            labels = {}
        with self.lock:
            if lang3 not in self.cache:
                cache = dict(self.cache); cache[lang3] = labels; self.cache = cache
            return self.cache[lang3]

    def Label(self, name, lang3):
        label = self.Get(lang3).get(name, None)
        if label: return label
        return name.split(":", 1)[-1]


class TFunctions:
    """The 'f' object seen by view scripts."""
    __slots__ = ["env", "labels"]

    def __init__(self, env, labels):
        self.env = env
        self.labels = labels

    @property
    def lang2(self): return self.env.lang2

    @property
    def lang3(self): return self.env.lang3

    def NodeLabel(self, nodeOrName):
        name = nodeOrName.name if isinstance(nodeOrName, TNode) else str(nodeOrName)
        return self.labels.Label(name, self.env.lang3)

    def Label(self, node):
        return self.NodeLabel(node)

    def Html(self, func):
        return markup.Html(func)
