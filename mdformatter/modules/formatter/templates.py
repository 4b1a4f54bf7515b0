import os
import re
import threading

from mdformatter.modules.formatter.errors import ConfigurationError, TemplateNotFound

PLACEHOLDER_RE = re.compile(r"\$\{([^}]*)\}")


class TFileResult:
    """Deferred render output: a template name plus its substitutions.

    The template is looked up and filled in only when the result is resolved,
    either by the transformer or by calling str() on it, which makes it
    possible to embed one file result inside another.
    """
    __slots__ = ["templatePath", "substitutions", "encoding", "resolver"]

    def __init__(self, templatePath, substitutions=None, encoding=None, resolver=None):
        self.templatePath = templatePath
        self.substitutions = dict(substitutions or {})
        self.encoding = encoding
        self.resolver = resolver

    def __repr__(self):
        return "<TFileResult %s %s>" % (self.templatePath, sorted(self.substitutions))

    def __str__(self):
        return self.Resolve()

    def Resolve(self):
        if self.resolver is None:
            raise ConfigurationError("No template resolver bound to %s" % self.templatePath)
        return self.resolver.Resolve(self)


def Substitute(text, substitutions):
    # ${key} -> str(value); keys that are missing or None become "".
    def _(m):
        value = substitutions.get(m.group(1), None)
        if value is None: return ""
        return str(value)
    return PLACEHOLDER_RE.sub(_, text)


class TTemplateResolver:
    __slots__ = ["searchPath", "encoding", "cache", "lock"]

    def __init__(self, searchPath, encoding="utf-8"):
        self.searchPath = [d for d in searchPath if d]
        self.encoding = encoding
        self.cache = {}  # key: (template name, encoding); value: template text
        self.lock = threading.Lock()

    def Find(self, name):
        if os.path.isabs(name):
            raise ConfigurationError("Template names must be relative: %s" % name)
        for d in self.searchPath:
            path = os.path.normpath(os.path.join(d, name))
            if os.path.isfile(path): return path
        raise TemplateNotFound(name, self.searchPath)

    def Load(self, name, encoding=None):
        key = (name, encoding or self.encoding)
        with self.lock:
            text = self.cache.get(key, None)
        if text is not None: return text
        path = self.Find(name)
        with open(path, "rt", encoding=key[1]) as f:
            text = f.read()
        with self.lock:
            return self.cache.setdefault(key, text)

    def Resolve(self, fileResult):
        text = self.Load(fileResult.templatePath, fileResult.encoding)
        return Substitute(text, fileResult.substitutions)
