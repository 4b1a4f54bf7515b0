import inspect
import re

from mdformatter.modules.formatter.errors import ConfigurationError, FormatterError, MatcherError

RegexType = type(re.compile(""))


def FuncName(func):
    return getattr(func, "__qualname__", None) or getattr(func, "__name__", None) or repr(func)


def DeclaredArity(func):
    # Number of required positional parameters; *args counts as "as many as needed".
    try: sig = inspect.signature(func)
    except (TypeError, ValueError): return None
    n = 0
    for p in sig.parameters.values():
        if p.kind == p.VAR_POSITIONAL: return None
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD) and p.default is p.empty: n += 1
    return n


def CheckArity(func, nArgs, what):
    # Raises ConfigurationError if 'func' cannot be called with exactly nArgs positional arguments.
    if not callable(func):
        raise ConfigurationError("%s must be callable, got %s" % (what, repr(func)))
    try: sig = inspect.signature(func)
    except (TypeError, ValueError): return
    try: sig.bind(*range(nArgs))
    except TypeError:
        raise ConfigurationError("%s %s cannot be called with %d argument(s)" % (what, FuncName(func), nArgs))


class TNameMatcher:
    __slots__ = ["name"]
    defaultPriority = 1
    def __init__(self, name):
        self.name = name
    def Matches(self, node, path): return node.name == self.name
    def ToJson(self): return {"type": "name", "name": self.name}


class TNameRegexMatcher:
    __slots__ = ["pattern"]
    defaultPriority = 0
    def __init__(self, pattern):
        self.pattern = pattern if isinstance(pattern, RegexType) else re.compile(pattern)
    def Matches(self, node, path): return self.pattern.fullmatch(node.name) is not None
    def ToJson(self): return {"type": "nameRegex", "pattern": self.pattern.pattern}


class TPathRegexMatcher:
    # Paths use '>' between element names, e.g. gmd:MD_Metadata>gmd:identificationInfo
    __slots__ = ["pattern"]
    defaultPriority = 0
    def __init__(self, pattern):
        self.pattern = pattern if isinstance(pattern, RegexType) else re.compile(pattern)
    def Matches(self, node, path): return self.pattern.fullmatch(path) is not None
    def ToJson(self): return {"type": "pathRegex", "pattern": self.pattern.pattern}


class TPredicateMatcher:
    """Wraps a user function deciding whether a rule applies.

    The function is called with as many arguments as its arity says:
    () for 0, (node) for 1 and (node, path) for 2.  If no arity is given
    it is read from the signature once, here, and never again.
    """
    __slots__ = ["func", "arity"]
    defaultPriority = 0
    def __init__(self, func, arity=None):
        if arity is None: arity = DeclaredArity(func)
        if arity is None: arity = 2
        if arity not in (0, 1, 2):
            raise ConfigurationError("Matcher %s must take 0, 1 or 2 arguments, not %d" % (FuncName(func), arity))
        CheckArity(func, arity, "Matcher")
        self.func = func
        self.arity = arity
    def Matches(self, node, path):
        try:
            if self.arity == 0: return bool(self.func())
            elif self.arity == 1: return bool(self.func(node))
            return bool(self.func(node, path))
        except FormatterError: raise
        except Exception as e:
            raise MatcherError("Matcher %s failed on %s: %s" % (FuncName(self.func), path, e), path) from e
    def ToJson(self): return {"type": "predicate", "function": FuncName(self.func), "arity": self.arity}


def MakeMatcher(select, arity=None):
    if isinstance(select, str): return TNameMatcher(select)
    if isinstance(select, RegexType): return TNameRegexMatcher(select)
    if isinstance(select, (TNameMatcher, TNameRegexMatcher, TPathRegexMatcher, TPredicateMatcher)): return select
    if callable(select): return TPredicateMatcher(select, arity)
    raise ConfigurationError("Unsupported selector %s" % repr(select))
