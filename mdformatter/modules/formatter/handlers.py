import functools

from mdformatter.modules.formatter.errors import ConfigurationError
from mdformatter.modules.formatter.matchers import CheckArity, DeclaredArity, FuncName, MakeMatcher, TPathRegexMatcher
from mdformatter.modules.formatter.registry import TRuleRegistry
from mdformatter.modules.formatter.templates import TFileResult

HANDLER_OPTIONS = ("select", "priority", "processChildren", "needsChildData", "arity")
SORTER_OPTIONS = ("select", "priority", "arity")


class THandler:
    __slots__ = ["matcher", "func", "priority", "processChildren", "needsChildData"]

    def __init__(self, matcher, func, priority, processChildren=True, needsChildData=False):
        CheckArity(func, 2 if needsChildData else 1, "Handler")
        self.matcher = matcher
        self.func = func
        self.priority = priority
        self.processChildren = processChildren
        self.needsChildData = needsChildData

    def Render(self, node, childData):
        if self.needsChildData: return self.func(node, childData)
        return self.func(node)

    def ToJson(self):
        return {"select": self.matcher.ToJson(), "function": FuncName(self.func), "priority": self.priority,
                "processChildren": self.processChildren, "needsChildData": self.needsChildData}


class TSortData:
    # What a comparator sees for each child: the node and its rendered output.
    __slots__ = ["el", "html"]
    def __init__(self, el, html):
        self.el = el
        self.html = html
    def __repr__(self): return "<TSortData %s %s>" % (self.el.name, repr(self.html[:30]))


class TSorter:
    __slots__ = ["matcher", "comparator", "priority"]

    def __init__(self, matcher, comparator, priority):
        CheckArity(comparator, 2, "Comparator")
        self.matcher = matcher
        self.comparator = comparator
        self.priority = priority

    def SortChildren(self, pairs):
        # sorted() is stable, so children the comparator considers equal keep document order.
        return sorted(pairs, key=functools.cmp_to_key(self.comparator))

    def ToJson(self):
        return {"select": self.matcher.ToJson(), "function": FuncName(self.comparator), "priority": self.priority}


def SplitOptions(select, allowed, kwargs):
    # Handles the map form: Add({"select": ..., "priority": -1, "processChildren": True}, func)
    if not isinstance(select, dict): return select, kwargs
    for key in select:
        if key not in allowed: raise ConfigurationError("Unknown option %s" % repr(key))
    if "select" not in select: raise ConfigurationError("The 'select' option is required")
    opts = dict(kwargs)
    for key, value in select.items():
        if key != "select": opts[key] = value
    return select["select"], opts


class THandlers:
    """The 'handlers' object seen by view scripts.

    Holds everything a view registers: roots, handlers, sorters and the start
    and end functions.  Once the view has been compiled the object is frozen
    and shared by all renders, so nothing here may change during a render.
    """
    __slots__ = ["handlers", "sorters", "roots", "rootsFunc", "startFunc", "endFunc",
                 "resolver", "processUnmatched", "frozen"]

    def __init__(self, resolver=None):
        self.handlers = TRuleRegistry()
        self.sorters = TRuleRegistry()
        self.roots = []
        self.rootsFunc = None
        self.startFunc = None
        self.endFunc = None
        self.resolver = resolver
        self.processUnmatched = False
        self.frozen = False

    def CheckNotFrozen(self):
        if self.frozen: raise ConfigurationError("The formatter configuration is already compiled")

    def Freeze(self):
        self.frozen = True
        return self

    # --- roots ---
    def Roots(self, *selectors):
        self.CheckNotFrozen()
        if len(selectors) == 1 and callable(selectors[0]):
            func = selectors[0]
            arity = DeclaredArity(func)
            CheckArity(func, 0 if arity == 0 else 1, "Roots function")
            self.rootsFunc = func
            self.roots = []
            return func
        if len(selectors) == 1 and isinstance(selectors[0], (list, tuple)): selectors = selectors[0]
        for sel in selectors:
            if not isinstance(sel, str): raise ConfigurationError("Root selectors must be strings, got %s" % repr(sel))
        self.rootsFunc = None
        self.roots = list(selectors)

    def Root(self, selector):
        self.CheckNotFrozen()
        if not isinstance(selector, str): raise ConfigurationError("Root selectors must be strings, got %s" % repr(selector))
        self.roots.append(selector)

    def RootSelectors(self, env):
        if self.rootsFunc is None: return list(self.roots)
        if DeclaredArity(self.rootsFunc) == 0: selected = self.rootsFunc()
        else: selected = self.rootsFunc(env)
        if isinstance(selected, str): selected = [selected]
        return list(selected or []) + self.roots

    def SelectRoots(self, doc, env):
        selectors = self.RootSelectors(env)
        if not selectors: return [doc.RootNode()]
        nodes = []
        for sel in selectors: nodes.extend(doc.Select(sel))
        return nodes

    # --- handlers ---
    def Add(self, select, func=None, priority=None, processChildren=True, needsChildData=False, arity=None):
        select, opts = SplitOptions(select, HANDLER_OPTIONS,
            {"priority": priority, "processChildren": processChildren, "needsChildData": needsChildData, "arity": arity})
        if func is None:
            def Decorator(f):
                self.Add(select, f, **opts)
                return f
            return Decorator
        self.CheckNotFrozen()
        matcher = MakeMatcher(select, opts["arity"])
        priority = opts["priority"]
        if priority is None: priority = matcher.defaultPriority
        return self.handlers.Register(THandler(matcher, func, priority, bool(opts["processChildren"]), bool(opts["needsChildData"])))

    def WithPath(self, pattern, func=None, priority=None, processChildren=True, needsChildData=False):
        return self.Add(TPathRegexMatcher(pattern), func, priority, processChildren, needsChildData)

    def FindHandler(self, node):
        return self.handlers.Resolve(node)

    def ProcessUnmatchedChildren(self, value=True):
        self.CheckNotFrozen()
        self.processUnmatched = bool(value)

    # --- sorters ---
    def Sort(self, select, comparator=None, priority=None, arity=None):
        select, opts = SplitOptions(select, SORTER_OPTIONS, {"priority": priority, "arity": arity})
        if comparator is None:
            def Decorator(f):
                self.Sort(select, f, **opts)
                return f
            return Decorator
        self.CheckNotFrozen()
        matcher = MakeMatcher(select, opts["arity"])
        priority = opts["priority"]
        if priority is None: priority = matcher.defaultPriority
        return self.sorters.Register(TSorter(matcher, comparator, priority))

    def FindSorter(self, node):
        return self.sorters.Resolve(node)

    # --- start and end ---
    def Start(self, func):
        self.CheckNotFrozen()
        CheckArity(func, 0, "Start function")
        self.startFunc = func
        return func

    def End(self, func):
        self.CheckNotFrozen()
        CheckArity(func, 0, "End function")
        self.endFunc = func
        return func

    def FileResult(self, templatePath, substitutions=None, encoding=None):
        return TFileResult(templatePath, substitutions, encoding, self.resolver)

    def ToJson(self):
        return {
            "roots": list(self.roots),
            "dynamicRoots": FuncName(self.rootsFunc) if self.rootsFunc is not None else None,
            "handlers": self.handlers.ToJson(),
            "sorters": self.sorters.ToJson(),
            "start": FuncName(self.startFunc) if self.startFunc is not None else None,
            "end": FuncName(self.endFunc) if self.endFunc is not None else None,
            "processUnmatchedChildren": self.processUnmatched,
        }
