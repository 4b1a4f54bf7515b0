from mdformatter.modules.formatter.environment import TRequestEnv
from mdformatter.modules.formatter.errors import FormatterError, RenderError
from mdformatter.modules.formatter.handlers import TSortData
from mdformatter.modules.formatter.matchers import FuncName
from mdformatter.modules.formatter.nodes import TDocument
from mdformatter.modules.formatter.templates import TFileResult


class TTransformer:
    """A compiled formatter: frozen handlers plus the services they use.

    Render() walks the record from each selected root.  For every node the
    highest-priority matching handler wins; if it wants child data, the
    children are rendered first, reordered by the sorter for the node and
    concatenated.  Nodes no handler matches produce nothing, unless the view
    asked for unmatched nodes to pass their children's output through.
    """
    __slots__ = ["handlers", "functions", "env", "name"]

    def __init__(self, handlers, functions, env, name=None):
        self.handlers = handlers
        self.functions = functions
        self.env = env
        self.name = name

    def __repr__(self):
        return "<TTransformer %s>" % (self.name or "")

    def Render(self, source, params=None, lang=None):
        doc = TDocument.Parse(source)
        with self.env.Bind(TRequestEnv(params, lang)):
            roots = self.handlers.SelectRoots(doc, self.env)
            parts = [self.CallBoundary(self.handlers.startFunc)]
            for root in roots: parts.append(self.Visit(root))
            parts.append(self.CallBoundary(self.handlers.endFunc))
        return "".join(parts)

    def Visit(self, node):
        handler = self.handlers.FindHandler(node)
        if handler is None:
            if self.handlers.processUnmatched: return self.ProcessChildren(node)
            return ""
        childData = None
        if handler.needsChildData:
            childData = self.ProcessChildren(node) if handler.processChildren else ""
        try:
            result = handler.Render(node, childData)
            return self.ToText(result)
        except FormatterError: raise
        except Exception as e:
            raise RenderError("Handler %s failed on %s: %s" % (FuncName(handler.func), node.path, e), node.path) from e

    def ProcessChildren(self, node):
        pairs = [TSortData(child, self.Visit(child)) for child in node.children]
        sorter = self.handlers.FindSorter(node)
        if sorter is not None and len(pairs) > 1:
            try:
                pairs = sorter.SortChildren(pairs)
            except FormatterError: raise
            except Exception as e:
                raise RenderError("Sorter %s failed on %s: %s" % (FuncName(sorter.comparator), node.path, e), node.path) from e
        return "".join(p.html for p in pairs)

    def CallBoundary(self, func):
        # start / end functions
        if func is None: return ""
        try:
            return self.ToText(func())
        except FormatterError: raise
        except Exception as e:
            raise RenderError("%s failed: %s" % (FuncName(func), e)) from e

    def ToText(self, result):
        if result is None: return ""
        if isinstance(result, str): return result
        if isinstance(result, TFileResult):
            if result.resolver is None: result.resolver = self.handlers.resolver
            return result.Resolve()
        return str(result)
