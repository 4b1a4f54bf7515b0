import os
import runpy
import threading

from mdformatter.modules.formatter.environment import DEFAULT_LANGUAGE, TEnvironment
from mdformatter.modules.formatter.errors import ConfigurationError
from mdformatter.modules.formatter.functions import TFunctions, TLabels
from mdformatter.modules.formatter.handlers import THandlers
from mdformatter.modules.formatter.templates import TTemplateResolver
from mdformatter.modules.formatter.transformer import TTransformer
from mdformatter.modules.log import print_log

VIEW_SCRIPT = "view.py"


class TFormatterLoader:
    """Compiles formatter bundles and keeps the compiled transformers.

    A bundle is a directory under 'formatterDir' holding a view.py script.
    The script runs once with 'handlers', 'f' and 'env' in its globals;
    templates are then looked up in the bundle directory, the formatter
    directory and the schema plugin's formatter directory, in that order.
    """
    __slots__ = ["formatterDir", "schemaDir", "encoding", "defaultLang", "cache", "lock"]

    def __init__(self, formatterDir, schemaDir, encoding="utf-8", defaultLang=DEFAULT_LANGUAGE):
        self.formatterDir = formatterDir
        self.schemaDir = schemaDir
        self.encoding = encoding
        self.defaultLang = defaultLang
        self.cache = {}  # key: (bundle, schema); value: TTransformer
        self.lock = threading.Lock()

    def ListBundles(self):
        if not os.path.isdir(self.formatterDir): return []
        return sorted(name for name in os.listdir(self.formatterDir)
                      if os.path.isfile(os.path.join(self.formatterDir, name, VIEW_SCRIPT)))

    def BundleDir(self, bundle):
        if not bundle or bundle.startswith(".") or os.sep in bundle or "/" in bundle:
            raise ConfigurationError("Invalid formatter name %s" % repr(bundle))
        d = os.path.join(self.formatterDir, bundle)
        if not os.path.isfile(os.path.join(d, VIEW_SCRIPT)):
            raise ConfigurationError("Formatter %s does not exist" % repr(bundle))
        return d

    def SchemaFormatterDir(self, schema):
        if not schema or schema.startswith(".") or os.sep in schema or "/" in schema:
            raise ConfigurationError("Invalid schema name %s" % repr(schema))
        d = os.path.join(self.schemaDir, schema, "formatter")
        if not os.path.isdir(d):
            raise ConfigurationError("Schema %s does not exist" % repr(schema))
        return d

    def Compile(self, bundle, schema):
        bundleDir = self.BundleDir(bundle)
        schemaFormatterDir = self.SchemaFormatterDir(schema)
        resolver = TTemplateResolver([bundleDir, self.formatterDir, schemaFormatterDir], self.encoding)
        labels = TLabels(os.path.join(schemaFormatterDir, "loc"), self.defaultLang)
        env = TEnvironment()
        handlers = THandlers(resolver)
        f = TFunctions(env, labels)
        runpy.run_path(os.path.join(bundleDir, VIEW_SCRIPT),
                       init_globals={"handlers": handlers, "f": f, "env": env},
                       run_name="mdformatter_view_%s" % bundle)
        handlers.Freeze()
        print_log("formatter", "Compiled {0} for schema {1}: {2} handler(s), {3} sorter(s)".format(
            bundle, schema, len(handlers.handlers), len(handlers.sorters)))
        return TTransformer(handlers, f, env, bundle)

    def GetTransformer(self, bundle, schema):
        key = (bundle, schema)
        with self.lock:
            transformer = self.cache.get(key, None)
        if transformer is not None: return transformer
        transformer = self.Compile(bundle, schema)
        with self.lock:
            return self.cache.setdefault(key, transformer)

    def Clear(self):
        with self.lock:
            n = len(self.cache)
            self.cache = {}
        print_log("formatter", "Dropped {0} compiled formatter(s)".format(n))
