import contextlib
import contextvars

from mdformatter.modules.formatter.errors import ConfigurationError

DEFAULT_LANGUAGE = "eng"
LANG3_TO_LANG2 = {
    "eng": "en", "fre": "fr", "fra": "fr", "ger": "de", "deu": "de", "ita": "it", "spa": "es",
    "dut": "nl", "nld": "nl", "por": "pt", "pol": "pl", "fin": "fi", "swe": "sv", "nor": "no",
    "dan": "da", "cze": "cs", "ces": "cs", "slo": "sk", "slk": "sk", "slv": "sl", "hun": "hu",
    "rus": "ru", "chi": "zh", "zho": "zh", "ara": "ar", "cat": "ca", "tur": "tr", "vie": "vi",
}


def Lang2(lang3):
    lang3 = (lang3 or DEFAULT_LANGUAGE).lower()
    return LANG3_TO_LANG2.get(lang3, lang3[:2])


class TRequestEnv:
    __slots__ = ["params", "lang3", "lang2"]
    def __init__(self, params=None, lang3=None):
        self.params = dict(params or {})
        self.lang3 = (lang3 or DEFAULT_LANGUAGE).lower()
        self.lang2 = Lang2(self.lang3)


class TEnvironment:
    """The 'env' object seen by view scripts.

    A view script is compiled once but rendered many times, possibly from
    several threads at once, so 'env' holds no request data itself: each
    render binds a TRequestEnv to a context variable for its duration and
    every property reads through it.
    """
    __slots__ = ["var"]

    def __init__(self):
        self.var = contextvars.ContextVar("mdformatter_request_env")

    @contextlib.contextmanager
    def Bind(self, requestEnv):
        token = self.var.set(requestEnv)
        try:
            yield requestEnv
        finally:
            self.var.reset(token)

    @property
    def current(self):
        requestEnv = self.var.get(None)
        if requestEnv is None:
            raise ConfigurationError("env can only be used while a metadata record is being rendered")
        return requestEnv

    @property
    def params(self): return dict(self.current.params)

    @property
    def lang2(self): return self.current.lang2

    @property
    def lang3(self): return self.current.lang3

    def Param(self, name, default=None):
        value = self.current.params.get(name, default)
        if isinstance(value, (list, tuple)): value = value[0] if value else default
        return value

    def ParamBool(self, name, default=False):
        value = self.Param(name, None)
        if value is None: return default
        return str(value).strip().lower() in ("true", "1", "yes", "on")
