import os

os.environ.setdefault('ENV', 'testing')

import pytest

from mdformatter import app
from mdformatter.modules.formatter.environment import TEnvironment
from mdformatter.modules.formatter.functions import TFunctions, TLabels
from mdformatter.modules.formatter.handlers import THandlers
from mdformatter.modules.formatter.templates import TTemplateResolver
from mdformatter.modules.formatter.transformer import TTransformer

TESTS_DIR = os.path.abspath(os.path.dirname(__file__))
DATA_DIR = os.path.join(TESTS_DIR, 'data')
PACKAGE_DIR = app.root_path
FORMATTER_DIR = os.path.join(PACKAGE_DIR, 'formatters')
SCHEMA_DIR = os.path.join(PACKAGE_DIR, 'schemas')
ISO19139_FORMATTER_DIR = os.path.join(SCHEMA_DIR, 'iso19139', 'formatter')


def build_transformer(setup, searchPath=(), locDir=None):
    """Compile a configuration the way the loader does, with `setup(handlers, f, env)` playing the view script."""
    env = TEnvironment()
    handlers = THandlers(TTemplateResolver(list(searchPath)))
    f = TFunctions(env, TLabels(locDir))
    setup(handlers, f, env)
    handlers.Freeze()
    return TTransformer(handlers, f, env, 'test')


@pytest.fixture
def make_transformer():
    return build_transformer


@pytest.fixture
def sample_xml():
    with open(os.path.join(DATA_DIR, 'sample-iso19139.xml'), 'rb') as f:
        return f.read()


@pytest.fixture
def client():
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client
