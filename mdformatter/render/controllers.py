from mdformatter import app
from mdformatter.modules.formatter.loader import TFormatterLoader
from mdformatter.modules.log import print_log

loader = TFormatterLoader(app.config['FORMATTER_DIR'], app.config['SCHEMA_DIR'],
                          encoding=app.config['TEMPLATE_ENCODING'], defaultLang=app.config['DEFAULT_LANGUAGE'])


def list_formatters():
    return loader.ListBundles()


def formatter_exists(name):
    return name in loader.ListBundles()


def get_transformer(name, schema=None):
    return loader.GetTransformer(name, schema or app.config['DEFAULT_SCHEMA'])


def describe_formatter(name, schema=None):
    transformer = get_transformer(name, schema)
    rv = transformer.handlers.ToJson()
    rv['name'] = name
    rv['schema'] = schema or app.config['DEFAULT_SCHEMA']
    return rv


def apply_formatter(name, xml, params=None, lang=None, schema=None):
    transformer = get_transformer(name, schema)
    html = transformer.Render(xml, params=params, lang=lang or app.config['DEFAULT_LANGUAGE'])
    print_log(app.name, 'Rendered {0} ({1} characters)'.format(name, len(html)))
    return html


def reload_formatters():
    loader.Clear()
