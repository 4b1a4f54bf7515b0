import pytest

from mdformatter.modules.formatter.errors import ConfigurationError, TemplateNotFound
from mdformatter.modules.formatter.templates import Substitute, TFileResult, TTemplateResolver


@pytest.fixture
def search_path(tmp_path):
    bundle, root, schema = tmp_path / 'bundle', tmp_path / 'root', tmp_path / 'schema'
    for d in (bundle, root, schema): (d / 'html').mkdir(parents=True)
    (bundle / 'block.html').write_text('bundle ${x}', encoding='utf-8')
    (root / 'block.html').write_text('root ${x}', encoding='utf-8')
    (root / 'shared.html').write_text('shared ${x}', encoding='utf-8')
    (schema / 'shared.html').write_text('schema ${x}', encoding='utf-8')
    (schema / 'html' / 'entry.html').write_text('<h2>${label}</h2>${childData}', encoding='utf-8')
    return [str(bundle), str(root), str(schema)]


def test_substitution_replaces_every_occurrence():
    assert Substitute('${x}-${x}-${y}', {'x': 'V'}) == 'V-V-'


def test_substitution_uses_string_form_and_blanks_none():
    assert Substitute('${n}|${none}|${missing}', {'n': 3, 'none': None}) == '3||'


def test_first_directory_wins(search_path):
    resolver = TTemplateResolver(search_path)
    assert resolver.Resolve(TFileResult('block.html', {'x': 1})) == 'bundle 1'
    assert resolver.Resolve(TFileResult('shared.html', {'x': 2})) == 'shared 2'
    assert resolver.Resolve(TFileResult('html/entry.html', {'label': 'L'})) == '<h2>L</h2>'


def test_missing_template_is_a_configuration_error(search_path):
    resolver = TTemplateResolver(search_path)
    with pytest.raises(TemplateNotFound) as excinfo:
        resolver.Resolve(TFileResult('nope.html'))
    assert isinstance(excinfo.value, ConfigurationError)
    assert excinfo.value.name == 'nope.html'


def test_absolute_names_are_rejected(search_path):
    with pytest.raises(ConfigurationError):
        TTemplateResolver(search_path).Load('/etc/passwd')


def test_templates_are_cached(search_path, tmp_path):
    resolver = TTemplateResolver(search_path)
    assert resolver.Resolve(TFileResult('block.html', {'x': 1})) == 'bundle 1'
    (tmp_path / 'bundle' / 'block.html').write_text('changed ${x}', encoding='utf-8')
    assert resolver.Resolve(TFileResult('block.html', {'x': 1})) == 'bundle 1'


def test_file_result_to_string_and_nesting(search_path):
    resolver = TTemplateResolver(search_path)
    inner = TFileResult('block.html', {'x': 'in'}, resolver=resolver)
    outer = TFileResult('shared.html', {'x': inner}, resolver=resolver)
    assert str(inner) == 'bundle in'
    assert str(outer) == 'shared bundle in'


def test_unbound_file_result_cannot_resolve():
    with pytest.raises(ConfigurationError):
        str(TFileResult('block.html'))


def test_encoding_override(tmp_path):
    (tmp_path / 'latin.html').write_bytes('caf\xe9 ${x}'.encode('latin-1'))
    resolver = TTemplateResolver([str(tmp_path)])
    assert resolver.Resolve(TFileResult('latin.html', {'x': '!'}, encoding='latin-1')) == 'caf\xe9 !'
