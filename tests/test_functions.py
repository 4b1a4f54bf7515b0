import os

import pytest

from conftest import ISO19139_FORMATTER_DIR
from mdformatter.modules.formatter.environment import Lang2, TEnvironment, TRequestEnv
from mdformatter.modules.formatter.errors import ConfigurationError
from mdformatter.modules.formatter.functions import TFunctions, TLabels
from mdformatter.modules.formatter.nodes import TDocument
from mdformatter.schemas.iso19139.formatter.functions import TIso19139Functions

NS = 'xmlns:gmd="http://www.isotc211.org/2005/gmd" xmlns:gco="http://www.isotc211.org/2005/gco"'
LOC_DIR = os.path.join(ISO19139_FORMATTER_DIR, 'loc')


def element(body):
    return TDocument.Parse('<gmd:abstract %s>%s</gmd:abstract>' % (NS, body)).RootNode()


def localised(locale, text):
    return ('<gmd:PT_FreeText><gmd:textGroup><gmd:LocalisedCharacterString locale="%s">%s'
            '</gmd:LocalisedCharacterString></gmd:textGroup></gmd:PT_FreeText>' % (locale, text))


@pytest.fixture
def iso_text():
    env = TEnvironment()
    isofunc = TIso19139Functions(None, None, env)
    def _(el, lang='eng'):
        with env.Bind(TRequestEnv(lang3=lang)):
            return isofunc.IsoText(el)
    return _


def test_iso_text_prefers_ui_language(iso_text):
    el = element('<gco:CharacterString>default</gco:CharacterString>' + localised('#DE', 'deutsch') + localised('#FR', 'français'))
    assert iso_text(el, 'fre') == 'français'
    assert iso_text(el, 'ger') == 'deutsch'


def test_iso_text_falls_back_to_default(iso_text):
    el = element('<gco:CharacterString>default</gco:CharacterString>' + localised('#DE', 'deutsch'))
    assert iso_text(el, 'eng') == 'default'
    assert iso_text(element('<gco:CharacterString>only</gco:CharacterString>')) == 'only'


def test_iso_text_falls_back_to_first_localised(iso_text):
    el = element(localised('#DE', 'deutsch') + localised('#IT', 'italiano'))
    assert iso_text(el, 'eng') == 'deutsch'


def test_iso_text_empty(iso_text):
    assert iso_text(element('')) == ''
    assert iso_text(None) == ''


def test_lang2_table():
    assert Lang2('eng') == 'en'
    assert Lang2('FRE') == 'fr'
    assert Lang2('ger') == 'de'
    assert Lang2(None) == 'en'


def test_labels_from_schema_plugin():
    labels = TLabels(LOC_DIR)
    assert labels.Label('gmd:abstract', 'eng') == 'Abstract'
    assert labels.Label('gmd:abstract', 'fre') == 'Résumé'


def test_labels_fallbacks():
    labels = TLabels(LOC_DIR)
    # unknown element: local name; unknown language: default language file
    assert labels.Label('gmd:somethingElse', 'eng') == 'somethingElse'
    assert labels.Label('gmd:abstract', 'xyz') == 'Abstract'
    # a language file without the element does not fall back to another language
    assert labels.Label('gmd:purpose', 'fre') == 'purpose'
    assert TLabels(None).Label('gmd:abstract', 'eng') == 'abstract'


def test_labels_are_cached_per_language():
    labels = TLabels(LOC_DIR)
    first = labels.Get('eng')
    assert labels.Get('eng') is first


def test_unknown_languages_share_the_default_labels():
    labels = TLabels(LOC_DIR)
    for i in range(50):
        assert labels.Label('gmd:abstract', 'x%d' % i) == 'Abstract'
    assert sorted(labels.cache) == ['eng']
    assert labels.Get('x0') is labels.Get('eng')


def test_node_label_uses_current_language():
    env = TEnvironment()
    f = TFunctions(env, TLabels(LOC_DIR))
    el = element('')
    with env.Bind(TRequestEnv(lang3='fre')):
        assert f.NodeLabel(el) == 'Résumé'
        assert f.Label(el) == 'Résumé'
        assert f.lang2 == 'fr'
    with env.Bind(TRequestEnv()):
        assert f.NodeLabel('gmd:abstract') == 'Abstract'
    with pytest.raises(ConfigurationError):
        f.NodeLabel('gmd:abstract')


def test_env_params():
    env = TEnvironment()
    with env.Bind(TRequestEnv({'brief': 'true', 'list': ['a', 'b'], 'no': 'false'})):
        assert env.ParamBool('brief') is True
        assert env.ParamBool('no') is False
        assert env.ParamBool('missing', True) is True
        assert env.Param('list') == 'a'
        assert env.Param('missing', 'd') == 'd'
