import pytest

from mdformatter.modules.formatter.errors import ConfigurationError
from mdformatter.modules.formatter.markup import Html, TMarkupBuilder


def test_nested_tags_and_attributes():
    def build(b):
        with b.Elem('p', {'class': 'code'}):
            b.Tag('span', {'class': 'label'}, 'Code')
            b.Tag('span', {'class': 'value'}, 'EPSG:27700')
    assert Html(build) == '<p class="code"><span class="label">Code</span><span class="value">EPSG:27700</span></p>'


def test_text_is_escaped():
    assert Html(lambda b: b.Tag('dd', None, 'a < b & c')) == '<dd>a &lt; b &amp; c</dd>'


def test_attribute_values_are_escaped():
    assert Html(lambda b: b.Tag('abbr', {'title': 'Fish & Chips'}, 'F&C')) == '<abbr title="Fish &amp; Chips">F&amp;C</abbr>'


def test_raw_markup_is_kept():
    def build(b):
        with b.Elem('div', {'class': 'identificationInfo'}):
            b.Tag('h2', None, 'Data identification')
            b.Raw('lead <b>bold</b> tail')
    assert Html(build) == '<div class="identificationInfo"><h2>Data identification</h2>lead <b>bold</b> tail</div>'


def test_raw_keeps_leading_whitespace():
    def build(b):
        with b.Elem('div'):
            b.Raw('\n  <p>a</p>')
    assert Html(build) == '<div>\n  <p>a</p></div>'


def test_several_top_level_elements_and_text():
    def build(b):
        b.Text('before ')
        b.Tag('i', None, 'x')
        b.Text(' after')
        b.Tag('i', None, 'y')
    assert Html(build) == 'before <i>x</i> after<i>y</i>'


def test_open_tags_are_closed_on_output():
    b = TMarkupBuilder()
    b.Open('div').Open('span').Text('t')
    assert b.ToString() == '<div><span>t</span></div>'


def test_close_without_open():
    with pytest.raises(ConfigurationError):
        TMarkupBuilder().Close()


def test_empty_builder():
    assert Html(lambda b: None) == ''
    assert Html(lambda b: b.Raw('')) == ''
