def test_list_formatters(client):
    rv = client.get('/api/formatter/list')
    assert rv.status_code == 200
    assert rv.get_json() == {'formatters': ['full_view', 'iso_view']}


def test_describe_formatter(client):
    rv = client.get('/api/formatter/full_view/describe')
    assert rv.status_code == 200
    js = rv.get_json()
    assert js['name'] == 'full_view'
    assert js['schema'] == 'iso19139'
    assert js['dynamicRoots'] == 'select_roots'
    assert js['start'] == '<lambda>'
    assert [h['priority'] for h in js['handlers']] == sorted((h['priority'] for h in js['handlers']), reverse=True)


def test_unknown_formatter(client):
    rv = client.get('/api/formatter/nothing/describe')
    assert rv.status_code == 404
    assert rv.get_json()['enum'] == 'FORMATTER_DOESNT_EXIST'
    rv = client.post('/api/formatter/nothing/apply', data=b'<doc/>')
    assert rv.status_code == 404


def test_apply_formatter(client, sample_xml):
    rv = client.post('/api/formatter/iso_view/apply', data=sample_xml, content_type='application/xml')
    assert rv.status_code == 200
    assert rv.mimetype == 'text/html'
    html = rv.get_data(as_text=True)
    assert html.startswith('<div class="md-view" lang="en">')
    assert '<dt>Individual name</dt><dd>Jane Doe</dd>' in html


def test_apply_passes_language_and_parameters(client, sample_xml):
    rv = client.post('/api/formatter/full_view/apply?lang=fre&brief=true', data=sample_xml, content_type='application/xml')
    assert rv.status_code == 200
    html = rv.get_data(as_text=True)
    assert 'LandIS portal' in html
    assert 'Carte nationale des sols' not in html

    rv = client.post('/api/formatter/full_view/apply?lang=fre', data=sample_xml, content_type='application/xml')
    assert 'Carte nationale des sols' in rv.get_data(as_text=True)


def test_apply_without_record(client):
    rv = client.post('/api/formatter/iso_view/apply', data=b'')
    assert rv.status_code == 422
    assert rv.get_json()['enum'] == 'POST_ERROR'


def test_apply_malformed_record(client):
    rv = client.post('/api/formatter/iso_view/apply', data=b'<gmd:MD_Metadata>', content_type='application/xml')
    assert rv.status_code == 400
    assert rv.get_json()['enum'] == 'XML_ERROR'


def test_apply_with_unknown_schema(client, sample_xml):
    # rejected before the view script is compiled
    rv = client.post('/api/formatter/iso_view/apply?schema=nope', data=sample_xml, content_type='application/xml')
    assert rv.status_code == 422
    assert rv.get_json()['enum'] == 'CONFIGURATION_ERROR'


def test_reload(client):
    rv = client.post('/api/formatter/reload')
    assert rv.status_code == 200
    assert rv.get_json() == {'reloaded': True}
