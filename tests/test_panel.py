"""
Unit tests for panels: expansion, filling, forms and serialization.
"""

from django.core.exceptions import ValidationError

from json_field_group import (
    JSON,
    Boolean,
    Code,
    Heading,
    Number,
    Panel,
    RequestValues,
    Select,
    Text,
)


def build_panel():
    return Panel('Article', [
        Text('Title'),
        JSON('Meta', [
            Text('Title').required(),
            Number('Rating').min(0).max(5),
            Select('Status').options({'draft': 'Draft', 'live': 'Live'}),
            JSON('SEO', [Text('Keywords')]),
        ]),
    ])


def test_expand_flattens_groups_in_display_order():
    fields = build_panel().expand()
    assert [type(field).__name__ for field in fields] == [
        'Text', 'Heading', 'Text', 'Number', 'Select', 'Text',
    ]
    assert [field.attribute for field in fields] == [
        'title', None, 'meta->title', 'meta->rating', 'meta->status', 'meta->seo->keywords',
    ]


def test_fill_writes_plain_and_json_attributes(article, container):
    request = RequestValues({
        'title': 'New headline',
        'meta->rating': '4',
        'meta->seo->keywords': 'python',
    })

    result = build_panel().fill(request, container)

    assert result is container
    assert article.title == 'New headline'
    assert article.meta == {
        'title': 'Old title',
        'rating': '4',
        'seo': {'keywords': 'python'},
    }


def test_fill_skips_readonly_and_hidden_fields(article, container):
    panel = Panel('Article', [
        Text('Title').readonly(),
        JSON('Meta', [Text('Subtitle')]).hide_when_updating(),
    ])
    panel.fill(RequestValues({'title': 'x', 'meta->subtitle': 'y'}), container)

    assert article.title == 'Hello'
    assert 'subtitle' not in article.meta


def test_values_resolve_nested_paths(container):
    values = build_panel().values(container)
    assert values['title'] == 'Hello'
    assert values['meta->title'] == 'Old title'
    assert values['meta->seo->keywords'] == 'django'
    assert values['meta->rating'] is None


def test_form_uses_qualified_attributes_and_initial_values(container):
    form = build_panel().form(container)
    assert list(form.fields) == [
        'title', 'meta->title', 'meta->rating', 'meta->status', 'meta->seo->keywords',
    ]
    assert form.fields['meta->title'].initial == 'Old title'
    assert form.fields['meta->title'].required is True
    assert not form.is_bound


def test_validate_reports_errors_by_attribute():
    errors = build_panel().validate(RequestValues({'meta->rating': '9', 'meta->status': 'gone'}))
    assert set(errors) == {'meta->title', 'meta->rating', 'meta->status'}


def test_validate_accepts_valid_submission():
    errors = build_panel().validate(RequestValues({
        'meta->title': 'A title',
        'meta->rating': '3',
        'meta->status': 'live',
    }))
    assert not errors


def test_forwarded_rules_run_during_validation():
    def no_spam(value):
        if 'spam' in value:
            raise ValidationError('No spam')

    panel = Panel('Article', [JSON('Meta', [Text('Title'), Text('Subtitle')]).rules(no_spam)])
    errors = panel.validate(RequestValues({'meta->title': 'spam', 'meta->subtitle': 'fine'}))
    assert list(errors) == ['meta->title']


def test_to_json_serializes_heading_and_fields(container):
    panel = Panel('Article', [
        JSON('Meta', [
            Text('Title').placeholder('Headline'),
            Select('Status').options([('draft', 'Draft'), ('live', 'Live')]),
            Boolean('Featured'),
            Code('Schema').json(),
        ]),
    ])
    data = panel.to_json(container)

    assert data['title'] == 'Article'
    heading, title, status, featured, schema = data['fields']

    assert heading == {'tag': 'heading', 'label': 'Meta', 'html': '<b>Meta</b>', 'as_html': True}

    assert title['tag'] == 'input'
    assert title['name'] == 'meta->title'
    assert title['placeholder'] == 'Headline'
    assert title['value'] == 'Old title'
    assert title['field']['component'] == 'text-field'

    assert status['tag'] == 'select'
    assert [option['value'] for option in status['options']] == ['draft', 'live']

    assert featured['type'] == 'checkbox'
    assert schema['tag'] == 'textarea'
    assert schema['json_mode'] is True


def test_to_json_reports_bound_errors():
    panel = Panel('Article', [JSON('Meta', [Text('Title').required()])])
    data = panel.to_json(request=RequestValues({'meta->title': ''}))
    assert data['fields'][1]['errors']


def test_code_json_mode_decodes_into_group(article, container):
    panel = Panel('Article', [JSON('Meta', [Code('Schema').json()])])
    panel.fill(RequestValues({'meta->schema': '{"type": "object"}'}), container)
    assert article.meta['schema'] == {'type': 'object'}


def test_heading_never_fills(container):
    assert Heading('Section').fill(RequestValues({'section': 'x'}), container) is None


def test_to_json_normalizes_attributes_and_exposes_paths(container):
    panel = Panel('Article', [
        JSON('Meta', [
            Text('Title').required(),
            Number('Rating').min(0).max(5),
            JSON('SEO', [Select('Robots').options({'index': 'Index', 'noindex': 'No index'})]),
            Code('Schema').json(),
        ]),
    ])
    container.instance.meta['seo']['robots'] = 'noindex'
    _, title, rating, robots, schema = panel.to_json(container)['fields']

    assert title['required'] is True
    assert title['path'] == ['meta', 'title']
    assert rating['min'] == 0
    assert rating['max'] == 5
    assert rating['step'] == 'any'
    assert robots['path'] == ['meta', 'seo', 'robots']
    assert [option['selected'] for option in robots['options']] == [False, True]
    assert schema['data-json-mode'] is True
    assert schema['spellcheck'] == 'false'
