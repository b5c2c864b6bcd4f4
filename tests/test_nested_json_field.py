"""
Unit tests for JSON groups nested inside other JSON groups.
"""

from json_field_group import JSON, Heading, RequestValues, Text


def build_group():
    return JSON('Meta', [
        Text('Title'),
        JSON('SEO', [
            Text('Keywords'),
            JSON('Open Graph', [Text('Image')]),
        ]),
    ])


def test_nested_attributes_are_qualified_transitively():
    group = build_group()
    attributes = [field.attribute for field in group.fields() if not isinstance(field, Heading)]
    assert attributes == [
        'meta->title',
        'meta->seo->keywords',
        'meta->seo->open_graph->image',
    ]


def test_nested_headings_are_dropped():
    headings = [field for field in build_group().fields() if isinstance(field, Heading)]
    assert len(headings) == 1
    assert headings[0].label == 'Meta'


def test_nested_leaves_are_filled_by_outer_group():
    group = build_group()
    for field in group.fields()[1:]:
        assert field.fill_callback == group.fill_into_json


def test_nested_write_lands_in_outer_column(article, container):
    group = build_group()
    request = RequestValues({
        'meta->seo->keywords': 'python',
        'meta->seo->open_graph->image': 'cover.png',
    })

    for field in group.fields():
        field.fill(request, container)

    assert article.meta == {
        'title': 'Old title',
        'seo': {'keywords': 'python', 'open_graph': {'image': 'cover.png'}},
    }


def test_nested_child_callback_survives_flattening(article, container):
    def reverse(request, container, attribute, request_attribute):
        return request.get(request_attribute)[::-1]

    group = JSON('Meta', [JSON('SEO', [Text('Keywords').fill_using(reverse)])])
    assert group.fill_callbacks['meta->seo->keywords'] is reverse

    group.fields()[1].fill(RequestValues({'meta->seo->keywords': 'abc'}), container)
    assert article.meta['seo']['keywords'] == 'cba'


def test_user_heading_inside_nested_group_is_kept():
    group = JSON('Meta', [JSON('SEO', [Heading('Search'), Text('Keywords')])])
    labels = [field.label for field in group.fields() if isinstance(field, Heading)]
    assert labels == ['Meta', 'Search']
