"""
Shared fixtures: minimal Django settings and an unsaved model with JSON columns.

Model instances are never saved, so no database is configured.
"""

import django
import pytest
from django.conf import settings

if not settings.configured:
    settings.configure(
        DEBUG=True,
        SECRET_KEY='dummy-secret-key-for-testing',
        INSTALLED_APPS=[
            'django.contrib.contenttypes',
            'django.contrib.auth',
        ],
        USE_TZ=True,
    )
    django.setup()

from django.db import models  # noqa: E402

from json_field_group import ModelContainer  # noqa: E402


class Article(models.Model):
    title = models.CharField(max_length=200, blank=True)
    meta = models.JSONField(default=dict, blank=True)
    extra = models.JSONField(null=True, blank=True)
    notes = models.TextField(blank=True)
    options = models.TextField(blank=True)

    json_casts = ('options',)

    class Meta:
        app_label = 'json_field_group_tests'


@pytest.fixture
def article():
    return Article(
        title='Hello',
        meta={'title': 'Old title', 'seo': {'keywords': 'django'}},
    )


@pytest.fixture
def container(article):
    return ModelContainer(article)


@pytest.fixture
def article_class():
    return Article
