"""Tests for template_digestor.infrastructure.inflection."""

import pytest

from template_digestor.domain.ports import Inflector
from template_digestor.infrastructure.inflection import InflectionInflector, get_default_inflector


@pytest.fixture(scope="module")
def inflector():
    return InflectionInflector()


class TestInflectionInflector:
    @pytest.mark.parametrize("word,plural", [
        ("topic", "topics"),
        ("comment", "comments"),
        ("person", "people"),
        ("category", "categories"),
        ("address", "addresses"),
        ("class", "classes"),
        ("bus", "buses"),
        ("status", "statuses"),
    ])
    def test_pluralize(self, inflector, word, plural):
        assert inflector.pluralize(word) == plural

    @pytest.mark.parametrize("word,singular", [
        ("topics", "topic"),
        ("comments", "comment"),
        ("people", "person"),
        ("categories", "category"),
        ("addresses", "address"),
        ("classes", "class"),
        ("buses", "bus"),
        ("statuses", "status"),
    ])
    def test_singularize(self, inflector, word, singular):
        assert inflector.singularize(word) == singular

    @pytest.mark.parametrize("word", ["topics", "addresses", "statuses"])
    def test_pluralize_plural_is_unchanged(self, inflector, word):
        assert inflector.pluralize(word) == word

    @pytest.mark.parametrize("word", ["topic", "address", "status"])
    def test_singularize_singular_is_unchanged(self, inflector, word):
        assert inflector.singularize(word) == word

    def test_satisfies_port(self, inflector):
        assert isinstance(inflector, Inflector)

    def test_default_is_shared(self):
        assert get_default_inflector() is get_default_inflector()
