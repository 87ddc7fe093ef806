"""Tests for template_digestor.infrastructure.parsing.dependencies."""

from template_digestor.domain.ports import ReferenceExtractor
from template_digestor.infrastructure.parsing.dependencies import (
    ExplicitDependencyExtractor,
    RenderCallExtractor,
    extract_dependencies,
    extract_explicit_dependencies,
    extract_render_dependencies,
)


class TestRenderCallExtractor:
    def test_double_quoted(self):
        assert RenderCallExtractor().extract('<%= render "comments/comments" %>') == [
            '"comments/comments"'
        ]

    def test_single_quoted_with_parens(self):
        assert RenderCallExtractor().extract("<%= render('comments/comments') %>") == [
            "'comments/comments'"
        ]

    def test_partial_keyword(self):
        source = '<%= render partial: "comments/comment", collection: topic.comments %>'
        assert RenderCallExtractor().extract(source) == ['"comments/comment"']

    def test_legacy_partial_hash_rocket(self):
        source = '<%= render :partial => "comments/comment" %>'
        assert RenderCallExtractor().extract(source) == ['"comments/comment"']

    def test_object_references(self):
        source = "<%= render @topic %>\n<%= render(topics) %>\n<%= render message.topics %>"
        assert RenderCallExtractor().extract(source) == ["@topic", "topics", "message.topics"]

    def test_duplicates_removed_in_order(self):
        source = 'render "b/b"\nrender "a/a"\nrender "b/b"'
        assert RenderCallExtractor().extract(source) == ['"b/b"', '"a/a"']

    def test_no_render_calls(self):
        assert RenderCallExtractor().extract("<p>plain</p>") == []

    def test_malformed_call_is_ignored(self):
        assert RenderCallExtractor().extract("<%= render 42 %>") == []

    def test_satisfies_port(self):
        assert isinstance(RenderCallExtractor(), ReferenceExtractor)


class TestExplicitDependencyExtractor:
    def test_annotation(self):
        source = "<%# Template Dependency: shared/footer %>"
        assert ExplicitDependencyExtractor().extract(source) == ["shared/footer"]

    def test_token_ends_at_line_end(self):
        source = "<%# Template Dependency: shared/footer\n<p>x</p>"
        assert ExplicitDependencyExtractor().extract(source) == ["shared/footer"]

    def test_multiple_deduplicated(self):
        source = (
            "# Template Dependency: a/one\n"
            "# Template Dependency: b/two\n"
            "# Template Dependency: a/one\n"
        )
        assert ExplicitDependencyExtractor().extract(source) == ["a/one", "b/two"]

    def test_requires_marker(self):
        assert ExplicitDependencyExtractor().extract("Template Dependency: a/one") == []

    def test_satisfies_port(self):
        assert isinstance(ExplicitDependencyExtractor(), ReferenceExtractor)


class TestExtractDependencies:
    def test_render_then_explicit(self, inflector):
        source = (
            "# Template Dependency: shared/footer\n"
            '<%= render "comments/comments" %>\n'
            "<%= render(@topic) %>\n"
        )
        assert extract_dependencies(source, "topics", inflector) == [
            "comments/comments",
            "topics/topic",
            "shared/footer",
        ]

    def test_bare_name_resolved_against_directory(self, inflector):
        assert extract_render_dependencies('render "headline"', "messages", inflector) == [
            "messages/headline"
        ]

    def test_explicit_names_are_verbatim(self):
        assert extract_explicit_dependencies("# Template Dependency: footer") == ["footer"]

    def test_empty_source(self, inflector):
        assert extract_dependencies("", "topics", inflector) == []
