"""Tests for the read-me parser."""

from pathlib import Path

import pytest

from script_picker.errors import ReadmeFormatError, TooManyParametersError
from script_picker.readme_parser import parse_readme, render_readme
from script_picker.types import Documented, NoParameters


class TestCategories:
    def test_contents_section_is_skipped(self, utilities_readme):
        parsed = parse_readme(utilities_readme)
        assert [c.name for c in parsed.categories] == ["Utilities"]

    def test_script_count(self, utilities_readme):
        parsed = parse_readme(utilities_readme)
        assert parsed.categories[0].script_count == 2

    def test_only_contents_gives_empty_catalog(self):
        parsed = parse_readme("# Title\n\n## Contents\n[None yet](#none)\n")
        assert parsed.categories == []
        assert parsed.scripts == []

    def test_empty_text(self):
        parsed = parse_readme("")
        assert parsed.categories == []

    def test_multiple_categories(self):
        text = (
            "## Contents\n"
            "## Files\n"
            "### [Copy](copy.sh)\n<!--(none)-->\nCopies.\n"
            "## Network\n"
            "### [Ping](ping.sh)\n<!--host-->\nPings.\n"
            "### [Trace](trace.sh)\n<!--host-->\nTraces.\n"
        )
        parsed = parse_readme(text)
        assert [(c.name, c.script_count) for c in parsed.categories] == [("Files", 1), ("Network", 2)]
        assert [s.category_index for s in parsed.scripts] == [0, 1, 1]

    def test_category_without_scripts(self):
        parsed = parse_readme("## Contents\n## Empty\n## Full\n### [A](a.sh)\n<!--(none)-->\nA.\n")
        assert [(c.name, c.script_count) for c in parsed.categories] == [("Empty", 0), ("Full", 1)]
        assert parsed.scripts[0].category_index == 1


class TestScripts:
    def test_name_and_file(self, utilities_readme):
        parsed = parse_readme(utilities_readme)
        assert [(s.name, s.file) for s in parsed.scripts] == [
            ("Backup", "backup.sh"),
            ("Cleanup", "cleanup.sh"),
        ]

    def test_multi_line_parameters(self, utilities_readme):
        backup = parse_readme(utilities_readme).scripts[0]
        assert backup.parameters == Documented(("source dir", "destination dir"))
        assert backup.takes_parameters

    def test_none_sentinel(self, utilities_readme):
        cleanup = parse_readme(utilities_readme).scripts[1]
        assert isinstance(cleanup.parameters, NoParameters)
        assert list(cleanup.parameters) == []
        assert not cleanup.takes_parameters

    def test_description(self, utilities_readme):
        parsed = parse_readme(utilities_readme)
        assert parsed.scripts[0].description == "Copies a directory somewhere safe."
        assert parsed.scripts[1].description == "Removes temporary files."

    def test_single_line_comment(self):
        parsed = parse_readme("## C\n## Cat\n### [X](x.sh)\n<!--Only one.-->\nDoes x.\n")
        assert list(parsed.scripts[0].parameters) == ["Only one."]

    def test_five_parameters(self):
        text = "## C\n## Cat\n### [X](x.sh)\n<!--one\ntwo\nthree\nfour\nfive-->\nDesc.\n"
        script = parse_readme(text).scripts[0]
        assert list(script.parameters) == ["one", "two", "three", "four", "five"]

    def test_source_dir_recorded(self, utilities_readme, tmp_path):
        parsed = parse_readme(utilities_readme, source_dir=tmp_path)
        assert all(s.source_dir == tmp_path for s in parsed.scripts)
        assert parsed.scripts[0].path == tmp_path / "backup.sh"

    def test_prose_between_scripts_is_ignored(self):
        text = (
            "## Contents\n## Cat\nSome prose about the category.\n"
            "### [X](x.sh)\n<!--(none)-->\nDoes x.\nMore prose here.\n"
        )
        parsed = parse_readme(text)
        assert len(parsed.scripts) == 1
        assert parsed.scripts[0].description == "Does x."

    def test_blank_lines_are_skipped(self):
        text = "## C\n\n## Cat\n### [X](x.sh)\n\n<!--(none)-->\n\nDoes x.\n"
        assert parse_readme(text).scripts[0].description == "Does x."


class TestFormatErrors:
    def test_heading_followed_by_description(self):
        text = "## Contents\n## Cat\n### [X](x.sh)\nDoes x without a comment.\n"
        with pytest.raises(ReadmeFormatError) as exc:
            parse_readme(text)
        assert exc.value.line == "Does x without a comment."
        assert exc.value.line_number == 4
        assert "Does x without a comment." in str(exc.value)

    def test_six_parameters(self):
        text = "## C\n## Cat\n### [X](x.sh)\n<!--1\n2\n3\n4\n5\n6-->\nDesc.\n"
        with pytest.raises(TooManyParametersError) as exc:
            parse_readme(text)
        assert exc.value.line == "5"

    def test_unclosed_comment_runs_into_next_script(self):
        text = "## Contents\n## Cat\n### [X](x.sh)\n<!--first param\n### [Y](y.sh)\n<!--(none)-->\nDoes y.\n"
        with pytest.raises(ReadmeFormatError) as exc:
            parse_readme(text)
        assert exc.value.line == "### [Y](y.sh)"
        assert exc.value.line_number == 5

    def test_unclosed_comment_runs_into_next_category(self):
        text = "## Contents\n## Cat\n### [X](x.sh)\n<!--first\nsecond\n## Other\n"
        with pytest.raises(ReadmeFormatError) as exc:
            parse_readme(text)
        assert exc.value.line == "## Other"

    def test_too_many_is_a_format_error(self):
        assert issubclass(TooManyParametersError, ReadmeFormatError)

    def test_script_before_category(self):
        with pytest.raises(ReadmeFormatError):
            parse_readme("## Contents\n### [X](x.sh)\n<!--(none)-->\nDesc.\n")

    def test_malformed_heading(self):
        with pytest.raises(ReadmeFormatError):
            parse_readme("## Contents\n## Cat\n### Just a heading\n")

    def test_ends_inside_script(self):
        with pytest.raises(ReadmeFormatError) as exc:
            parse_readme("## Contents\n## Cat\n### [X](x.sh)\n<!--a\nb\n")
        assert "X" in str(exc.value)


class TestRoundTrip:
    def test_render_then_parse(self, utilities_readme):
        parsed = parse_readme(utilities_readme, source_dir=Path("/scripts"))
        text = render_readme(parsed.categories, parsed.scripts)
        again = parse_readme(text, source_dir=Path("/scripts"))
        assert again.categories == parsed.categories
        assert again.scripts == parsed.scripts

    def test_render_several_categories(self):
        text = (
            "## Contents\n## A\n### [One](one.sh)\n<!--p1\np2\np3-->\nFirst.\n"
            "## B\n### [Two](two.sh)\n<!--(none)-->\nSecond.\n"
        )
        parsed = parse_readme(text)
        again = parse_readme(render_readme(parsed.categories, parsed.scripts))
        assert again == parsed
