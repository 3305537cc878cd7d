"""Tests for file containers, pages, views, header/footer and field positions"""

import pytest

from joydoc.core.errors import MISSING_REQUIRED, TYPE_MISMATCH


class TestFileContainer:

    @pytest.mark.parametrize("attr", ["_id", "pages", "pageOrder"])
    def test_required(self, validator, minimal_doc, attr):
        del minimal_doc["files"][0][attr]
        result = validator.validate(minimal_doc)
        assert result.paths == [f"files[0].{attr}"]

    def test_file_must_be_object(self, validator, minimal_doc):
        minimal_doc["files"] = ["f1"]
        result = validator.validate(minimal_doc)
        assert result.paths == ["files[0]"]
        assert result.violations[0].kind == TYPE_MISMATCH

    def test_styles_are_core_styles(self, validator, minimal_doc):
        minimal_doc["files"][0]["styles"] = {"fontSize": "12px", "textAlign": "justify"}
        result = validator.validate(minimal_doc)
        assert result.paths == ["files[0].styles.fontSize"]

    def test_header_footer_nullable(self, validator, minimal_doc):
        minimal_doc["files"][0]["header"] = None
        minimal_doc["files"][0]["footer"] = None
        assert validator.validate(minimal_doc).valid

    def test_page_order_entries_are_strings(self, validator, minimal_doc):
        minimal_doc["files"][0]["pageOrder"] = [1]
        assert validator.validate(minimal_doc).paths == ["files[0].pageOrder[0]"]

    def test_dangling_page_order_warns(self, validator, minimal_doc):
        minimal_doc["files"][0]["pageOrder"] = ["nope"]
        result = validator.validate(minimal_doc)
        assert result.valid
        assert [(w.code, w.path) for w in result.warnings] == [("REF-001", "files[0].pageOrder[0]")]


class TestPage:

    @pytest.mark.parametrize("attr", [
        "_id", "name", "fieldPositions", "width", "height", "cols",
        "rowHeight", "layout", "presentation",
    ])
    def test_required(self, validator, doc_with, page, attr):
        del page[attr]
        result = validator.validate(doc_with(pages=[page]))
        assert not result.valid
        assert f"files[0].pages[0].{attr}" in result.paths
        assert result.by_kind(MISSING_REQUIRED)

    @pytest.mark.parametrize("attr,value", [
        ("hidden", True),
        ("margin", 4),
        ("padding", 8),
        ("borderWidth", 1),
        ("backgroundImage", "https://example.com/bg.png"),
        ("backgroundSize", "100% 100%"),
        ("metadata", {"owner": "ops"}),
    ])
    def test_optional(self, validator, doc_with, page, attr, value):
        page[attr] = value
        assert validator.validate(doc_with(pages=[page])).valid

    @pytest.mark.parametrize("attr,value", [("layout", "masonry"), ("backgroundSize", "cover")])
    def test_open_enums(self, validator, doc_with, page, attr, value):
        page[attr] = value
        assert validator.validate(doc_with(pages=[page])).valid

    def test_width_must_be_number(self, validator, doc_with, page):
        page["width"] = True
        result = validator.validate(doc_with(pages=[page]))
        assert result.paths == ["files[0].pages[0].width"]
        assert result.violations[0].actual == "boolean"

    def test_non_finite_number_rejected(self, validator, doc_with, page):
        page["height"] = float("inf")
        result = validator.validate(doc_with(pages=[page]))
        assert result.paths == ["files[0].pages[0].height"]

    def test_empty_pages_allowed(self, validator, minimal_doc):
        assert minimal_doc["files"][0]["pages"] == []
        assert validator.validate(minimal_doc).valid


class TestView:

    def test_view_valid(self, validator, minimal_doc, page):
        minimal_doc["files"][0]["views"] = [{"_id": "v1", "type": "mobile", "pages": [page], "pageOrder": ["page1"]}]
        assert validator.validate(minimal_doc).valid

    @pytest.mark.parametrize("attr", ["pages", "pageOrder"])
    def test_required(self, validator, minimal_doc, attr):
        view = {"pages": [], "pageOrder": []}
        del view[attr]
        minimal_doc["files"][0]["views"] = [view]
        assert validator.validate(minimal_doc).paths == [f"files[0].views[0].{attr}"]

    def test_view_pages_are_pages(self, validator, minimal_doc, page):
        del page["cols"]
        minimal_doc["files"][0]["views"] = [{"pages": [page], "pageOrder": []}]
        assert validator.validate(minimal_doc).paths == ["files[0].views[0].pages[0].cols"]

    def test_view_type_open(self, validator, minimal_doc):
        minimal_doc["files"][0]["views"] = [{"type": "watch", "pages": [], "pageOrder": []}]
        assert validator.validate(minimal_doc).valid


class TestHeaderFooter:

    @pytest.fixture
    def header(self):
        return {"fieldPositions": [], "height": 60, "cols": 24, "rowHeight": 8, "layout": "grid"}

    def test_minimal_header_valid(self, validator, minimal_doc, header):
        minimal_doc["files"][0]["header"] = header
        assert validator.validate(minimal_doc).valid

    @pytest.mark.parametrize("attr", ["fieldPositions", "height", "cols", "rowHeight", "layout"])
    def test_required(self, validator, minimal_doc, header, attr):
        del header[attr]
        minimal_doc["files"][0]["footer"] = header
        assert validator.validate(minimal_doc).paths == [f"files[0].footer.{attr}"]

    def test_header_must_be_object_or_null(self, validator, minimal_doc):
        minimal_doc["files"][0]["header"] = "top"
        assert validator.validate(minimal_doc).paths == ["files[0].header"]


class TestFieldPosition:

    def _doc(self, doc_with, page, position):
        page["fieldPositions"] = [position]
        return doc_with([{"_id": "text1", "file": "f1", "type": "text"}], pages=[page])

    def test_valid(self, validator, doc_with, page, field_position):
        result = validator.validate(self._doc(doc_with, page, field_position))
        assert result.valid
        assert result.warnings == []

    @pytest.mark.parametrize("attr", ["_id", "field", "displayType", "width", "height", "x", "y", "type"])
    def test_required(self, validator, doc_with, page, field_position, attr):
        del field_position[attr]
        result = validator.validate(self._doc(doc_with, page, field_position))
        assert result.paths == [f"files[0].pages[0].fieldPositions[0].{attr}"]

    def test_field_must_be_non_empty(self, validator, doc_with, page, field_position):
        field_position["field"] = ""
        result = validator.validate(self._doc(doc_with, page, field_position))
        assert result.violations[0].code == "TYP-002"

    def test_core_styles_flattened(self, validator, doc_with, page, field_position):
        """CoreStyles attributes sit directly on the position"""
        field_position.update({"fontSize": 12, "titleFontColor": "#000", "borderRadius": 2})
        assert validator.validate(self._doc(doc_with, page, field_position)).valid

        field_position["padding"] = "4px"
        result = validator.validate(self._doc(doc_with, page, field_position))
        assert result.paths == ["files[0].pages[0].fieldPositions[0].padding"]

    def test_override_maps(self, validator, doc_with, page, field_position):
        field_position["tableColumns"] = {"col1": {"hidden": "yes"}}
        field_position["schema"] = {"s1": {"tableColumns": {"c1": {"format": 3}}}}
        result = validator.validate(self._doc(doc_with, page, field_position))
        assert set(result.paths) == {
            "files[0].pages[0].fieldPositions[0].tableColumns.col1.hidden",
            "files[0].pages[0].fieldPositions[0].schema.s1.tableColumns.c1.format",
        }

    def test_unknown_field_reference_warns(self, validator, doc_with, page, field_position):
        field_position["field"] = "ghost"
        result = validator.validate(self._doc(doc_with, page, field_position))
        assert result.valid
        assert [w.path for w in result.warnings] == ["files[0].pages[0].fieldPositions[0].field"]
