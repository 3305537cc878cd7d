"""Reference advisor mixin for the JoyDoc validator.

Identifier references inside a document (page order, field positions, row
and column order, logic conditions) are weak: nothing requires them to
resolve. Dangling ones are reported as warnings only.
"""

from joydoc.core.errors import Violation, warning


def _ids(items) -> list[str]:
    """Collect string ``_id`` values from a list of objects."""
    if not isinstance(items, list):
        return []
    return [item["_id"] for item in items
            if isinstance(item, dict) and isinstance(item.get("_id"), str)]


def _objects(items):
    if not isinstance(items, list):
        return
    for i, item in enumerate(items):
        if isinstance(item, dict):
            yield i, item


class ReferenceValidationMixin:
    """Mixin providing dangling-reference warnings (REF-001..REF-006)."""

    def _check_references(self, doc: dict) -> list[Violation]:
        warnings = []
        field_ids = _ids(doc.get("fields"))
        files = doc.get("files")
        page_ids_by_file = self._page_ids_by_file(files)

        for f_idx, file in _objects(files):
            file_path = f"files[{f_idx}]"
            pages = file.get("pages")

            warnings.extend(self._check_page_order(file, _ids(pages), file_path))
            warnings.extend(self._check_pages(pages, page_ids_by_file, field_ids, f"{file_path}.pages"))

            for v_idx, view in _objects(file.get("views")):
                view_path = f"{file_path}.views[{v_idx}]"
                view_pages = view.get("pages")
                warnings.extend(self._check_page_order(view, _ids(view_pages), view_path))
                warnings.extend(self._check_pages(view_pages, page_ids_by_file, field_ids, f"{view_path}.pages"))

            for key in ("header", "footer"):
                surface = file.get(key)
                if isinstance(surface, dict):
                    warnings.extend(self._check_surface(surface, page_ids_by_file, field_ids, f"{file_path}.{key}"))

        for i, field in _objects(doc.get("fields")):
            field_path = f"fields[{i}]"
            if field.get("type") == "table":
                warnings.extend(self._check_table_order(field, field_path))
            warnings.extend(self._check_field_logic(
                field.get("logic"), page_ids_by_file, field_ids, f"{field_path}.logic",
            ))
        return warnings

    def _page_ids_by_file(self, files) -> dict[str, list[str]]:
        """Page ids per file id, including pages that only exist in views."""
        page_ids_by_file: dict[str, list[str]] = {}
        for _, file in _objects(files):
            if not isinstance(file.get("_id"), str):
                continue
            page_ids = _ids(file.get("pages"))
            for _, view in _objects(file.get("views")):
                page_ids.extend(p for p in _ids(view.get("pages")) if p not in page_ids)
            page_ids_by_file[file["_id"]] = page_ids
        return page_ids_by_file

    def _check_pages(
        self, pages, page_ids_by_file: dict[str, list[str]], field_ids: list[str], path: str
    ) -> list[Violation]:
        warnings = []
        for p_idx, page in _objects(pages):
            warnings.extend(self._check_surface(page, page_ids_by_file, field_ids, f"{path}[{p_idx}]"))
        return warnings

    def _check_surface(
        self, surface: dict, page_ids_by_file: dict[str, list[str]], field_ids: list[str], path: str
    ) -> list[Violation]:
        """Field positions and logic of a page, header or footer"""
        warnings = self._check_positions(surface, field_ids, path)
        warnings.extend(self._check_field_logic(
            surface.get("logic"), page_ids_by_file, field_ids, f"{path}.logic",
        ))
        return warnings

    def _check_ref(self, path: str, value, known: list[str], code: str, what: str) -> Violation | None:
        """Return a warning if a string reference is not among known ids."""
        if not isinstance(value, str) or value in known:
            return None
        return warning(
            path,
            f"{what} '{value}' not found",
            code,
            actual=value,
            valid_options=list(known),
        )

    def _check_page_order(self, container: dict, page_ids: list[str], path: str) -> list[Violation]:
        warnings = []
        order = container.get("pageOrder")
        if not isinstance(order, list):
            return warnings
        for i, page_id in enumerate(order):
            w = self._check_ref(f"{path}.pageOrder[{i}]", page_id, page_ids, "REF-001", "Page")
            if w:
                warnings.append(w)
        return warnings

    def _check_positions(self, surface: dict, field_ids: list[str], path: str) -> list[Violation]:
        warnings = []
        for i, position in _objects(surface.get("fieldPositions")):
            w = self._check_ref(
                f"{path}.fieldPositions[{i}].field", position.get("field"),
                field_ids, "REF-002", "Field",
            )
            if w:
                warnings.append(w)
        return warnings

    def _check_table_order(self, field: dict, path: str) -> list[Violation]:
        warnings = []
        row_ids = _ids(field.get("value"))
        column_ids = _ids(field.get("tableColumns"))

        row_order = field.get("rowOrder")
        if isinstance(row_order, list):
            for i, row_id in enumerate(row_order):
                w = self._check_ref(f"{path}.rowOrder[{i}]", row_id, row_ids, "REF-003", "Row")
                if w:
                    warnings.append(w)

        column_order = field.get("tableColumnOrder")
        if isinstance(column_order, list):
            for i, column_id in enumerate(column_order):
                w = self._check_ref(
                    f"{path}.tableColumnOrder[{i}]", column_id, column_ids, "REF-004", "Column",
                )
                if w:
                    warnings.append(w)
        return warnings

    def _check_field_logic(
        self, logic, page_ids_by_file: dict[str, list[str]], field_ids: list[str], path: str
    ) -> list[Violation]:
        """Warn about field-logic conditions naming unknown file/page/field ids."""
        warnings = []
        if not isinstance(logic, dict):
            return warnings

        for i, cond in _objects(logic.get("conditions")):
            cond_path = f"{path}.conditions[{i}]"
            file_id = cond.get("file")
            w = self._check_ref(f"{cond_path}.file", file_id, list(page_ids_by_file), "REF-006", "File")
            if w:
                warnings.append(w)
            elif isinstance(file_id, str):
                w = self._check_ref(
                    f"{cond_path}.page", cond.get("page"), page_ids_by_file[file_id], "REF-006", "Page",
                )
                if w:
                    warnings.append(w)
            w = self._check_ref(f"{cond_path}.field", cond.get("field"), field_ids, "REF-006", "Field")
            if w:
                warnings.append(w)
        return warnings
