"""JoyDoc entity model.

Declarative attribute contracts for every entity in a JoyDoc document. The
contracts carry no behaviour: the validator walks them to check documents and
the JSON Schema exporter walks them to emit an equivalent rule set.

Every contract is open: keys that are not declared are accepted and passed
through untouched. Enumerated attributes are open as well; their documented
members are kept for readability and advisory warnings only.
"""

from dataclasses import dataclass, field as dataclass_field


# JSON kinds understood by TypeSpec
STRING = "string"
NUMBER = "number"
BOOLEAN = "boolean"
OBJECT = "object"
ARRAY = "array"
NULL = "null"
ANY = "any"


@dataclass(frozen=True)
class TypeSpec:
    """Semantic type of an attribute value."""
    kinds: tuple[str, ...]
    items: "TypeSpec | None" = None    # element type of an array
    entries: "TypeSpec | None" = None  # value type of a keyed map
    contract: str | None = None        # named entity contract for objects
    non_empty: bool = False
    literals: tuple = ()               # extra literal values, e.g. "" for numbers
    documented: tuple[str, ...] = ()   # open-enum members, never enforced

    def accepts_any(self) -> bool:
        return ANY in self.kinds


@dataclass(frozen=True)
class Attribute:
    name: str
    spec: TypeSpec
    required: bool = False


@dataclass(frozen=True)
class EntityContract:
    """Attribute contract of a single entity (or variant)."""
    name: str
    attributes: tuple[Attribute, ...] = dataclass_field(default_factory=tuple)

    def attribute(self, name: str) -> Attribute | None:
        for attr in self.attributes:
            if attr.name == name:
                return attr
        return None

    @property
    def required(self) -> list[str]:
        return [a.name for a in self.attributes if a.required]

    @property
    def optional(self) -> list[str]:
        return [a.name for a in self.attributes if not a.required]

    def extend(self, name: str, *attributes: Attribute) -> "EntityContract":
        """Compose a new contract; later attributes replace same-named ones."""
        overrides = {a.name for a in attributes}
        kept = tuple(a for a in self.attributes if a.name not in overrides)
        return EntityContract(name=name, attributes=kept + tuple(attributes))


# ---------------------------------------------------------------------------
# TypeSpec builders
# ---------------------------------------------------------------------------

def string() -> TypeSpec:
    return TypeSpec((STRING,))


def identifier() -> TypeSpec:
    return TypeSpec((STRING,), non_empty=True)


def number() -> TypeSpec:
    return TypeSpec((NUMBER,))


def boolean() -> TypeSpec:
    return TypeSpec((BOOLEAN,))


def obj() -> TypeSpec:
    return TypeSpec((OBJECT,))


def any_value() -> TypeSpec:
    return TypeSpec((ANY,))


def open_enum(*members: str) -> TypeSpec:
    return TypeSpec((STRING,), documented=members)


def array_of(items: TypeSpec) -> TypeSpec:
    return TypeSpec((ARRAY,), items=items)


def map_of(entries: TypeSpec) -> TypeSpec:
    return TypeSpec((OBJECT,), entries=entries)


def entity(contract: str, nullable: bool = False) -> TypeSpec:
    kinds = (OBJECT, NULL) if nullable else (OBJECT,)
    return TypeSpec(kinds, contract=contract)


def req(name: str, spec: TypeSpec) -> Attribute:
    return Attribute(name, spec, required=True)


def opt(name: str, spec: TypeSpec) -> Attribute:
    return Attribute(name, spec, required=False)


# ---------------------------------------------------------------------------
# Documented open-enum members
# ---------------------------------------------------------------------------

FIELD_TYPES = (
    "image", "richText", "file", "text", "textarea", "number", "dropdown",
    "multiSelect", "date", "signature", "table", "chart", "collection",
    "block", "rte",
)
COLUMN_TYPES = (
    "text", "dropdown", "multiSelect", "image", "number", "date", "block",
    "barcode", "signature",
)
DISPLAY_TYPES = (
    "original", "horizontal", "text", "circle", "square", "check", "radio",
    "inputGroup",
)
CONDITION_OPERATORS = ("*=", "null=", "=", "!=", "?=", ">", "<")
LOGIC_ACTIONS = ("show", "hide")
LOGIC_EVALS = ("and", "or")
FONT_STYLES = ("normal", "italic")
TEXT_ALIGNS = ("left", "center", "right")
TEXT_TRANSFORMS = ("none", "uppercase")
TEXT_DECORATIONS = ("none", "underline")
DATE_FORMATS = ("MM/DD/YYYY", "MM/DD/YYYY hh:mma", "hh:mma")


# ---------------------------------------------------------------------------
# Logic
# ---------------------------------------------------------------------------

CONDITION = EntityContract("Condition", (
    opt("_id", identifier()),
    req("file", string()),
    req("page", string()),
    req("field", string()),
    req("condition", open_enum(*CONDITION_OPERATORS)),
    opt("value", any_value()),
))

SCHEMA_LOGIC_CONDITION = EntityContract("SchemaLogicCondition", (
    opt("_id", identifier()),
    req("schema", string()),
    req("column", string()),
    req("condition", open_enum(*CONDITION_OPERATORS)),
    opt("value", any_value()),
))

LOGIC = EntityContract("Logic", (
    opt("_id", identifier()),
    req("action", open_enum(*LOGIC_ACTIONS)),
    req("eval", open_enum(*LOGIC_EVALS)),
    req("conditions", array_of(entity("Condition"))),
))

SCHEMA_LOGIC = LOGIC.extend(
    "SchemaLogic",
    req("conditions", array_of(entity("SchemaLogicCondition"))),
)


# ---------------------------------------------------------------------------
# Styles and layout
# ---------------------------------------------------------------------------

CORE_STYLES = EntityContract("CoreStyles", (
    opt("titleFontSize", number()),
    opt("titleFontColor", string()),
    opt("titleFontStyle", open_enum(*FONT_STYLES)),
    opt("titleFontWeight", string()),
    opt("titleTextAlign", open_enum(*TEXT_ALIGNS)),
    opt("titleTextTransform", open_enum(*TEXT_TRANSFORMS)),
    opt("titleTextDecoration", open_enum(*TEXT_DECORATIONS)),
    opt("fontSize", number()),
    opt("fontStyle", open_enum(*FONT_STYLES)),
    opt("fontWeight", string()),
    opt("textAlign", open_enum(*TEXT_ALIGNS)),
    opt("textTransform", open_enum(*TEXT_TRANSFORMS)),
    opt("textDecoration", open_enum(*TEXT_DECORATIONS)),
    opt("textOverflow", open_enum("", "ellipsis")),
    opt("padding", number()),
    opt("margin", number()),
    opt("borderColor", string()),
    opt("borderRadius", number()),
    opt("borderWidth", number()),
    opt("backgroundColor", string()),
))

COLUMN_OVERRIDE = EntityContract("ColumnOverride", (
    opt("format", string()),
    opt("hidden", boolean()),
))

SCHEMA_OVERRIDE = EntityContract("SchemaOverride", (
    opt("tableColumns", map_of(entity("ColumnOverride"))),
))

FIELD_POSITION = CORE_STYLES.extend(
    "FieldPosition",
    req("_id", identifier()),
    req("field", identifier()),
    req("displayType", open_enum(*DISPLAY_TYPES)),
    req("width", number()),
    req("height", number()),
    req("x", number()),
    req("y", number()),
    req("type", open_enum(*FIELD_TYPES)),
    opt("schema", map_of(entity("SchemaOverride"))),
    opt("tableColumns", map_of(entity("ColumnOverride"))),
    opt("primaryMaxWidth", number()),
    opt("primaryMaxHeight", number()),
    opt("format", string()),
    opt("targetValue", string()),
    opt("lineHeight", number()),
    opt("zIndex", number()),
    opt("columnTitleFontSize", number()),
    opt("columnTitleFontColor", string()),
    opt("columnTitleFontStyle", open_enum(*FONT_STYLES)),
    opt("columnTitleFontWeight", string()),
    opt("columnTitleTextAlign", open_enum(*TEXT_ALIGNS)),
    opt("columnTitleTextTransform", open_enum(*TEXT_TRANSFORMS)),
    opt("columnTitleTextDecoration", open_enum(*TEXT_DECORATIONS)),
    opt("columnTitleBackgroundColor", string()),
    opt("columnTitlePadding", number()),
    opt("titleDisplay", open_enum("none", "inline")),
    opt("rowIndex", number()),
    opt("column", string()),
    opt("columnType", string()),
)

_SURFACE_OPTIONAL = (
    opt("hidden", boolean()),
    opt("metadata", obj()),
    opt("margin", number()),
    opt("padding", number()),
    opt("borderWidth", number()),
    opt("backgroundImage", string()),
    opt("backgroundSize", open_enum("", "100% 100%")),
    opt("logic", entity("Logic")),
)

PAGE = EntityContract("Page", (
    req("_id", identifier()),
    req("name", string()),
    req("fieldPositions", array_of(entity("FieldPosition"))),
    req("width", number()),
    req("height", number()),
    req("cols", number()),
    req("rowHeight", number()),
    req("layout", open_enum("grid", "float")),
    req("presentation", open_enum("normal")),
) + _SURFACE_OPTIONAL)

HEADER_FOOTER = EntityContract("HeaderFooter", (
    opt("_id", identifier()),
    opt("name", string()),
    req("fieldPositions", array_of(entity("FieldPosition"))),
    opt("width", number()),
    req("height", number()),
    req("cols", number()),
    req("rowHeight", number()),
    req("layout", open_enum("grid", "float")),
    opt("presentation", open_enum("normal")),
) + _SURFACE_OPTIONAL)

VIEW = EntityContract("View", (
    opt("_id", identifier()),
    opt("type", open_enum("mobile")),
    req("pages", array_of(entity("Page"))),
    req("pageOrder", array_of(string())),
))

FILE_CONTAINER = EntityContract("FileContainer", (
    req("_id", identifier()),
    opt("name", string()),
    opt("version", number()),
    opt("metadata", obj()),
    opt("styles", entity("CoreStyles")),
    req("pages", array_of(entity("Page"))),
    req("pageOrder", array_of(string())),
    opt("views", array_of(entity("View"))),
    opt("header", entity("HeaderFooter", nullable=True)),
    opt("footer", entity("HeaderFooter", nullable=True)),
))


# ---------------------------------------------------------------------------
# Values owned by fields and columns
# ---------------------------------------------------------------------------

OPTION = EntityContract("Option", (
    req("_id", identifier()),
    req("value", string()),
    opt("deleted", boolean()),
    opt("width", number()),
    opt("styles", entity("OptionStyles")),
    opt("metadata", obj()),
))

OPTION_STYLES = EntityContract("OptionStyles", (
    opt("backgroundColor", TypeSpec((STRING, NULL))),
))

TABLE_ROW = EntityContract("TableRow", (
    req("_id", identifier()),
    opt("deleted", boolean()),
    opt("cells", obj()),
))

MEDIA_VALUE = EntityContract("MediaValue", (
    req("_id", identifier()),
    req("url", string()),
    opt("fileName", string()),
    opt("filePath", string()),
))

CHART_POINT = EntityContract("ChartPoint", (
    req("_id", identifier()),
    opt("label", string()),
    req("x", number()),
    req("y", number()),
))

CHART_SERIES = EntityContract("ChartSeries", (
    req("_id", identifier()),
    opt("deleted", boolean()),
    opt("title", string()),
    opt("description", string()),
    req("points", array_of(entity("ChartPoint"))),
))

FIELD_FORMULA = EntityContract("FieldFormula", (
    opt("_id", identifier()),
    opt("key", string()),
    opt("formula", string()),
))

FORMULA = EntityContract("Formula", (
    req("_id", identifier()),
    req("desc", string()),
    req("type", open_enum("calc")),
    req("scope", open_enum("global", "private")),
    req("expression", string()),
))


# ---------------------------------------------------------------------------
# Nested collections
# ---------------------------------------------------------------------------

SCHEMA_DEFINITION = EntityContract("SchemaDefinition", (
    opt("root", boolean()),
    opt("title", string()),
    opt("identifier", string()),
    req("tableColumns", array_of(entity("TableColumn"))),
    opt("children", array_of(string())),
    opt("logic", entity("SchemaLogic")),
))

COLLECTION_ITEM = EntityContract("CollectionItem", (
    req("_id", identifier()),
    opt("cells", obj()),
    opt("children", map_of(entity("CollectionChildren"))),
))

COLLECTION_CHILDREN = EntityContract("CollectionChildren", (
    opt("value", array_of(entity("CollectionItem"))),
))


# ---------------------------------------------------------------------------
# Fields and table columns (discriminated by "type")
# ---------------------------------------------------------------------------

BASE_FIELD = EntityContract("Field", (
    req("_id", identifier()),
    req("file", string()),
    req("type", string()),
    opt("identifier", string()),
    opt("title", string()),
    opt("description", string()),
    opt("required", boolean()),
    opt("tipTitle", string()),
    opt("tipDescription", string()),
    opt("tipVisible", boolean()),
    opt("metadata", obj()),
    opt("logic", entity("Logic")),
    opt("hidden", boolean()),
    opt("disabled", boolean()),
    opt("formulas", array_of(entity("FieldFormula"))),
))

_options = array_of(entity("Option"))
_strings = array_of(string())

FIELD_VARIANT_ATTRIBUTES: dict[str, tuple[Attribute, ...]] = {
    "image": (opt("value", array_of(entity("MediaValue"))), opt("multi", boolean())),
    "file": (opt("value", array_of(entity("MediaValue"))), opt("multi", boolean())),
    "richText": (opt("value", string()),),
    "text": (opt("value", string()),),
    "textarea": (opt("value", string()),),
    "block": (opt("value", string()),),
    "rte": (opt("value", any_value()),),
    "number": (opt("value", TypeSpec((NUMBER,), literals=("",))),),
    "date": (
        opt("value", TypeSpec((NUMBER, NULL), literals=("",))),
        opt("format", open_enum(*DATE_FORMATS)),
    ),
    "signature": (opt("value", any_value()), opt("signer", string())),
    "dropdown": (req("options", _options), opt("value", string())),
    "multiSelect": (req("options", _options), opt("value", _strings), opt("multi", boolean())),
    "table": (
        req("value", array_of(entity("TableRow"))),
        req("rowOrder", _strings),
        req("tableColumns", array_of(entity("TableColumn"))),
        req("tableColumnOrder", _strings),
    ),
    "chart": (
        opt("value", array_of(entity("ChartSeries"))),
        req("yTitle", string()),
        req("yMax", number()),
        req("yMin", number()),
        req("xTitle", string()),
        req("xMax", number()),
        req("xMin", number()),
    ),
    "collection": (
        req("schema", entity("Schema")),
        req("value", array_of(entity("CollectionItem"))),
    ),
}

BASE_COLUMN = EntityContract("TableColumn", (
    req("_id", identifier()),
    req("type", string()),
    opt("title", string()),
    opt("width", number()),
    opt("deleted", boolean()),
    opt("identifier", string()),
    opt("value", any_value()),
))

COLUMN_VARIANT_ATTRIBUTES: dict[str, tuple[Attribute, ...]] = {
    "text": (opt("value", string()),),
    "block": (opt("value", string()),),
    "barcode": (opt("value", string()),),
    "dropdown": (opt("options", _options), opt("value", string())),
    "multiSelect": (opt("options", _options), opt("value", _strings)),
    "image": (
        opt("maxImageWidth", number()),
        opt("maxImageHeight", number()),
        opt("multi", boolean()),
    ),
    "signature": (opt("maxImageWidth", number()), opt("maxImageHeight", number())),
    "number": (opt("value", number()),),
    "date": (opt("value", number()),),
}


# ---------------------------------------------------------------------------
# Document root
# ---------------------------------------------------------------------------

DOCUMENT = EntityContract("Document", (
    opt("_id", identifier()),
    opt("type", open_enum("template", "document")),
    opt("stage", string()),
    opt("source", string()),
    opt("identifier", string()),
    opt("name", string()),
    opt("createdOn", number()),
    opt("deleted", boolean()),
    opt("metadata", obj()),
    opt("categories", array_of(string())),
    req("files", array_of(entity("FileContainer"))),
    req("fields", array_of(entity("Field"))),
    opt("formulas", array_of(entity("Formula"))),
))

# Exact cardinality of Document.files
FILES_ARITY = 1


# Named contracts; "Field", "TableColumn" and "Schema" are resolved specially.
CONTRACTS: dict[str, EntityContract] = {
    c.name: c for c in (
        DOCUMENT, FILE_CONTAINER, VIEW, PAGE, HEADER_FOOTER, CORE_STYLES,
        FIELD_POSITION, COLUMN_OVERRIDE, SCHEMA_OVERRIDE, LOGIC, CONDITION,
        SCHEMA_LOGIC, SCHEMA_LOGIC_CONDITION, OPTION, OPTION_STYLES,
        TABLE_ROW, MEDIA_VALUE, CHART_POINT, CHART_SERIES, FIELD_FORMULA,
        FORMULA, SCHEMA_DEFINITION, COLLECTION_ITEM, COLLECTION_CHILDREN,
    )
}
