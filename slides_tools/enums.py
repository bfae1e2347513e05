"""Enumerated string values accepted by the Slides API.

Each constant is a tuple of the literal values the server documents for one
field. Records check membership on construction via
:func:`slides_tools.models.check_choice`.
"""
from __future__ import annotations

UNITS = ("UNIT_UNSPECIFIED", "EMU", "PT")

PAGE_TYPES = ("SLIDE", "MASTER", "LAYOUT", "NOTES", "NOTES_MASTER")

SHAPE_TYPES = (
    "TYPE_UNSPECIFIED", "TEXT_BOX", "RECTANGLE", "ROUND_RECTANGLE", "ELLIPSE",
    "ARC", "BENT_ARROW", "BENT_UP_ARROW", "BEVEL", "BLOCK_ARC", "BRACE_PAIR",
    "BRACKET_PAIR", "CAN", "CHEVRON", "CHORD", "CLOUD", "CORNER", "CUBE",
    "CURVED_DOWN_ARROW", "CURVED_LEFT_ARROW", "CURVED_RIGHT_ARROW",
    "CURVED_UP_ARROW", "DECAGON", "DIAGONAL_STRIPE", "DIAMOND", "DODECAGON",
    "DONUT", "DOUBLE_WAVE", "DOWN_ARROW", "DOWN_ARROW_CALLOUT",
    "FOLDED_CORNER", "FRAME", "HALF_FRAME", "HEART", "HEPTAGON", "HEXAGON",
    "HOME_PLATE", "HORIZONTAL_SCROLL", "IRREGULAR_SEAL_1", "IRREGULAR_SEAL_2",
    "LEFT_ARROW", "LEFT_ARROW_CALLOUT", "LEFT_BRACE", "LEFT_BRACKET",
    "LEFT_RIGHT_ARROW", "LEFT_RIGHT_ARROW_CALLOUT", "LEFT_RIGHT_UP_ARROW",
    "LEFT_UP_ARROW", "LIGHTNING_BOLT", "MATH_DIVIDE", "MATH_EQUAL",
    "MATH_MINUS", "MATH_MULTIPLY", "MATH_NOT_EQUAL", "MATH_PLUS", "MOON",
    "NO_SMOKING", "NOTCHED_RIGHT_ARROW", "OCTAGON", "PARALLELOGRAM",
    "PENTAGON", "PIE", "PLAQUE", "PLUS", "QUAD_ARROW", "QUAD_ARROW_CALLOUT",
    "RIBBON", "RIBBON_2", "RIGHT_ARROW", "RIGHT_ARROW_CALLOUT", "RIGHT_BRACE",
    "RIGHT_BRACKET", "ROUND_1_RECTANGLE", "ROUND_2_DIAGONAL_RECTANGLE",
    "ROUND_2_SAME_RECTANGLE", "RIGHT_TRIANGLE", "SMILEY_FACE",
    "SNIP_1_RECTANGLE", "SNIP_2_DIAGONAL_RECTANGLE", "SNIP_2_SAME_RECTANGLE",
    "SNIP_ROUND_RECTANGLE", "STAR_10", "STAR_12", "STAR_16", "STAR_24",
    "STAR_32", "STAR_4", "STAR_5", "STAR_6", "STAR_7", "STAR_8",
    "STRIPED_RIGHT_ARROW", "SUN", "TRAPEZOID", "TRIANGLE", "UP_ARROW",
    "UP_ARROW_CALLOUT", "UP_DOWN_ARROW", "UTURN_ARROW", "VERTICAL_SCROLL",
    "WAVE", "WEDGE_ELLIPSE_CALLOUT", "WEDGE_RECTANGLE_CALLOUT",
    "WEDGE_ROUND_RECTANGLE_CALLOUT", "FLOW_CHART_ALTERNATE_PROCESS",
    "FLOW_CHART_COLLATE", "FLOW_CHART_CONNECTOR", "FLOW_CHART_DECISION",
    "FLOW_CHART_DELAY", "FLOW_CHART_DISPLAY", "FLOW_CHART_DOCUMENT",
    "FLOW_CHART_EXTRACT", "FLOW_CHART_INPUT_OUTPUT",
    "FLOW_CHART_INTERNAL_STORAGE", "FLOW_CHART_MAGNETIC_DISK",
    "FLOW_CHART_MAGNETIC_DRUM", "FLOW_CHART_MAGNETIC_TAPE",
    "FLOW_CHART_MANUAL_INPUT", "FLOW_CHART_MANUAL_OPERATION",
    "FLOW_CHART_MERGE", "FLOW_CHART_MULTIDOCUMENT",
    "FLOW_CHART_OFFLINE_STORAGE", "FLOW_CHART_OFFPAGE_CONNECTOR",
    "FLOW_CHART_ONLINE_STORAGE", "FLOW_CHART_OR",
    "FLOW_CHART_PREDEFINED_PROCESS", "FLOW_CHART_PREPARATION",
    "FLOW_CHART_PROCESS", "FLOW_CHART_PUNCHED_CARD",
    "FLOW_CHART_PUNCHED_TAPE", "FLOW_CHART_SORT",
    "FLOW_CHART_SUMMING_JUNCTION", "FLOW_CHART_TERMINATOR", "ARROW_EAST",
    "ARROW_NORTH_EAST", "ARROW_NORTH", "SPEECH", "STARBURST", "TEARDROP",
    "ELLIPSE_RIBBON", "ELLIPSE_RIBBON_2", "CLOUD_CALLOUT", "CUSTOM",
)

ALIGNMENTS = ("ALIGNMENT_UNSPECIFIED", "START", "CENTER", "END", "JUSTIFIED")
TEXT_DIRECTIONS = ("TEXT_DIRECTION_UNSPECIFIED", "LEFT_TO_RIGHT", "RIGHT_TO_LEFT")
SPACING_MODES = ("SPACING_MODE_UNSPECIFIED", "NEVER_COLLAPSE", "COLLAPSE_LISTS")
BASELINE_OFFSETS = ("BASELINE_OFFSET_UNSPECIFIED", "NONE", "SUPERSCRIPT", "SUBSCRIPT")

THEME_COLOR_TYPES = (
    "THEME_COLOR_TYPE_UNSPECIFIED", "DARK1", "LIGHT1", "DARK2", "LIGHT2",
    "ACCENT1", "ACCENT2", "ACCENT3", "ACCENT4", "ACCENT5", "ACCENT6",
    "HYPERLINK", "FOLLOWED_HYPERLINK", "TEXT1", "BACKGROUND1", "TEXT2",
    "BACKGROUND2",
)

RELATIVE_SLIDE_LINKS = (
    "RELATIVE_SLIDE_LINK_UNSPECIFIED", "NEXT_SLIDE", "PREVIOUS_SLIDE",
    "FIRST_SLIDE", "LAST_SLIDE",
)

AUTO_TEXT_TYPES = ("TYPE_UNSPECIFIED", "SLIDE_NUMBER")

CONTENT_ALIGNMENTS = (
    "CONTENT_ALIGNMENT_UNSPECIFIED", "CONTENT_ALIGNMENT_UNSUPPORTED", "TOP",
    "MIDDLE", "BOTTOM",
)

PROPERTY_STATES = ("RENDERED", "NOT_RENDERED", "INHERIT")

DASH_STYLES = (
    "DASH_STYLE_UNSPECIFIED", "SOLID", "DOT", "DASH", "DASH_DOT", "LONG_DASH",
    "LONG_DASH_DOT",
)

SHADOW_TYPES = ("SHADOW_TYPE_UNSPECIFIED", "OUTER")

RECTANGLE_POSITIONS = (
    "RECTANGLE_POSITION_UNSPECIFIED", "TOP_LEFT", "TOP_CENTER", "TOP_RIGHT",
    "LEFT_CENTER", "CENTER", "RIGHT_CENTER", "BOTTOM_LEFT", "BOTTOM_CENTER",
    "BOTTOM_RIGHT",
)

AUTOFIT_TYPES = ("AUTOFIT_TYPE_UNSPECIFIED", "NONE", "TEXT_AUTOFIT", "SHAPE_AUTOFIT")

PLACEHOLDER_TYPES = (
    "NONE", "BODY", "CHART", "CLIP_ART", "CENTERED_TITLE", "DIAGRAM",
    "DATE_AND_TIME", "FOOTER", "HEADER", "MEDIA", "OBJECT", "PICTURE",
    "SLIDE_NUMBER", "SUBTITLE", "TABLE", "TITLE", "SLIDE_IMAGE",
)

RECOLOR_NAMES = (
    "NONE", "LIGHT1", "LIGHT2", "LIGHT3", "LIGHT4", "LIGHT5", "LIGHT6",
    "LIGHT7", "LIGHT8", "LIGHT9", "LIGHT10", "DARK1", "DARK2", "DARK3",
    "DARK4", "DARK5", "DARK6", "DARK7", "DARK8", "DARK9", "DARK10",
    "GRAYSCALE", "NEGATIVE", "SEPIA", "CUSTOM",
)

VIDEO_SOURCES = ("SOURCE_UNSPECIFIED", "YOUTUBE", "DRIVE")

LINE_TYPES = (
    "TYPE_UNSPECIFIED", "STRAIGHT_CONNECTOR_1", "BENT_CONNECTOR_2",
    "BENT_CONNECTOR_3", "BENT_CONNECTOR_4", "BENT_CONNECTOR_5",
    "CURVED_CONNECTOR_2", "CURVED_CONNECTOR_3", "CURVED_CONNECTOR_4",
    "CURVED_CONNECTOR_5", "STRAIGHT_LINE",
)

LINE_CATEGORIES = ("LINE_CATEGORY_UNSPECIFIED", "STRAIGHT", "BENT", "CURVED")

# Deprecated ``CreateLineRequest.lineCategory`` has no unspecified member.
LEGACY_LINE_CATEGORIES = ("STRAIGHT", "BENT", "CURVED")

ARROW_STYLES = (
    "ARROW_STYLE_UNSPECIFIED", "NONE", "STEALTH_ARROW", "FILL_ARROW",
    "FILL_CIRCLE", "FILL_SQUARE", "FILL_DIAMOND", "OPEN_ARROW", "OPEN_CIRCLE",
    "OPEN_SQUARE", "OPEN_DIAMOND",
)

PREDEFINED_LAYOUTS = (
    "PREDEFINED_LAYOUT_UNSPECIFIED", "BLANK", "CAPTION_ONLY", "TITLE",
    "TITLE_AND_BODY", "TITLE_AND_TWO_COLUMNS", "TITLE_ONLY", "SECTION_HEADER",
    "SECTION_TITLE_AND_DESCRIPTION", "ONE_COLUMN_TEXT", "MAIN_POINT",
    "BIG_NUMBER",
)

APPLY_MODES = ("APPLY_MODE_UNSPECIFIED", "RELATIVE", "ABSOLUTE")

RANGE_TYPES = ("RANGE_TYPE_UNSPECIFIED", "FIXED_RANGE", "FROM_START_INDEX", "ALL")

LINKING_MODES = ("NOT_LINKED_IMAGE", "LINKED")

BULLET_PRESETS = (
    "BULLET_DISC_CIRCLE_SQUARE", "BULLET_DIAMONDX_ARROW3D_SQUARE",
    "BULLET_CHECKBOX", "BULLET_ARROW_DIAMOND_DISC", "BULLET_STAR_CIRCLE_SQUARE",
    "BULLET_ARROW3D_CIRCLE_SQUARE", "BULLET_LEFTTRIANGLE_DIAMOND_DISC",
    "BULLET_DIAMONDX_HOLLOWDIAMOND_SQUARE", "BULLET_DIAMOND_CIRCLE_SQUARE",
    "NUMBERED_DIGIT_ALPHA_ROMAN", "NUMBERED_DIGIT_ALPHA_ROMAN_PARENS",
    "NUMBERED_DIGIT_NESTED", "NUMBERED_UPPERALPHA_ALPHA_ROMAN",
    "NUMBERED_UPPERROMAN_UPPERALPHA_DIGIT", "NUMBERED_ZERODIGIT_ALPHA_ROMAN",
)

# Deprecated ``ReplaceAllShapesWithImageRequest.replaceMethod``.
REPLACE_METHODS = ("CENTER_INSIDE", "CENTER_CROP")

IMAGE_REPLACE_METHODS = ("IMAGE_REPLACE_METHOD_UNSPECIFIED", "CENTER_INSIDE", "CENTER_CROP")

TABLE_BORDER_POSITIONS = (
    "ALL", "BOTTOM", "INNER", "INNER_HORIZONTAL", "INNER_VERTICAL", "LEFT",
    "OUTER", "RIGHT", "TOP",
)

Z_ORDER_OPERATIONS = (
    "Z_ORDER_OPERATION_UNSPECIFIED", "BRING_TO_FRONT", "BRING_FORWARD",
    "SEND_BACKWARD", "SEND_TO_BACK",
)

THUMBNAIL_SIZES = ("THUMBNAIL_SIZE_UNSPECIFIED", "LARGE", "MEDIUM", "SMALL")

THUMBNAIL_MIME_TYPES = ("PNG",)
