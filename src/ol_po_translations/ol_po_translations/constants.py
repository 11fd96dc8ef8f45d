"""Constants for PO translation analysis, validation and merging."""

import re

# Entry flag marking an approximate translation that needs review
FUZZY_FLAG = "fuzzy"

# Obsolete "previous value" comment lines (#~| msgid "...") are stripped
# before parsing
OBSOLETE_PREVIOUS_VALUE_MARKER = "#~|"

# polib default line wrapping for serialized PO files
DEFAULT_WRAP_WIDTH = 78

# Length-ratio check bounds (translation length / source length)
MIN_LENGTH_RATIO = 0.3
MAX_LENGTH_RATIO = 3.0

# JSON output indentation for management commands
DEFAULT_JSON_INDENT = 2

# Pattern categories
PATTERN_PLACEHOLDERS = "placeholders"
PATTERN_TAGS = "tags"
PATTERN_LINKS = "links"
PATTERN_CODE = "code"

PATTERN_CATEGORIES = (
    PATTERN_PLACEHOLDERS,
    PATTERN_TAGS,
    PATTERN_LINKS,
    PATTERN_CODE,
)

# Python old-style keyed placeholders: %(name)s
PYTHON_KEYED_PLACEHOLDER_RE = re.compile(r"%\([^)]+\)[diouxXeEfFgGcrs]")

# Python brace-format placeholders: {0}, {name}
PYTHON_BRACE_PLACEHOLDER_RE = re.compile(r"\{[^}]*\}")

# Template variables: {{ variable }}
TEMPLATE_VARIABLE_RE = re.compile(r"\{\{[^}]+\}\}")

# Template tags: {% tag %}
TEMPLATE_TAG_RE = re.compile(r"\{%[^%]+%\}")

# HTML-like markup tags
HTML_TAG_RE = re.compile(r"<[^>]+>")

# Links with a protocol or a bare www. prefix
URL_RE = re.compile(r"https?://[^\s<>\"]+|www\.[^\s<>\"]+")

# Script snippets: a call whose argument list contains a quote, or a dotted
# call. Natural-language asides like "Word (Description)" do not match.
INLINE_CODE_RE = re.compile(
    r"(?:[a-z_$][\w$]*\.)*[a-z_$][\w$]*\s*\([^)]*['\"`]"
    r"|(?:[a-z_$][\w$]*\.)+[a-z_$][\w$]*\s*\([^)]*\)",
    re.IGNORECASE,
)

# Category -> patterns whose matches are unioned within the category
PATTERN_TABLE = {
    PATTERN_PLACEHOLDERS: (
        PYTHON_KEYED_PLACEHOLDER_RE,
        PYTHON_BRACE_PLACEHOLDER_RE,
        TEMPLATE_VARIABLE_RE,
        TEMPLATE_TAG_RE,
    ),
    PATTERN_TAGS: (HTML_TAG_RE,),
    PATTERN_LINKS: (URL_RE,),
    PATTERN_CODE: (INLINE_CODE_RE,),
}
