"""Common literal values used across snippet_pages.

These constants keep filenames, markup fragments, and tag names centralized so
the assembler, templates, and tests can import the same values without
drifting. Intended for internal use within the snippet_pages package.

Examples
--------
>>> from snippet_pages import _constants
>>> _constants.UNCATEGORIZED
'Uncategorized'
>>> _constants.STATIC_PART_START
'index-start.html'
"""

UNCATEGORIZED = "Uncategorized"
ADVANCED_TAG = "advanced"

STATIC_PART_START = "index-start.html"
STATIC_PART_END = "index-end.html"

BUILD_COMMIT_PATTERN = r"^Travis build: \d+"
COMMIT_MESSAGE_ENV_VAR = "TRAVIS_COMMIT_MESSAGE"
CI_ENV_VARS = ("CI", "TRAVIS")

MAIN_REGION_OPEN = (
    '</nav><main class="col-sm-12 col-md-8 col-lg-9" '
    'style="height: 100%;overflow-y: auto; background: #eceef2; padding: 0;">'
    '<a id="top">&nbsp;</a>'
)
SHOW_EXAMPLES_LABEL = '<label class="collapse">Show examples</label>'
ADVANCED_BADGE = '<mark class="tag">advanced</mark>'
