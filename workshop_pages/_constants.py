"""Common literal values used across workshop_pages.

These constants keep filenames and output locations centralized so the
builder, templates, and tests can import the same values without drifting.
Intended for internal use within the workshop_pages package.

Examples
--------
>>> from workshop_pages import _constants
>>> _constants.TASKS_SUBDIR
'tasks'
>>> _constants.VENDOR_CSS_RELPATH.as_posix()
'css/github-markdown.css'
"""

from pathlib import PurePosixPath

MARKDOWN_SUFFIX = ".md"
HTML_SUFFIX = ".html"
TASKS_SUBDIR = "tasks"
TASKS_INDEX_FILENAME = "tasks.html"
VENDOR_CSS_RELPATH = PurePosixPath("css/github-markdown.css")
DEFAULT_CSS_VENDOR_PATH = (
    "node_modules/github-markdown-css/github-markdown-light.css"
)
