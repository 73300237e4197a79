"""Common literal values used across mjml_compiler.

These constants keep Outlook conditional markers, default fonts and layout
defaults centralized so components, the compiler and tests can import the same
values without drifting. Intended for internal use within the package.

Examples
--------
>>> from mjml_compiler import _constants
>>> _constants.DEFAULT_BREAKPOINT
'480px'
>>> _constants.START_CONDITIONAL_TAG + _constants.END_CONDITIONAL_TAG
'<!--[if mso | IE]><![endif]-->'
"""

DEFAULT_CONTAINER_WIDTH = 600
DEFAULT_BREAKPOINT = "480px"
DEFAULT_LANGUAGE = "und"
DEFAULT_DIRECTION = "auto"

DEFAULT_FONTS: dict[str, str] = {
    "Open Sans": "https://fonts.googleapis.com/css?family=Open+Sans:300,400,500,700",
    "Droid Sans": "https://fonts.googleapis.com/css?family=Droid+Sans:300,400,500,700",
    "Lato": "https://fonts.googleapis.com/css?family=Lato:300,400,500,700",
    "Roboto": "https://fonts.googleapis.com/css?family=Roboto:300,400,500,700",
    "Ubuntu": "https://fonts.googleapis.com/css?family=Ubuntu:300,400,500,700",
}

START_CONDITIONAL_TAG = "<!--[if mso | IE]>"
END_CONDITIONAL_TAG = "<![endif]-->"
START_MSO_CONDITIONAL_TAG = "<!--[if mso]>"
START_NEGATION_CONDITIONAL_TAG = "<!--[if !mso | IE]><!-->"
START_MSO_NEGATION_CONDITIONAL_TAG = "<!--[if !mso]><!-->"
END_NEGATION_CONDITIONAL_TAG = "<!--<![endif]-->"

# Component data slots shared between publishers and their descendants.
ACCORDION_SLOT = "accordion"
NAVBAR_SLOT = "navbar"
GAP_SLOT = "gap"
GROUP_SLOT = "group"

CLASS_DEFAULTS_KEY = "__defaults"

__all__ = [
    "ACCORDION_SLOT",
    "CLASS_DEFAULTS_KEY",
    "DEFAULT_BREAKPOINT",
    "DEFAULT_CONTAINER_WIDTH",
    "DEFAULT_DIRECTION",
    "DEFAULT_FONTS",
    "DEFAULT_LANGUAGE",
    "END_CONDITIONAL_TAG",
    "END_NEGATION_CONDITIONAL_TAG",
    "GAP_SLOT",
    "GROUP_SLOT",
    "NAVBAR_SLOT",
    "START_CONDITIONAL_TAG",
    "START_MSO_CONDITIONAL_TAG",
    "START_MSO_NEGATION_CONDITIONAL_TAG",
    "START_NEGATION_CONDITIONAL_TAG",
]
