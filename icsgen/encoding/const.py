"""Constants for ics encoding library."""

# Related to rfc5545 text encoding
FOLD_LEN = 75
FOLD_INDENT = " "
CRLF = "\r\n"
FOLD = CRLF + FOLD_INDENT
ENCODING = "utf-8"
ATTR_BEGIN = "BEGIN"
ATTR_END = "END"
