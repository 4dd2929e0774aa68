"""Constants"""

ROW_WIDTH = 64
NULL_CHAR = "\0"
SPACE = " "

CHARSET_FILE = "charset.utf8"
COMPOUND_CHARS_FILE = "compound_chars.map"
