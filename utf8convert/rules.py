"""
Fixed conversion rules.

Constants only; nothing here is mutated at runtime.
"""

OUTPUT_ENCODING = "utf-8"

# Labels whose bytes are returned untouched (compared case-insensitively).
UTF8_LABELS = ("utf-8", "utf8", "us-ascii")

# One of these may sit between a family name and its number ("UTF-16", "cp_1252").
LABEL_SEPARATORS = "-_ "

# Output is accumulated in chunks of this many bytes.
CHUNK_SIZE = 1024
# Longest UTF-8 encoding of a single codepoint.
ENCODE_HEADROOM = 4

# Longest charset label the HTTP service accepts.
MAX_LABEL_LENGTH = 64
