# src/charfreq/config.py

# Bytes are decoded one-to-one into single characters (0x00-0xFF).
BYTE_ENCODING = "latin-1"

SPACE = " "
SPACE_DISPLAY = "' '"

LINE_TERMINATOR = b"\n"

OPEN_ERROR_TEMPLATE = "Error opening file '{path}': {reason}"

REPORT_HEADER = "Character Frequencies:"
MOST_COMMON_LABEL = "Most common non-space character(s):"
LEAST_COMMON_LABEL = "Least common non-space character(s):"
MEAN_LABEL = "Mean frequency:"
MEDIAN_LABEL = "Median frequency:"
STD_DEV_LABEL = "Standard deviation:"
NO_NON_SPACE_MESSAGE = "No non-space characters found."
