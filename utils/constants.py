"""Blurhash format constants."""

# Printable alphabet for the base-83 digits. Order is part of the wire format.
BASE83_ALPHABET = (
    "0123456789"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    "#$%*+,-.:;=?@[]^_{|}~"
)

MIN_COMPONENTS = 1
MAX_COMPONENTS = 9

# size flag (1) + max AC (1) + DC (4)
HEADER_LENGTH = 6
SIZE_FLAG_DIGITS = 1
MAX_AC_DIGITS = 1
DC_DIGITS = 4
AC_DIGITS = 2

# AC magnitude is stored in 83 steps of 1/166
AC_MAX_SCALE = 166.0
AC_MAX_LEVELS = 82

# Each AC channel is stored in 19 levels centred on 9
AC_LEVELS = 19
AC_HALF_RANGE = 9

DEFAULT_X_COMPONENTS = 4
DEFAULT_Y_COMPONENTS = 3
DEFAULT_PUNCH = 1.0
DEFAULT_TRANSFORM_TIMEOUT_S = 60.0
