from __future__ import annotations

import string

# Order is part of the wire format: keys and ciphertexts from other
# implementations only line up if this exact sequence is used.
DEFAULT_ALPHABET: str = (
    string.ascii_uppercase
    + string.ascii_lowercase
    + string.digits
    + "!@#$%^&*()_+-=[]{}|;:,.<>?"
)
