"""Short code generation utilities."""

import secrets
import string
from typing import Optional


class ShortCodeGenerator:
    """Generate random short codes for URLs."""

    # Lowercase hex (0-9a-f), 4 bits per character
    HEX_CHARS = string.digits + "abcdef"

    # Base62 characters (alphanumeric, case-sensitive)
    BASE62_CHARS = string.ascii_letters + string.digits  # a-zA-Z0-9

    ALPHABETS = {
        "hex": HEX_CHARS,
        "base62": BASE62_CHARS,
    }

    def __init__(self, default_length: int = 6, alphabet: str = "hex"):
        """Initialize short code generator.

        Args:
            default_length: Default length for generated codes
            alphabet: Name of the alphabet to draw from ("hex" or "base62")

        Raises:
            ValueError: If the alphabet name is unknown or length is not positive
        """
        if alphabet not in self.ALPHABETS:
            raise ValueError(
                f"Unknown alphabet '{alphabet}' (expected one of: {', '.join(self.ALPHABETS)})"
            )
        if default_length < 1:
            raise ValueError("Short code length must be positive")

        self.default_length = default_length
        self.alphabet_name = alphabet
        self.chars = self.ALPHABETS[alphabet]

    def generate_random(self, length: Optional[int] = None) -> str:
        """Generate a random short code.

        Characters are drawn with ``secrets`` so codes are not predictable
        from earlier ones.

        Args:
            length: Length of the code (uses default if not specified)

        Returns:
            Random short code
        """
        length = length or self.default_length
        return ''.join(secrets.choice(self.chars) for _ in range(length))

    def code_space_size(self, length: Optional[int] = None) -> int:
        """Number of distinct codes this generator can produce."""
        length = length or self.default_length
        return len(self.chars) ** length

    def is_valid_format(self, code: str) -> bool:
        """Check if code has the generator's length and alphabet.

        Args:
            code: Code to validate

        Returns:
            True if valid format
        """
        if not isinstance(code, str) or len(code) != self.default_length:
            return False
        return all(c in self.chars for c in code)
