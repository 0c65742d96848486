import sys
import argparse
from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional

__version__ = "1.0.0"

ALPHABET_SIZE = 26
DEFAULT_KEY = 3
ROT13_KEY = 13

# Verbose mode (disabled by default, enabled with --verbose)
VERBOSE = False

def log_info(msg: str):
    """Print info message only if verbose mode is enabled."""
    if VERBOSE:
        print(f"[INFO] {msg}", file=sys.stderr)

def log_warn(msg: str):
    """Print warning message only if verbose mode is enabled."""
    if VERBOSE:
        print(f"[WARN] {msg}", file=sys.stderr)

# ==========================================
#  CORE: Caesar Shift Engine
# ==========================================

def _shift(text: str, shift: int) -> str:
    result = []
    for char in text:
        if 'A' <= char <= 'Z':
            result.append(chr((ord(char) - ord('A') + shift) % ALPHABET_SIZE + ord('A')))
        elif 'a' <= char <= 'z':
            result.append(chr((ord(char) - ord('a') + shift) % ALPHABET_SIZE + ord('a')))
        else:
            result.append(char)
    return ''.join(result)


class CipherEngine:
    """
    Caesar shift over the ASCII letters.

    The key is normalized modulo 26 on construction and cannot be changed
    afterwards, so one engine can be shared freely between callers.
    Upper and lower case letters rotate within their own range; every other
    character (digits, punctuation, whitespace, non-ASCII) passes through.
    """

    __slots__ = ('_key',)

    def __init__(self, key: int):
        if isinstance(key, bool) or not isinstance(key, int):
            raise TypeError(f"Key must be an integer, not {type(key).__name__}")
        self._key = key % ALPHABET_SIZE
        if self._key != key:
            log_info(f"Key {key} normalized to {self._key}.")

    @property
    def key(self) -> int:
        """The normalized shift, in the range [0, 25]."""
        return self._key

    def encrypt(self, text: str) -> str:
        return _shift(text, self._key)

    def decrypt(self, text: str) -> str:
        return _shift(text, (ALPHABET_SIZE - self._key) % ALPHABET_SIZE)

    def __eq__(self, other):
        if not isinstance(other, CipherEngine):
            return NotImplemented
        return self._key == other._key

    def __hash__(self):
        return hash((CipherEngine, self._key))

    def __repr__(self):
        return f"CipherEngine(key={self._key})"

# ==========================================
#  MESSAGE: Plain / Cipher Text Wrapper
# ==========================================

class Kind(Enum):
    PLAIN = "plain"
    CIPHER = "cipher"


class Message:
    """
    Text tagged with whether it is plain text or cipher text.

    translate() picks the direction from the kind: plain text is encrypted,
    cipher text is decrypted.
    """

    def __init__(self, text: str, kind: Kind):
        if not isinstance(kind, Kind):
            raise TypeError(f"Expected a Kind, got {kind!r}")
        self.text = text
        self.kind = kind

    def translate(self, key: int) -> str:
        engine = CipherEngine(key)
        if self.kind is Kind.PLAIN:
            return engine.encrypt(self.text)
        return engine.decrypt(self.text)

    def __repr__(self):
        return f"Message({self.text!r}, {self.kind})"

# ==========================================
#  FRAMEWORK: Abstract Base Class & Registry
# ==========================================

class CipherStrategy(ABC):
    """Abstract base class that all ciphers must implement."""

    @property
    @abstractmethod
    def name(self) -> str:
        """The command-line name for this cipher."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Short description for help text."""
        pass

    @abstractmethod
    def encode(self, text: str) -> str:
        pass

    @abstractmethod
    def decode(self, text: str) -> str:
        pass

CIPHER_REGISTRY = {}

def register_cipher(cls):
    """Decorator to auto-register cipher classes by name."""
    CIPHER_REGISTRY[cls.name] = cls
    return cls


@register_cipher
class CaesarCipher(CipherStrategy):
    name = "caesar"
    description = "Shifts ASCII letters by the given key (default 3). Other characters pass through."

    def __init__(self, key: int = DEFAULT_KEY):
        self.engine = CipherEngine(key)

    @property
    def key(self) -> int:
        return self.engine.key

    def encode(self, text: str) -> str:
        return Message(text, Kind.PLAIN).translate(self.key)

    def decode(self, text: str) -> str:
        return Message(text, Kind.CIPHER).translate(self.key)


@register_cipher
class Rot13Cipher(CaesarCipher):
    """
    ROT13: the Caesar shift with key 13.

    Shifting twice by 13 covers the whole alphabet, so encode and decode
    produce the same output.
    """

    name = "rot13"
    description = "Caesar shift fixed at 13. Its own inverse; --key is ignored."

    def __init__(self, key: int = ROT13_KEY):
        if key != ROT13_KEY:
            log_warn(f"rot13 always uses key {ROT13_KEY}; ignoring key {key}.")
        super().__init__(ROT13_KEY)

# ==========================================
#  CLI LOGIC
# ==========================================

def list_ciphers():
    """Print all available ciphers."""
    print("\nAvailable Ciphers:")
    print("=" * 60)
    for name, cipher_cls in CIPHER_REGISTRY.items():
        print(f"  {name:<12} {cipher_cls.description}")
    print("=" * 60)
    print(f"\nTotal: {len(CIPHER_REGISTRY)} cipher(s) registered.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="caesar-engine",
        description=f"Caesar Cipher Engine v{__version__}",
        formatter_class=argparse.RawTextHelpFormatter
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    method_help = "\n".join(f"  {k:<12}: {v.description}" for k, v in CIPHER_REGISTRY.items())

    parser.add_argument("-m", "--method", choices=list(CIPHER_REGISTRY.keys()), default="caesar",
                        help=f"Select cipher (default: caesar).\n{method_help}")

    parser.add_argument("-k", "--key", type=int, metavar="N",
                        help=f"Shift amount (default: {DEFAULT_KEY}). Normalized modulo {ALPHABET_SIZE}.")

    # Main action group
    action_group = parser.add_mutually_exclusive_group(required=True)
    action_group.add_argument("-e", "--encode", action="store_true", help="Encrypt plain text")
    action_group.add_argument("-d", "--decode", action="store_true", help="Decrypt cipher text")
    action_group.add_argument("-l", "--list", action="store_true", help="List all available ciphers")

    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable verbose output (info and warning messages)")

    # I/O options
    io_group = parser.add_mutually_exclusive_group()
    io_group.add_argument("-t", "--text", help="Direct text input")
    io_group.add_argument("-i", "--input", help="Input file path")

    parser.add_argument("-o", "--output", help="Output file path")

    return parser


def read_input(args) -> str:
    if args.text is not None:
        return args.text
    if args.input:
        log_info(f"Reading input from {args.input}")
        try:
            with open(args.input, "r", encoding="utf-8") as f:
                return f.read()
        except FileNotFoundError:
            sys.exit(f"Error: File '{args.input}' not found.")
        except OSError as e:
            sys.exit(f"Error reading input: {e}")
    if sys.stdin.isatty():
        print("[CIPHER] Paste input below. Ctrl+D (Unix) or Ctrl+Z (Win) to end:")
        try:
            return sys.stdin.read()
        except KeyboardInterrupt:
            sys.exit(0)
    return sys.stdin.read()


def main(argv: Optional[List[str]] = None):
    global VERBOSE

    parser = build_parser()
    args = parser.parse_args(argv)
    VERBOSE = args.verbose

    if args.list:
        list_ciphers()
        return 0

    cipher_cls = CIPHER_REGISTRY[args.method]
    cipher = cipher_cls() if args.key is None else cipher_cls(args.key)
    log_info(f"Using {cipher.name} with key {cipher.key}.")

    source_text = read_input(args)

    if args.encode:
        result = cipher.encode(source_text)
    else:
        result = cipher.decode(source_text)

    if args.output:
        try:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(result)
        except OSError as e:
            sys.exit(f"Error writing output: {e}")
        log_info(f"Wrote {len(result)} character(s) to {args.output}")
    else:
        print(result, end="" if result.endswith("\n") else "\n")
    return 0

if __name__ == "__main__":
    sys.exit(main())
